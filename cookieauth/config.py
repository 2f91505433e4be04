"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .roles import Role


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # JWT Configuration
    # No default secret: startup fails with ConfigurationError until JWT_SECRET is set
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_expiry_seconds: int = 60 * 60

    # Session cookie
    cookie_name: str = "token"
    cookie_secure: bool = False
    cookie_samesite: str = "Lax"

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 10

    # Role given to every newly registered user
    default_role: Role = Role.STANDARD

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
