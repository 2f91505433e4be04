"""Request body validation for Flask views.

``@validate_request`` looks at the view's signature. A parameter annotated
with a pydantic model is built from the request body (JSON, or form data for
HTML forms) and passed in; other parameters (path variables) pass through
unchanged.

    @auth_bp.post("/signup")
    @validate_request
    def signup(data: UserCreate):
        ...
"""

import inspect
from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..exceptions import ValidationError

# Never echo these back in error details
_REDACTED_FIELDS = {"password"}


def _find_model_param(func) -> tuple[str, type[BaseModel]] | None:
    hints = get_type_hints(func)
    for name in inspect.signature(func).parameters:
        hint = hints.get(name)
        if inspect.isclass(hint) and issubclass(hint, BaseModel):
            return name, hint
    return None


def _request_body() -> dict:
    if request.is_json:
        body = request.get_json(silent=True)
        if body is None:
            raise ValidationError("Request body must be valid JSON")
        if not isinstance(body, dict):
            raise ValidationError(
                "Request body must be a JSON object",
                {"received_type": type(body).__name__}
            )
        return body
    return request.form.to_dict()


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        }
        for err in exc.errors()
    ]


def validate_request(func):
    """
    Validate the request body against the view's pydantic model parameter.

    Raises:
        ValidationError: If the body is missing, not an object, or invalid.
            Details contain ``model``, ``received`` (passwords redacted) and
            ``errors`` as a list of ``{field, message, expected_type}``.
    """
    model_param = _find_model_param(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if model_param is None:
            return func(*args, **kwargs)

        name, model = model_param
        body = _request_body()
        try:
            kwargs[name] = model.model_validate(body)
        except PydanticValidationError as e:
            received = {
                key: ("***" if key in _REDACTED_FIELDS else value)
                for key, value in body.items()
            }
            raise ValidationError(
                "Invalid request data",
                {
                    "model": model.__name__,
                    "received": received,
                    "errors": _format_errors(e),
                }
            )
        return func(*args, **kwargs)

    return wrapper
