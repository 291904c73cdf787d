"""
Failure kinds raised by the marketplace services.

Each error carries the HTTP status it maps to; the handler registered in
``hireme.main`` renders them as ``{"message": ..., "detail": ...}``.
"""
from typing import Any


class AppError(Exception):
    status_code: int = 500
    code: str = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(AppError):
    status_code = 401
    code = "unauthenticated"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class Forbidden(AppError):
    status_code = 403
    code = "forbidden"


class NotFound(AppError):
    status_code = 404
    code = "not_found"


class AlreadyExists(AppError):
    status_code = 409
    code = "already_exists"


class ValidationFailed(AppError):
    status_code = 422
    code = "validation"


class BackendUnavailable(AppError):
    status_code = 503
    code = "backend_unavailable"


def require_fields(**values: Any) -> None:
    """Raise ValidationFailed naming every blank or missing field."""
    missing = [
        name for name, value in values.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationFailed(f"Missing required fields: {', '.join(missing)}")
