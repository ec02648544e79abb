from hostelcare.core.exceptions import (
    AuthenticationError,
    BaseAppException,
    ConflictError,
    ErrorCode,
    InternalError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "BaseAppException",
    "ConflictError",
    "ErrorCode",
    "InternalError",
    "InvalidStateError",
    "NotFoundError",
    "ValidationError",
]
