"""
Custom Exceptions for the HostelCare API

Every exception carries an HTTP status and a stable error code so the
exception handlers can render a consistent error body.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONFLICT = "CONFLICT"
    INVALID_STATE = "INVALID_STATE"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the API error body"""
        body: Dict[str, Any] = {
            "error": self.message,
            "code": self.error_code.value,
        }
        if self.details:
            body["details"] = self.details
        return body

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


class ValidationError(BaseAppException):
    """Malformed input, or a referenced entity not in the required state"""

    status_code = 400
    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Validation failed"


class AuthenticationError(BaseAppException):
    """Credential check failed"""

    status_code = 401
    error_code = ErrorCode.AUTHENTICATION_FAILED
    default_message = "Invalid credentials"


class NotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    status_code = 404
    error_code = ErrorCode.RESOURCE_NOT_FOUND
    default_message = "Resource not found"

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id is not None:
                message += f" (ID: {resource_id})"
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(message, {"resource_type": resource_type, "resource_id": resource_id})


class ConflictError(BaseAppException):
    """Invariant violation: duplicate active allocation, room at capacity, duplicate key"""

    status_code = 409
    error_code = ErrorCode.CONFLICT
    default_message = "Conflict with current state"


class InvalidStateError(BaseAppException):
    """Action attempted on a resolved or otherwise terminal entity"""

    status_code = 409
    error_code = ErrorCode.INVALID_STATE
    default_message = "Invalid state for this operation"


class InternalError(BaseAppException):
    """Store or transport failure"""

    status_code = 500
    error_code = ErrorCode.INTERNAL_ERROR
    default_message = "Internal server error"
