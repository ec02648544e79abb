"""
Base schema classes and standard response wrappers.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "MessageResponse",
    "ErrorResponse",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    from_attributes lets ORM instances and SQLAlchemy row mappings be
    validated directly; populate_by_name lets camelCase aliased fields be
    filled by their Python names.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for request bodies; unknown fields are ignored."""
    pass


class MessageResponse(BaseSchema):
    """Standard success response."""

    success: bool = Field(default=True, description="Success flag")
    message: str = Field(..., description="Response message")


class ErrorResponse(BaseSchema):
    """Error body produced by the exception handlers."""

    error: str
    code: str
    details: Optional[dict] = None
