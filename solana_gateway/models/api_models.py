"""
API response models for the Solana gateway.

This module defines the envelope every endpoint responds with, so that
success and failure look the same to clients regardless of the route.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_serializer, model_validator

# Type variable for response data
T = TypeVar('T')


class ApiResponse(BaseModel, Generic[T]):
    """
    Standard API response envelope.

    ``success`` decides which of ``data`` and ``error`` is present: a
    successful response never carries ``error`` and a failed one never
    carries ``data``. The absent key is omitted from the serialized form.
    """
    success: bool = Field(
        True,
        description="Whether the request was successful"
    )
    data: Optional[T] = Field(
        None,
        description="Response data payload"
    )
    error: Optional[str] = Field(
        None,
        description="Human-readable error message if success is false"
    )

    @model_validator(mode="after")
    def check_data_or_error(self) -> "ApiResponse[T]":
        """Ensure the envelope carries exactly what ``success`` implies."""
        if self.success and self.error is not None:
            raise ValueError("Error message should only be provided when success is false")
        if not self.success:
            if self.error is None:
                raise ValueError("Error message must be provided when success is false")
            if self.data is not None:
                raise ValueError("Data must not be provided when success is false")
        return self

    @model_serializer(mode="wrap")
    def serialize_envelope(self, handler):
        """Drop whichever of ``data``/``error`` does not apply."""
        payload = handler(self)
        payload.pop("error" if self.success else "data", None)
        return payload

    @classmethod
    def success_response(cls, data: Optional[T] = None) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(success=True, data=data)

    @classmethod
    def error_response(cls, message: str) -> "ApiResponse[Any]":
        """Create an error response."""
        return cls(success=False, error=message)
