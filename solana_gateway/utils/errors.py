"""
Error types for the Solana gateway.

Every failure a handler can produce is one of these exceptions. The HTTP
layer turns them into error envelopes using ``status_code`` and ``message``;
``details`` are logged but never sent to the caller.
"""

from typing import Any, Dict, Optional

from fastapi import status


class GatewayError(Exception):
    """Base exception class for Solana gateway errors."""

    def __init__(
        self,
        message: str,
        code: str = "internal_error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary representation for logging."""
        error_dict = {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
        }
        if self.details:
            error_dict["details"] = self.details
        return error_dict


class MissingField(GatewayError):
    """A required request field was absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            message=f"Missing required field: {field}",
            code="missing_field",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"field": field}
        )


class InvalidFormat(GatewayError):
    """A field was present but malformed (key, signature, amount encoding)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="invalid_format",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class InvalidKeyFormat(InvalidFormat):
    """A string could not be parsed as an account reference."""

    def __init__(self, value: str, reason: str, field: Optional[str] = None):
        self.value = value
        self.reason = reason
        self.field = field
        super().__init__(
            f"Invalid {field or 'public key'}: {reason}",
            details={"value": value, "reason": reason, "field": field}
        )


class InvalidRange(GatewayError):
    """A numeric field was outside its accepted bounds."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="invalid_range",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class SemanticViolation(GatewayError):
    """Individually valid fields that make no sense together."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="semantic_violation",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class CollaboratorFailure(GatewayError):
    """The RPC node or the instruction builder rejected the operation."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ):
        super().__init__(
            message=message,
            code="collaborator_failure",
            status_code=status_code,
            details=details
        )


class FaucetFailure(CollaboratorFailure):
    """The faucet refused or failed to fund an account.

    Faucet exhaustion is something the caller can observe and act on, so it
    is reported as a client error.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            details=details,
            status_code=status.HTTP_400_BAD_REQUEST
        )


class ConfigurationError(GatewayError):
    """Error related to configuration issues."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="configuration_error",
            details=details
        )
