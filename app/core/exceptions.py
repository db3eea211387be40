"""
Custom exception hierarchy for the payment adapter.

All application-level exceptions inherit from AppException so they can be
caught by a single global handler.
"""


class AppException(Exception):
    """Base for all app exceptions."""

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        details: dict | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProviderNotFoundError(AppException):
    """Raised when no payment service provider exists for the given id."""

    def __init__(self, provider_id: str):
        super().__init__(
            status_code=404,
            error_code="PROVIDER_NOT_FOUND",
            message=f"Payment service provider '{provider_id}' not found",
            details={"provider_id": provider_id},
        )


class SecretDecryptionError(AppException):
    """Raised when a stored provider secret cannot be decrypted."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(
            status_code=500,
            error_code="SECRET_DECRYPTION_ERROR",
            message=message,
            details=details,
        )


class ExternalServiceError(AppException):
    """Raised when an external API call fails."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(
            status_code=502,
            error_code="EXTERNAL_SERVICE_ERROR",
            message=message,
            details=details,
        )


class GatewayTransportError(ExternalServiceError):
    """Raised when the PayNL REST API cannot be reached."""
