"""Application error types.

Every error carries the message returned to the caller and the HTTP status
it maps to. Handlers in ``restapi.router`` turn them into JSON responses of
the form ``{"message": ...}``.
"""

from fastapi import status


class KodBankError(Exception):
    """Base exception for application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(KodBankError):
    """Missing or duplicate input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request payload"


class AuthenticationError(KodBankError):
    """Bad credentials or a missing, invalid or expired session token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class NotFoundError(KodBankError):
    """Record vanished between token issuance and lookup."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConfigurationError(KodBankError):
    """Required setting is absent."""
    default_message = "Server is not configured"


class UpstreamError(KodBankError):
    """External provider unreachable or returned something unusable."""
    default_message = "Failed to communicate with AI provider."
