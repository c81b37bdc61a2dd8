"""Error taxonomy for the contact relay.

Every error carries the HTTP status it is reported with, a short message and
optional details. The FastAPI exception handler in `relay.main` renders them
as `{"error": message, "details": details}`.
"""

from typing import Any, Optional

from fastapi import status


class RelayError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_content(self) -> dict:
        content = {"error": self.message}
        if self.details is not None:
            content["details"] = self.details
        return content


class ValidationError(RelayError):
    """Caller-supplied data failed a required-field or format check."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(RelayError):
    """The relay is missing operational configuration."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamError(RelayError):
    """The email provider call failed.

    Use `UpstreamError.from_status` to decode a provider failure into one of
    the concrete variants below.
    """

    @staticmethod
    def from_status(
        status_code: Optional[int],
        payload: Optional[Any] = None,
        description: Optional[str] = None,
    ) -> "UpstreamError":
        """Map a provider failure to its variant.

        Args:
            status_code: HTTP status returned by the provider, or None when the
                request never got a response (network error, timeout)
            payload: Decoded response body from the provider, if any
            description: Human readable description of the failure

        Returns:
            UpstreamClientError for 400, UpstreamAuthError for 401 and
            UpstreamGenericError for everything else
        """
        if status_code == status.HTTP_400_BAD_REQUEST:
            return UpstreamClientError("Invalid request data", details=payload)
        if status_code == status.HTTP_401_UNAUTHORIZED:
            return UpstreamAuthError("Invalid Brevo API key")
        return UpstreamGenericError(
            "Failed to send email",
            details=description or f"Upstream responded with status {status_code}",
        )


class UpstreamClientError(UpstreamError):
    """The provider rejected the request shape."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamAuthError(UpstreamError):
    """The provider rejected the API key."""

    status_code = status.HTTP_401_UNAUTHORIZED


class UpstreamGenericError(UpstreamError):
    """Network failure, timeout or any other provider status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
