"""Custom error classes for the Tarkov player API client."""

from typing import Optional


class TarkovAPIError(Exception):
    """Base exception for player API errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        """
        Initialize TarkovAPIError.

        Args:
            message: Human-readable error message
            status_code: HTTP status code, when the failure came from a response
            url: Requested URL, when known
        """
        super().__init__(message)
        self.message: str = message
        self.status_code: Optional[int] = status_code
        self.url: Optional[str] = url

    def __str__(self) -> str:
        """Return the message shown to the user."""
        return self.message


class InvalidRequestError(TarkovAPIError):
    """Malformed account id or URL - request was never sent."""

    def __init__(self, message: str = "Invalid URL", **kwargs) -> None:
        super().__init__(message, **kwargs)


class NetworkError(TarkovAPIError):
    """Transport failure or unexpected HTTP status."""

    def __init__(self, detail: str, **kwargs) -> None:
        super().__init__(f"Network error: {detail}", **kwargs)
        self.detail = detail


class DecodingError(TarkovAPIError):
    """Payload is not valid JSON or does not match the expected schema."""

    def __init__(self, detail: str, **kwargs) -> None:
        super().__init__(f"Data error: {detail}", **kwargs)
        self.detail = detail


class PlayerNotFoundError(TarkovAPIError):
    """Profile endpoint answered 404 - account doesn't exist."""

    def __init__(self, message: str = "Player not found", **kwargs) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(message, **kwargs)
