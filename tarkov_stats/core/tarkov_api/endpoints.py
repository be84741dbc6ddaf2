"""Tarkov player API endpoint definitions."""

from urllib.parse import urlsplit

import structlog

from .errors import InvalidRequestError

logger = structlog.get_logger(__name__)


class TarkovAPIEndpoints:
    """Tarkov player API endpoint definitions and routing."""

    def __init__(self, base_url: str):
        """
        Initialize endpoint configuration.

        Args:
            base_url: Root of the profile service, e.g. https://players.tarkov.dev/profile

        Raises:
            InvalidRequestError: If the base URL is not an absolute http(s) URL
        """
        parts = urlsplit(base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidRequestError(f"Invalid URL: {base_url!r}")
        self.base_url = base_url.rstrip("/")

    def search_index(self) -> str:
        """Account id to nickname index endpoint."""
        return f"{self.base_url}/index.json"

    def profile(self, account_id: str) -> str:
        """Single profile endpoint.

        Raises:
            InvalidRequestError: If the account id is not a non-empty run of digits
        """
        normalized = validate_account_id(account_id)
        return f"{self.base_url}/{normalized}.json"


def is_account_id(text: str) -> bool:
    """Check whether trimmed text looks like a numeric account id."""
    stripped = text.strip()
    return bool(stripped) and stripped.isascii() and stripped.isdigit()


def validate_account_id(account_id: str) -> str:
    """Return the trimmed account id, or raise InvalidRequestError."""
    if not isinstance(account_id, str) or not is_account_id(account_id):
        logger.debug("Rejected malformed account id", account_id=account_id)
        raise InvalidRequestError("Invalid URL")
    return account_id.strip()
