"""Tarkov player API HTTP client with error mapping and typed responses."""

import asyncio
from typing import Any, Dict, Optional, Type

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from tarkov_stats.core.config import get_global_settings
from .endpoints import TarkovAPIEndpoints
from .errors import (
    DecodingError,
    NetworkError,
    PlayerNotFoundError,
    TarkovAPIError,
)
from .models import PlayerProfile

logger = structlog.get_logger(__name__)

_INDEX_ADAPTER: TypeAdapter[Dict[str, str]] = TypeAdapter(Dict[str, str])


class TarkovAPIClient:
    """Read-only client for the public player profile service.

    No retries are performed here: a failed request surfaces to the caller,
    who decides whether to re-trigger it.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[httpx.Timeout] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the player API client.

        Args:
            base_url: Service root (uses config if None)
            timeout: httpx timeout policy (uses config if None)
            user_agent: User-Agent header (uses config if None)
            transport: Custom httpx transport, mainly for tests
        """
        settings = get_global_settings()
        self.endpoints = TarkovAPIEndpoints(base_url or settings.tarkov_api_base_url)
        self.timeout = timeout or httpx.Timeout(
            settings.http_read_timeout, connect=settings.http_connect_timeout
        )
        self.user_agent = user_agent or settings.user_agent
        self._transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> "TarkovAPIClient":
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    self.session = httpx.AsyncClient(
                        headers={
                            "Accept": "application/json",
                            "User-Agent": self.user_agent,
                        },
                        timeout=self.timeout,
                        transport=self._transport,
                        follow_redirects=True,
                    )
                    logger.info(
                        "Player API client session started",
                        base_url=self.endpoints.base_url,
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Player API client session closed")

    @staticmethod
    def _raise_for_status(
        response: httpx.Response,
        url: str,
        not_found_error: Optional[Type[TarkovAPIError]],
    ) -> None:
        """Raise the matching TarkovAPIError subclass for a non-2xx response."""
        status = response.status_code
        if 200 <= status < 300:
            return
        if status == 404 and not_found_error is not None:
            raise not_found_error(url=url)
        logger.warning("Unexpected HTTP status", status_code=status, url=url)
        raise NetworkError(f"HTTP {status}", status_code=status, url=url)

    async def _make_request(
        self,
        url: str,
        not_found_error: Optional[Type[TarkovAPIError]] = None,
    ) -> Any:
        """
        Issue a GET request and return the decoded JSON body.

        Args:
            url: Request URL
            not_found_error: Error raised on 404 instead of NetworkError

        Returns:
            Decoded JSON value

        Raises:
            NetworkError: Transport failure or unexpected status
            DecodingError: Body is not valid JSON
            TarkovAPIError: ``not_found_error`` on 404
        """
        await self.start_session()
        if self.session is None:
            raise NetworkError("Session not initialized", url=url)

        try:
            response = await self.session.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                "Player API request failed",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NetworkError(str(e) or type(e).__name__, url=url) from e

        self._raise_for_status(response, url, not_found_error)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Player API returned invalid JSON", url=url, error=str(e))
            raise DecodingError(str(e), url=url) from e

    async def get_search_index(self) -> Dict[str, str]:
        """Get the account id to nickname index."""
        url = self.endpoints.search_index()
        response = await self._make_request(url)
        try:
            return _INDEX_ADAPTER.validate_python(response)
        except ValidationError as e:
            logger.warning(
                "Search index did not match schema",
                url=url,
                error_count=e.error_count(),
            )
            raise DecodingError(_summarize(e), url=url) from e

    async def get_profile(self, account_id: str) -> PlayerProfile:
        """Get a player profile by account id."""
        url = self.endpoints.profile(account_id)
        response = await self._make_request(url, not_found_error=PlayerNotFoundError)
        try:
            return PlayerProfile.model_validate(response)
        except ValidationError as e:
            logger.warning(
                "Profile did not match schema",
                account_id=account_id,
                error_count=e.error_count(),
            )
            raise DecodingError(_summarize(e), url=url) from e


def _summarize(error: ValidationError) -> str:
    """First validation problem as 'loc.path: message'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg', 'invalid value')}"
