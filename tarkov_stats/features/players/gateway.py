"""
Player API Gateway - Anti-Corruption Layer for the players feature.

Components in this feature depend on this narrow interface instead of the
HTTP client, so tests can substitute an in-memory double and transport
details (URLs, status codes, httpx) stay inside ``core.tarkov_api``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Protocol

import structlog

from tarkov_stats.core.tarkov_api.models import PlayerProfile

if TYPE_CHECKING:
    from tarkov_stats.core.tarkov_api.client import TarkovAPIClient

logger = structlog.get_logger(__name__)


class PlayerGateway(Protocol):
    """What the players feature needs from the remote service."""

    async def fetch_search_index(self) -> Dict[str, str]: ...

    async def fetch_profile(self, account_id: str) -> PlayerProfile: ...


class TarkovAPIGateway:
    """Gateway backed by the HTTP client."""

    def __init__(self, tarkov_api_client: "TarkovAPIClient"):
        """
        Initialize gateway with the player API client.

        :param tarkov_api_client: Low-level player API client
        """
        self._client = tarkov_api_client

    async def fetch_search_index(self) -> Dict[str, str]:
        """
        Fetch the full account id -> nickname index.

        :returns: Mapping of account id strings to display names
        :raises NetworkError: If the request fails
        :raises DecodingError: If the body is not a string -> string object
        """
        logger.debug("Fetching search index")
        return await self._client.get_search_index()

    async def fetch_profile(self, account_id: str) -> PlayerProfile:
        """
        Fetch one profile document.

        :param account_id: Numeric account id
        :returns: Decoded profile
        :raises InvalidRequestError: If the id is not numeric
        :raises PlayerNotFoundError: If the service answers 404
        :raises NetworkError: If the request fails otherwise
        :raises DecodingError: If the body does not match the profile schema
        """
        logger.debug("Fetching player profile", account_id=account_id)
        return await self._client.get_profile(account_id)
