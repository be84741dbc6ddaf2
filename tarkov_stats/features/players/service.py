"""Player service: composition of search, loading and derived views.

Responsibilities:
- Own the process-wide SearchIndexCache (one per service instance)
- Hand out per-consumer search controllers and profile loaders
- Provide stateless lookups for request/response consumers (the HTTP API)

Does NOT:
- Talk HTTP directly (uses the PlayerGateway)
- Compute statistics (lives in algorithms/ and transformers)
"""

from typing import List, Optional, Union

import structlog

from tarkov_stats.core.tarkov_api.constants import StatsSide
from tarkov_stats.core.tarkov_api.endpoints import is_account_id
from tarkov_stats.core.tarkov_api.models import PlayerProfile
from .gateway import PlayerGateway
from .loader import ProfileLoader
from .schemas import PlayerProfileResponse, PlayerStatsResponse, SearchIndexEntry
from .search import (
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_RESULT_LIMIT,
    DebouncedSearchController,
    SnapshotListener,
)
from .search_index import SearchIndexCache, filter_index
from .transformers import player_stats, profile_to_response, stats_to_response

logger = structlog.get_logger(__name__)


class PlayerLookupSession:
    """State for one interactive consumer: a search box and a profile view."""

    def __init__(self, search: DebouncedSearchController, loader: ProfileLoader):
        self.search = search
        self.loader = loader

    async def submit_input(self, text: str) -> Optional[PlayerProfile]:
        """
        Route raw input: digits load a profile directly, anything else searches.

        :param text: Raw input
        :returns: The loaded profile for numeric input, otherwise None
        """
        if is_account_id(text):
            return await self.loader.load(text.strip())
        self.search.submit(text)
        return None

    async def select(self, entry: SearchIndexEntry) -> PlayerProfile:
        """Load the profile behind a search result."""
        return await self.loader.load(entry.id)


class PlayerService:
    """Entry point for the presentation layer."""

    def __init__(
        self,
        gateway: PlayerGateway,
        index_cache: Optional[SearchIndexCache] = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        result_limit: int = DEFAULT_RESULT_LIMIT,
    ):
        """
        Initialize player service.

        :param gateway: Remote profile service
        :param index_cache: Shared index cache (created from gateway if None)
        :param debounce_seconds: Quiet interval for interactive search
        :param result_limit: Maximum number of search results
        """
        self.gateway = gateway
        self.index_cache = index_cache or SearchIndexCache(gateway)
        self.debounce_seconds = debounce_seconds
        self.result_limit = result_limit

    def create_search_controller(
        self, on_change: Optional[SnapshotListener] = None
    ) -> DebouncedSearchController:
        """New debounced search bound to the shared index cache."""
        return DebouncedSearchController(
            self.index_cache,
            debounce_seconds=self.debounce_seconds,
            result_limit=self.result_limit,
            on_change=on_change,
        )

    def create_profile_loader(self) -> ProfileLoader:
        return ProfileLoader(self.gateway)

    def create_session(
        self, on_search_change: Optional[SnapshotListener] = None
    ) -> PlayerLookupSession:
        """Search controller and profile loader for one interactive consumer."""
        return PlayerLookupSession(
            self.create_search_controller(on_search_change),
            self.create_profile_loader(),
        )

    async def search_players(self, query: str) -> List[SearchIndexEntry]:
        """
        Search nicknames immediately, without debounce.

        :param query: Name fragment; blank queries return no results
        :returns: Up to ``result_limit`` entries sorted by name
        """
        needle = query.strip()
        if not needle:
            return []
        index = await self.index_cache.get_index()
        results = filter_index(index, needle, self.result_limit)
        logger.info("Player search completed", query=needle, results=len(results))
        return results

    async def load_profile(self, account_id: str) -> PlayerProfile:
        """Fetch a profile document."""
        return await self.gateway.fetch_profile(account_id)

    async def get_profile_view(self, account_id: str) -> PlayerProfileResponse:
        """Fetch a profile and derive its view model."""
        profile = await self.load_profile(account_id)
        return profile_to_response(profile)

    async def get_player_stats(
        self, account_id: str, side: Union[StatsSide, str] = StatsSide.PMC
    ) -> PlayerStatsResponse:
        """Fetch a profile and aggregate one side's statistics."""
        profile = await self.load_profile(account_id)
        return stats_to_response(player_stats(profile, side))
