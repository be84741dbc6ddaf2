"""Players feature: name search, profile loading and derived statistics."""

from .gateway import PlayerGateway, TarkovAPIGateway
from .loader import ProfileLoader
from .schemas import (
    PlayerProfileResponse,
    PlayerStatsResponse,
    SearchIndexEntry,
)
from .search import DebouncedSearchController, SearchSnapshot, SearchState
from .search_index import SearchIndexCache, filter_index
from .service import PlayerLookupSession, PlayerService
from .transformers import (
    equipped_items,
    filtered_skills,
    player_level,
    player_stats,
    profile_to_response,
)

__all__ = [
    "PlayerGateway",
    "TarkovAPIGateway",
    "ProfileLoader",
    "PlayerProfileResponse",
    "PlayerStatsResponse",
    "SearchIndexEntry",
    "DebouncedSearchController",
    "SearchSnapshot",
    "SearchState",
    "SearchIndexCache",
    "filter_index",
    "PlayerLookupSession",
    "PlayerService",
    "equipped_items",
    "filtered_skills",
    "player_level",
    "player_stats",
    "profile_to_response",
]
