"""
Process-lifetime cache of the player search index.

The index is a single large document (every known account id and nickname),
so it is fetched once and kept for as long as the owning component lives.
Concurrent callers during the first fetch share one request.
"""

import asyncio
from types import MappingProxyType
from typing import List, Mapping, Optional

import structlog

from .gateway import PlayerGateway
from .schemas import SearchIndexEntry

logger = structlog.get_logger(__name__)


class SearchIndexCache:
    """Fetch-once, single-flight cache of account id -> nickname."""

    def __init__(self, gateway: PlayerGateway):
        """
        Initialize the cache.

        :param gateway: Source of the index document
        """
        self._gateway = gateway
        self._index: Optional[Mapping[str, str]] = None
        self._pending: Optional["asyncio.Future[Mapping[str, str]]"] = None

    @property
    def is_loaded(self) -> bool:
        """Whether the index has been fetched successfully."""
        return self._index is not None

    async def get_index(self) -> Mapping[str, str]:
        """
        Return the index, fetching it on first use.

        Callers that arrive while a fetch is running await that same fetch.
        A failed fetch is reported to its waiters and forgotten, so the next
        call starts a fresh one.

        :returns: Read-only mapping of account id to nickname
        :raises NetworkError: If the fetch fails
        :raises DecodingError: If the document is malformed
        """
        if self._index is not None:
            return self._index

        # Checked and set before the first await, so concurrent callers
        # always see the fetch started by whoever came first.
        if self._pending is None:
            logger.info("Fetching search index")
            self._pending = asyncio.ensure_future(self._load())
            self._pending.add_done_callback(self._on_fetch_done)
        else:
            logger.debug("Joining in-flight search index fetch")

        # A cancelled waiter must not cancel the fetch other waiters share.
        return await asyncio.shield(self._pending)

    async def _load(self) -> Mapping[str, str]:
        try:
            index = await self._gateway.fetch_search_index()
            self._index = MappingProxyType(dict(index))
            logger.info("Search index loaded", entries=len(self._index))
            return self._index
        finally:
            self._pending = None

    @staticmethod
    def _on_fetch_done(future: "asyncio.Future[Mapping[str, str]]") -> None:
        # Retrieve the exception so it is not reported as unhandled when every
        # waiter was cancelled before the fetch failed.
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.warning(
                "Search index fetch failed",
                error=str(error),
                error_type=type(error).__name__,
            )


def filter_index(
    index: Mapping[str, str], query: str, limit: int = 50
) -> List[SearchIndexEntry]:
    """
    Case-insensitive substring match on nicknames.

    Results are sorted by lower-cased name (account id breaks ties) and
    truncated to ``limit``.
    """
    needle = query.lower()
    matches = [
        SearchIndexEntry(id=account_id, name=name)
        for account_id, name in index.items()
        if needle in name.lower()
    ]
    matches.sort(key=lambda entry: (entry.name.lower(), entry.id))
    return matches[:limit]
