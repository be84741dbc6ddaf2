"""
Debounced, last-query-wins player name search.

Every keystroke calls :meth:`DebouncedSearchController.submit`. Work only
starts once input has been quiet for the debounce interval, and only the most
recently submitted query is ever allowed to change the visible state.

States::

    IDLE --submit(text)--> AWAITING_DEBOUNCE --quiet--> IN_FLIGHT --> SETTLED
      any --submit("")--> SETTLED (no results, has_searched=False)
      any --submit(text)--> AWAITING_DEBOUNCE (previous timer cancelled,
                                               previous in-flight ignored)

Each submit takes a new token from a monotonically increasing counter. A
timer that is still waiting is cancelled outright, so it never reaches the
network. Work that already left the timer is not interrupted; when it
finishes, its token is compared with the current one and the outcome is
dropped on mismatch.
"""

import asyncio
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, List, Optional, Set, Tuple

import structlog

from tarkov_stats.core.tarkov_api.errors import TarkovAPIError
from .schemas import SearchIndexEntry
from .search_index import SearchIndexCache, filter_index

logger = structlog.get_logger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.3
DEFAULT_RESULT_LIMIT = 50


class SearchState(str, Enum):
    """Lifecycle of the current query."""

    IDLE = "idle"
    AWAITING_DEBOUNCE = "awaiting_debounce"
    IN_FLIGHT = "in_flight"
    SETTLED = "settled"


@dataclass(frozen=True)
class SearchSnapshot:
    """Observable search state, replaced wholesale on every transition."""

    state: SearchState = SearchState.IDLE
    query: str = ""
    results: Tuple[SearchIndexEntry, ...] = ()
    error: Optional[str] = None
    has_searched: bool = False
    token: int = 0
    exception: Optional[Exception] = field(default=None, compare=False)

    @property
    def is_searching(self) -> bool:
        return self.state in (SearchState.AWAITING_DEBOUNCE, SearchState.IN_FLIGHT)


SnapshotListener = Callable[[SearchSnapshot], None]


class DebouncedSearchController:
    """Turns raw text input into at most one visible result set."""

    def __init__(
        self,
        index_cache: SearchIndexCache,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        result_limit: int = DEFAULT_RESULT_LIMIT,
        on_change: Optional[SnapshotListener] = None,
    ):
        """
        Initialize the controller.

        :param index_cache: Shared search index
        :param debounce_seconds: Quiet interval before a query runs
        :param result_limit: Maximum number of results kept
        :param on_change: Called with the new snapshot after every transition
        """
        self._index_cache = index_cache
        self.debounce_seconds = debounce_seconds
        self.result_limit = result_limit
        self._on_change = on_change

        self._generation = 0
        self._timer: Optional["asyncio.Task[None]"] = None
        self._tasks: Set["asyncio.Task[None]"] = set()
        self._snapshot = SearchSnapshot()

    @property
    def snapshot(self) -> SearchSnapshot:
        return self._snapshot

    @property
    def current_token(self) -> int:
        return self._generation

    @property
    def results(self) -> List[SearchIndexEntry]:
        return list(self._snapshot.results)

    @property
    def error(self) -> Optional[str]:
        return self._snapshot.error

    @property
    def has_searched(self) -> bool:
        return self._snapshot.has_searched

    @property
    def is_searching(self) -> bool:
        return self._snapshot.is_searching

    def submit(self, text: str) -> int:
        """
        Register new input. Must be called from a running event loop.

        :param text: Raw text as typed
        :returns: The token identifying this query
        """
        self._generation += 1
        token = self._generation
        self._cancel_timer()

        query = text.strip()
        if not query:
            self._publish(
                state=SearchState.SETTLED,
                query="",
                results=(),
                error=None,
                exception=None,
                has_searched=False,
                token=token,
            )
            return token

        self._publish(
            state=SearchState.AWAITING_DEBOUNCE,
            query=query,
            error=None,
            exception=None,
            has_searched=True,
            token=token,
        )
        task = asyncio.get_running_loop().create_task(
            self._run(query, token), name=f"player-search-{token}"
        )
        self._timer = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return token

    async def search(self, text: str) -> Optional[List[SearchIndexEntry]]:
        """
        Submit ``text`` and wait for its outcome.

        :returns: Results for this query, or None if a later submit superseded it
        :raises TarkovAPIError: If this query settled with an error
        :raises Exception: Any other error the lookup failed with
        """
        token = self.submit(text)
        task = self._timer
        if task is not None:
            await asyncio.wait({task})
        if self._snapshot.token != token or self._snapshot.is_searching:
            return None
        if self._snapshot.exception is not None:
            raise self._snapshot.exception
        return list(self._snapshot.results)

    def reset(self) -> None:
        """Drop any pending or in-flight query and return to IDLE."""
        self._generation += 1
        self._cancel_timer()
        self._snapshot = SearchSnapshot(token=self._generation)
        self._notify()

    async def wait(self) -> SearchSnapshot:
        """Wait for all outstanding search work, then return the snapshot."""
        while self._tasks:
            outcomes = await asyncio.gather(*self._tasks, return_exceptions=True)
            for outcome in outcomes:
                if isinstance(outcome, Exception):
                    raise outcome
        return self._snapshot

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    def _is_current(self, token: int) -> bool:
        return token == self._generation

    async def _run(self, query: str, token: int) -> None:
        try:
            await asyncio.sleep(self.debounce_seconds)
        except asyncio.CancelledError:
            logger.debug("Search debounce cancelled", query=query, token=token)
            raise

        if not self._is_current(token):
            return
        # From here on a newer submit only discards this work.
        self._timer = None
        self._publish(state=SearchState.IN_FLIGHT)

        try:
            index = await self._index_cache.get_index()
        except TarkovAPIError as e:
            if not self._is_current(token):
                logger.debug("Discarding superseded search failure", query=query)
                return
            logger.warning("Player search failed", query=query, error=str(e))
            self._publish(
                state=SearchState.SETTLED,
                results=(),
                error=str(e),
                exception=e,
            )
            return
        except Exception as e:
            if not self._is_current(token):
                logger.debug("Discarding superseded search failure", query=query)
                return
            logger.exception("Player search crashed", query=query)
            self._publish(
                state=SearchState.SETTLED,
                results=(),
                error=str(e) or type(e).__name__,
                exception=e,
            )
            return

        if not self._is_current(token):
            logger.debug(
                "Discarding superseded search result",
                query=query,
                token=token,
                current_token=self._generation,
            )
            return

        results = filter_index(index, query, self.result_limit)
        logger.info("Player search settled", query=query, results=len(results))
        self._publish(state=SearchState.SETTLED, results=tuple(results), error=None)

    def _publish(self, **changes) -> None:
        self._snapshot = replace(self._snapshot, **changes)
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self._snapshot)
