import asyncio
import logging
from collections.abc import Awaitable, Callable

from pokedex.app import config
from pokedex.app.models import SuggestionItem

log = logging.getLogger(__name__)

SearchFn = Callable[[str], Awaitable[list[SuggestionItem]]]
ResultsFn = Callable[[str, list[SuggestionItem]], None]


class SearchDebouncer:
    """Run a search once typing pauses, keeping only the latest query.

    Each ``submit`` replaces the pending timer. Searches already in flight are
    left to finish, but their results reach ``on_results`` only if their query
    is still the latest one submitted.
    """

    def __init__(
        self,
        search: SearchFn,
        on_results: ResultsFn,
        delay: float = config.SEARCH_DEBOUNCE_SECONDS,
    ) -> None:
        self._search = search
        self._on_results = on_results
        self.delay = delay
        self.latest_query: str | None = None
        self._timer: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()

    def submit(self, query: str) -> None:
        self.latest_query = query
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().create_task(self._fire(query))

    async def _fire(self, query: str) -> None:
        await asyncio.sleep(self.delay)
        task = asyncio.get_running_loop().create_task(self._deliver(query))
        self._in_flight.add(task)
        task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Task) -> None:
        self._in_flight.discard(task)
        if not task.cancelled() and task.exception() is not None:
            log.error("Search failed", exc_info=task.exception())

    async def _deliver(self, query: str) -> None:
        results = await self._search(query)
        if query != self.latest_query:
            log.debug("Dropping stale results for %r", query)
            return
        self._on_results(query, results)

    async def flush(self) -> None:
        """Wait for the pending timer and every search in flight."""
        if self._timer is not None:
            try:
                await self._timer
            except asyncio.CancelledError:
                pass
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()

    def cancel(self) -> None:
        self._cancel_timer()
        self._timer = None
        self.latest_query = None
