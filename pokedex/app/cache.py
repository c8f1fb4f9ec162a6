import time
from collections.abc import Awaitable, Callable

from pokedex.app import config
from pokedex.app.models import Category, DetailRecord, SuggestionItem


class CacheEntry:
    """Cached list, its fetch time and the detail records of one category."""

    def __init__(self) -> None:
        self.items: list[SuggestionItem] | None = None
        self.fetched_at: float | None = None
        self.details: dict[int, DetailRecord] = {}


class CategoryCache:
    """Per-category list cache with a fixed freshness window.

    Lists expire after ``ttl`` seconds. Detail records never expire and live
    as long as the cache does.
    """

    def __init__(
        self,
        ttl: float = config.CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries = {category: CacheEntry() for category in Category}

    def entry(self, category: Category) -> CacheEntry:
        return self._entries[category]

    def is_fresh(self, category: Category) -> bool:
        entry = self._entries[category]
        if entry.items is None or entry.fetched_at is None:
            return False
        return self._clock() - entry.fetched_at < self.ttl

    async def get_list(
        self,
        category: Category,
        loader: Callable[[], Awaitable[list[SuggestionItem]]],
    ) -> list[SuggestionItem]:
        entry = self._entries[category]
        if self.is_fresh(category):
            return entry.items

        now = self._clock()
        items = await loader()
        entry.items = items
        entry.fetched_at = now
        return items

    def get_details(self, category: Category, entity_id: int) -> DetailRecord | None:
        return self._entries[category].details.get(entity_id)

    def store_details(
        self, category: Category, entity_id: int, record: DetailRecord
    ) -> None:
        self._entries[category].details[entity_id] = record

    def invalidate(self, category: Category | None = None) -> None:
        """Forget cached lists. Detail records are kept."""
        categories = [category] if category is not None else list(Category)
        for cat in categories:
            self._entries[cat].items = None
            self._entries[cat].fetched_at = None
