import asyncio
import logging

from pokedex.app import config
from pokedex.app.cache import CategoryCache
from pokedex.app.catalog import fetch_list
from pokedex.app.details import FORMATTERS
from pokedex.app.gateway import PokeApiGateway
from pokedex.app.models import SEARCH_ORDER, Category, DetailRecord, SuggestionItem

log = logging.getLogger(__name__)


class PokedexService:
    """Cache-aware access to category lists, details and search."""

    def __init__(
        self, gateway: PokeApiGateway, cache: CategoryCache | None = None
    ) -> None:
        self.gateway = gateway
        self.cache = cache or CategoryCache()

    async def get_list(self, category: Category) -> list[SuggestionItem]:
        return await self.cache.get_list(
            category, lambda: fetch_list(self.gateway, category)
        )

    async def get_details(self, category: Category, entity_id: int) -> DetailRecord:
        cached = self.cache.get_details(category, entity_id)
        if cached is not None:
            return cached

        record = await FORMATTERS[category](self.gateway, entity_id)
        self.cache.store_details(category, entity_id, record)
        return record

    async def search_all(self, query: str) -> list[SuggestionItem]:
        if not query or len(query.strip()) < config.SEARCH_MIN_LENGTH:
            return []

        needle = query.lower()
        try:
            lists = await asyncio.gather(
                *(self.get_list(category) for category in SEARCH_ORDER)
            )
        except Exception:
            log.exception("Error searching for %r", query)
            return []

        results: list[SuggestionItem] = []
        for items in lists:
            matches = [item for item in items if needle in item.name.lower()]
            results.extend(matches[: config.SEARCH_RESULTS_PER_CATEGORY])
        return results

    async def aclose(self) -> None:
        await self.gateway.aclose()
