import asyncio
import logging

from pokedex.app import config
from pokedex.app.formatting import format_name, id_from_url, tm_display_name
from pokedex.app.gateway import PokeApiGateway
from pokedex.app.models import RESOURCES, Category, SuggestionItem

log = logging.getLogger(__name__)


async def fetch_listing(gateway: PokeApiGateway, category: Category) -> list[dict]:
    resource, limit = RESOURCES[category]
    data = await gateway.fetch(resource, params={"limit": limit})
    return data.get("results", [])


async def fetch_named_list(
    gateway: PokeApiGateway, category: Category
) -> list[SuggestionItem]:
    results = await fetch_listing(gateway, category)
    return [
        SuggestionItem(
            id=id_from_url(entry["url"]),
            name=format_name(entry["name"]),
            type=category,
        )
        for entry in results
    ]


async def _resolve_machine(
    gateway: PokeApiGateway, entry: dict
) -> SuggestionItem | None:
    """Name one machine as ``TM<n>: <Move>``, or None if it is not a TM."""
    try:
        machine = await gateway.fetch(entry["url"])
        move = await gateway.fetch(machine["move"]["url"])
        item = await gateway.fetch(machine["item"]["url"])

        if "tm" not in item["name"].lower():
            return None

        return SuggestionItem(
            id=id_from_url(entry["url"]),
            name=tm_display_name(item["name"], move["name"]),
            type=Category.TM,
        )
    except Exception:
        log.exception("Error fetching machine details for %s", entry.get("url"))
        return None


async def fetch_tm_list(gateway: PokeApiGateway) -> list[SuggestionItem]:
    results = await fetch_listing(gateway, Category.TM)
    window = results[: config.TM_LOOKUP_WINDOW]
    resolved = await asyncio.gather(
        *(_resolve_machine(gateway, entry) for entry in window)
    )
    return [item for item in resolved if item is not None]


async def fetch_list(
    gateway: PokeApiGateway, category: Category
) -> list[SuggestionItem]:
    if category is Category.TM:
        return await fetch_tm_list(gateway)
    return await fetch_named_list(gateway, category)
