"""Per-category transforms from raw PokéAPI payloads to detail records."""

import logging
from collections.abc import Awaitable, Callable

from pokedex.app.formatting import (
    NO_DESCRIPTION,
    english_entry,
    english_text,
    format_name,
    tm_display_name,
)
from pokedex.app.gateway import PokeApiGateway
from pokedex.app.models import (
    AbilityDetails,
    Category,
    DetailRecord,
    ItemDetails,
    NatureDetails,
    PokemonDetails,
    PokemonStats,
    RouteDetails,
    TMDetails,
)

log = logging.getLogger(__name__)

POKEMON_PLACEHOLDER = "/api/placeholder/200/200"
ROUTE_PLACEHOLDER = "/api/placeholder/400/200"
ITEM_PLACEHOLDER = "/api/placeholder/150/150"

NO_ROUTE_POKEMON = "No Pokémon data available"
MAX_ROUTE_POKEMON = 10
MAX_ABILITY_POKEMON = 8
NOT_AVAILABLE = "N/A"

STAT_NAMES = ("hp", "attack", "defense", "speed")


def _named(ref: dict | None, default: str = "None") -> str:
    if not ref:
        return default
    return format_name(ref["name"])


def _pokemon_image(sprites: dict) -> str:
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return (
        artwork.get("front_default")
        or sprites.get("front_default")
        or POKEMON_PLACEHOLDER
    )


async def pokemon_details(gateway: PokeApiGateway, entity_id: int) -> PokemonDetails:
    data = await gateway.fetch(f"pokemon/{entity_id}")
    species = await gateway.fetch(data["species"]["url"])

    base_stats = {s["stat"]["name"]: s["base_stat"] for s in data.get("stats", [])}
    stats = PokemonStats(**{name: base_stats.get(name) or 0 for name in STAT_NAMES})

    return PokemonDetails(
        id=entity_id,
        name=format_name(data["name"]),
        description=english_text(species.get("flavor_text_entries", []), "flavor_text"),
        stats=stats,
        types=[format_name(t["type"]["name"]) for t in data.get("types", [])],
        image=_pokemon_image(data.get("sprites") or {}),
    )


async def _route_pokemon(gateway: PokeApiGateway, entity_id: int) -> list[str]:
    """Pokémon found in the first area of a location; empty on any failure."""
    try:
        areas = await gateway.fetch("location-area", params={"location": entity_id})
        results = areas.get("results", [])
        if not results:
            return []
        area = await gateway.fetch(results[0]["url"])
        names = []
        for encounter in area.get("pokemon_encounters", []):
            name = format_name(encounter["pokemon"]["name"])
            if name not in names:
                names.append(name)
        return names[:MAX_ROUTE_POKEMON]
    except Exception:
        log.exception("Error fetching location areas for location %s", entity_id)
        return []


async def route_details(gateway: PokeApiGateway, entity_id: int) -> RouteDetails:
    data = await gateway.fetch(f"location/{entity_id}")
    pokemon = await _route_pokemon(gateway, entity_id)

    name = format_name(data["name"])
    region = (data.get("region") or {}).get("name") or "unknown"
    return RouteDetails(
        id=entity_id,
        name=name,
        description=f"{name} is located in the {region} region.",
        pokemon=pokemon or [NO_ROUTE_POKEMON],
        image=ROUTE_PLACEHOLDER,
    )


async def item_details(gateway: PokeApiGateway, entity_id: int) -> ItemDetails:
    data = await gateway.fetch(f"item/{entity_id}")
    return ItemDetails(
        id=entity_id,
        name=format_name(data["name"]),
        description=english_text(data.get("flavor_text_entries", []), "text"),
        price=data.get("cost") or 0,
        category=_named(data.get("category")),
        image=(data.get("sprites") or {}).get("default") or ITEM_PLACEHOLDER,
    )


async def ability_details(gateway: PokeApiGateway, entity_id: int) -> AbilityDetails:
    data = await gateway.fetch(f"ability/{entity_id}")
    effect = english_entry(data.get("effect_entries", []))
    pokemon = [
        format_name(entry["pokemon"]["name"])
        for entry in data.get("pokemon", [])[:MAX_ABILITY_POKEMON]
    ]
    return AbilityDetails(
        id=entity_id,
        name=format_name(data["name"]),
        description=effect["effect"] if effect else NO_DESCRIPTION,
        pokemon=pokemon,
        generation=_named(data.get("generation")),
    )


async def nature_details(gateway: PokeApiGateway, entity_id: int) -> NatureDetails:
    data = await gateway.fetch(f"nature/{entity_id}")
    name = format_name(data["name"])
    increased = _named(data.get("increased_stat"))
    decreased = _named(data.get("decreased_stat"))
    return NatureDetails(
        id=entity_id,
        name=name,
        description=f"{name} nature increases {increased} and decreases {decreased}.",
        increased_stat=increased,
        decreased_stat=decreased,
        favors=_named(data.get("likes_flavor")),
        dislikes=_named(data.get("hates_flavor")),
    )


async def tm_details(gateway: PokeApiGateway, entity_id: int) -> TMDetails:
    data = await gateway.fetch(f"machine/{entity_id}")
    move = await gateway.fetch(data["move"]["url"])
    item = await gateway.fetch(data["item"]["url"])

    power = move.get("power")
    accuracy = move.get("accuracy")
    return TMDetails(
        id=entity_id,
        name=tm_display_name(item["name"], move["name"]),
        description=english_text(move.get("flavor_text_entries", []), "flavor_text"),
        power=power if power is not None else NOT_AVAILABLE,
        accuracy=accuracy if accuracy is not None else NOT_AVAILABLE,
        move_type=_named(move.get("type"), NOT_AVAILABLE),
        category=_named(move.get("damage_class"), NOT_AVAILABLE),
        image=(item.get("sprites") or {}).get("default") or ITEM_PLACEHOLDER,
    )


FORMATTERS: dict[Category, Callable[[PokeApiGateway, int], Awaitable[DetailRecord]]] = {
    Category.POKEMON: pokemon_details,
    Category.ROUTE: route_details,
    Category.ITEM: item_details,
    Category.ABILITY: ability_details,
    Category.NATURE: nature_details,
    Category.TM: tm_details,
}
