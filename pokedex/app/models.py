from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, computed_field


class Category(str, Enum):
    POKEMON = "pokemon"
    ROUTE = "route"
    ITEM = "item"
    ABILITY = "ability"
    NATURE = "nature"
    TM = "tm"


# Upstream resource and listing size for each category
RESOURCES: dict[Category, tuple[str, int]] = {
    Category.POKEMON: ("pokemon", 151),
    Category.ROUTE: ("location", 50),
    Category.ITEM: ("item", 50),
    Category.ABILITY: ("ability", 100),
    Category.NATURE: ("nature", 25),
    Category.TM: ("machine", 100),
}

# Order of search results
SEARCH_ORDER = [
    Category.POKEMON,
    Category.ROUTE,
    Category.ITEM,
    Category.ABILITY,
    Category.NATURE,
    Category.TM,
]

# Order of dropdown sections, with their titles
SECTION_TITLES: dict[Category, str] = {
    Category.POKEMON: "Pokémon",
    Category.TM: "TMs",
    Category.ABILITY: "Abilities",
    Category.NATURE: "Natures",
    Category.ROUTE: "Routes",
    Category.ITEM: "Items",
}


class SuggestionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    type: Category


class CategorySummary(BaseModel):
    type: Category
    title: str


class DetailRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: Category
    name: str
    description: str
    image: str | None = None


class PokemonStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    hp: int = 0
    attack: int = 0
    defense: int = 0
    speed: int = 0


class PokemonDetails(DetailRecord):
    type: Literal[Category.POKEMON] = Category.POKEMON
    stats: PokemonStats
    types: list[str]


class RouteDetails(DetailRecord):
    type: Literal[Category.ROUTE] = Category.ROUTE
    pokemon: list[str]


class ItemDetails(DetailRecord):
    type: Literal[Category.ITEM] = Category.ITEM
    price: int
    category: str


class AbilityDetails(DetailRecord):
    type: Literal[Category.ABILITY] = Category.ABILITY
    pokemon: list[str]
    generation: str


class NatureDetails(DetailRecord):
    type: Literal[Category.NATURE] = Category.NATURE
    increased_stat: str
    decreased_stat: str
    favors: str
    dislikes: str


class TMDetails(DetailRecord):
    type: Literal[Category.TM] = Category.TM
    power: int | str
    accuracy: int | str
    move_type: str
    category: str


AnyDetails = (
    PokemonDetails
    | RouteDetails
    | ItemDetails
    | AbilityDetails
    | NatureDetails
    | TMDetails
)


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    items: list[SuggestionItem]


class NavigatorState(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    suggestions: list[SuggestionItem] = []
    is_open: bool = False
    active_section_index: int = -1
    active_index: int = -1

    @computed_field
    @property
    def sections(self) -> list[Section]:
        sections = []
        for category, title in SECTION_TITLES.items():
            items = [s for s in self.suggestions if s.type == category]
            if items:
                sections.append(Section(title=title, items=items))
        return sections

    @property
    def active_item(self) -> SuggestionItem | None:
        sections = self.sections
        if not 0 <= self.active_section_index < len(sections):
            return None
        items = sections[self.active_section_index].items
        if not 0 <= self.active_index < len(items):
            return None
        return items[self.active_index]


class NavigatorEvent(BaseModel):
    kind: Literal[
        "input",
        "suggestions",
        "arrow_down",
        "arrow_up",
        "enter",
        "escape",
        "hover",
        "click",
        "click_outside",
        "focus",
    ]
    text: str = ""
    suggestions: list[SuggestionItem] = []
    section: int = -1
    index: int = -1


class NavigateRequest(BaseModel):
    state: NavigatorState = NavigatorState()
    event: NavigatorEvent


class NavigateResponse(BaseModel):
    state: NavigatorState
    selected: SuggestionItem | None = None
    route: str | None = None
