from fastapi import APIRouter, Depends, HTTPException

from pokedex.app.deps import get_service
from pokedex.app.errors import PokeApiError
from pokedex.app.models import SECTION_TITLES, Category, CategorySummary, SuggestionItem
from pokedex.app.service import PokedexService

router = APIRouter(prefix="/api")


@router.get("/categories")
async def get_categories() -> list[CategorySummary]:
    return [CategorySummary(type=c, title=SECTION_TITLES[c]) for c in Category]


@router.get("/categories/{category}")
async def get_category_list(
    category: Category,
    service: PokedexService = Depends(get_service),
) -> list[SuggestionItem]:
    try:
        return await service.get_list(category)
    except PokeApiError:
        raise HTTPException(
            status_code=502, detail=f"Failed to fetch {category.value} list"
        )
