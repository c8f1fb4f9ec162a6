from fastapi import APIRouter, Depends, Query

from pokedex.app.deps import get_service
from pokedex.app.models import SuggestionItem
from pokedex.app.service import PokedexService

router = APIRouter(prefix="/api")


@router.get("/search")
async def search(
    q: str = Query(default=""),
    service: PokedexService = Depends(get_service),
) -> list[SuggestionItem]:
    return await service.search_all(q)
