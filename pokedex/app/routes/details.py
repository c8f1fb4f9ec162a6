from fastapi import APIRouter, Depends, HTTPException

from pokedex.app.deps import get_service
from pokedex.app.errors import NotFound, UpstreamError
from pokedex.app.models import AnyDetails, Category
from pokedex.app.service import PokedexService

router = APIRouter(prefix="/api")


@router.get("/details/{category}/{entity_id}")
async def get_details(
    category: Category,
    entity_id: int,
    service: PokedexService = Depends(get_service),
) -> AnyDetails:
    try:
        return await service.get_details(category, entity_id)
    except NotFound:
        raise HTTPException(
            status_code=404,
            detail=f"No {category.value} found with ID {entity_id}",
        )
    except UpstreamError:
        raise HTTPException(
            status_code=502,
            detail=f"Failed to fetch {category.value} with ID {entity_id}",
        )
