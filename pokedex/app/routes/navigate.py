from fastapi import APIRouter

from pokedex.app import navigator
from pokedex.app.models import NavigateRequest, NavigateResponse

router = APIRouter(prefix="/api")


@router.post("/navigate")
async def navigate(body: NavigateRequest) -> NavigateResponse:
    """Apply one dropdown event to the caller's navigator state."""
    transition = navigator.apply(body.state, body.event)
    route = None
    if transition.selected is not None:
        route = navigator.detail_route(transition.selected)
    return NavigateResponse(
        state=transition.state, selected=transition.selected, route=route
    )
