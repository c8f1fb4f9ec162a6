from fastapi import Request

from pokedex.app.service import PokedexService


def get_service(request: Request) -> PokedexService:
    """The service created in the app lifespan. Overridden in tests."""
    return request.app.state.service
