import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokedex.app import config
from pokedex.app.cache import CategoryCache
from pokedex.app.gateway import PokeApiGateway
from pokedex.app.routes import categories, details, navigate, search
from pokedex.app.service import PokedexService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    service = PokedexService(PokeApiGateway(), CategoryCache())
    app.state.service = service
    log.info("Using PokéAPI at %s", service.gateway.base_url)
    yield
    await service.aclose()


app = FastAPI(title="Pokédex Search API", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search.router)
app.include_router(categories.router)
app.include_router(details.router)
app.include_router(navigate.router)


@app.get("/api/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
