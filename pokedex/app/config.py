import os

from dotenv import load_dotenv

load_dotenv()

POKEAPI_BASE_URL = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
CACHE_TTL_SECONDS = float(os.getenv("POKEDEX_CACHE_TTL", "300"))
HTTP_TIMEOUT_SECONDS = float(os.getenv("POKEDEX_HTTP_TIMEOUT", "10"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("POKEDEX_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

SEARCH_MIN_LENGTH = 2
SEARCH_RESULTS_PER_CATEGORY = 5
SEARCH_DEBOUNCE_SECONDS = 0.3

# Only the first machines of the listing are resolved to names
TM_LOOKUP_WINDOW = 50
