import logging
from typing import Any

import httpx

from pokedex.app import config
from pokedex.app.errors import DecodeError, NotFound, UpstreamError

log = logging.getLogger(__name__)


class PokeApiGateway:
    """Thin async JSON client for the PokéAPI.

    Accepts either a path relative to the base URL (``"pokemon/25"``) or an
    absolute ``url`` taken from an upstream payload.
    """

    def __init__(
        self,
        base_url: str = config.POKEAPI_BASE_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float = config.HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def fetch(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = self.url_for(path)
        try:
            resp = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            log.error("Error fetching from %s: %s", url, exc)
            raise UpstreamError(f"Transport error for {url}: {exc}") from exc

        if resp.status_code == 404:
            log.warning("Not found: %s", url)
            raise NotFound(url)
        if not resp.is_success:
            log.error("Error fetching from %s: API Error %d", url, resp.status_code)
            raise UpstreamError(
                f"API Error: {resp.status_code}", status_code=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as exc:
            log.error("Malformed JSON from %s", url)
            raise DecodeError(f"Malformed JSON from {url}") from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
