class PokeApiError(Exception):
    """Base class for failures talking to the upstream API."""


class UpstreamError(PokeApiError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(UpstreamError):
    pass


class NotFound(PokeApiError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Not found: {url}")
        self.url = url
