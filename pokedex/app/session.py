import logging

from pokedex.app import config, navigator
from pokedex.app.debounce import SearchDebouncer
from pokedex.app.models import NavigatorEvent, NavigatorState, SuggestionItem
from pokedex.app.navigator import Transition
from pokedex.app.service import PokedexService

log = logging.getLogger(__name__)


class SearchSession:
    """One search box: navigator state fed by debounced searches."""

    def __init__(
        self, service: PokedexService, delay: float = config.SEARCH_DEBOUNCE_SECONDS
    ) -> None:
        self.state = NavigatorState()
        self.route: str | None = None
        self.debouncer = SearchDebouncer(service.search_all, self._on_results, delay)

    def handle(self, event: NavigatorEvent) -> Transition:
        transition = navigator.apply(self.state, event)
        self.state = transition.state

        if event.kind == "input":
            if event.text.strip():
                self.debouncer.submit(event.text)
            else:
                self.debouncer.cancel()

        if transition.selected is not None:
            self.route = navigator.detail_route(transition.selected)
            log.info("Navigating to %s", self.route)
        return transition

    def _on_results(self, query: str, results: list[SuggestionItem]) -> None:
        self.state = navigator.set_suggestions(self.state, results).state

    async def settle(self) -> None:
        await self.debouncer.flush()
