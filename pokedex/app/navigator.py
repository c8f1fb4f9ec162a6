"""Keyboard and pointer navigation over the suggestion dropdown.

Every transition is a pure function from a ``NavigatorState`` (plus the event
payload) to a ``Transition``. A transition with ``selected`` set is a commit:
the caller routes to ``detail_route(selected)``.
"""

from pydantic import BaseModel, ConfigDict

from pokedex.app.models import NavigatorEvent, NavigatorState, SuggestionItem


class Transition(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: NavigatorState
    selected: SuggestionItem | None = None


def detail_route(item: SuggestionItem) -> str:
    return f"/details/{item.type.value}/{item.id}"


def _stay(state: NavigatorState, **changes) -> Transition:
    if not changes:
        return Transition(state=state)
    return Transition(state=state.model_copy(update=changes))


def _commit(state: NavigatorState, item: SuggestionItem) -> Transition:
    closed = state.model_copy(
        update={"is_open": False, "active_section_index": -1, "active_index": -1}
    )
    return Transition(state=closed, selected=item)


def type_query(state: NavigatorState, text: str) -> Transition:
    if text.strip() == "":
        return _stay(
            state,
            query=text,
            suggestions=[],
            is_open=False,
            active_section_index=-1,
            active_index=-1,
        )
    return _stay(state, query=text, is_open=True)


def set_suggestions(
    state: NavigatorState, suggestions: list[SuggestionItem]
) -> Transition:
    return _stay(
        state, suggestions=list(suggestions), active_section_index=-1, active_index=-1
    )


def focus(state: NavigatorState) -> Transition:
    if state.query.strip() != "" and state.suggestions:
        return _stay(state, is_open=True)
    return _stay(state)


def _has_active(state: NavigatorState, sections: list) -> bool:
    """Whether the active position points at an existing item."""
    if not 0 <= state.active_section_index < len(sections):
        return False
    return 0 <= state.active_index < len(sections[state.active_section_index].items)


def arrow_down(state: NavigatorState) -> Transition:
    if not state.is_open:
        if state.suggestions:
            return _stay(state, is_open=True)
        return _stay(state)

    sections = state.sections
    if not sections:
        return _stay(state)

    if not _has_active(state, sections):
        return _stay(state, active_section_index=0, active_index=0)

    current = sections[state.active_section_index]
    if state.active_index < len(current.items) - 1:
        return _stay(state, active_index=state.active_index + 1)
    if state.active_section_index < len(sections) - 1:
        return _stay(
            state, active_section_index=state.active_section_index + 1, active_index=0
        )
    return _stay(state)


def arrow_up(state: NavigatorState) -> Transition:
    if not state.is_open:
        return _stay(state)

    sections = state.sections
    if not sections:
        return _stay(state)

    if not _has_active(state, sections):
        last = len(sections) - 1
        return _stay(
            state,
            active_section_index=last,
            active_index=len(sections[last].items) - 1,
        )

    if state.active_index > 0:
        return _stay(state, active_index=state.active_index - 1)
    if state.active_section_index > 0:
        previous = state.active_section_index - 1
        return _stay(
            state,
            active_section_index=previous,
            active_index=len(sections[previous].items) - 1,
        )
    return _stay(state)


def enter(state: NavigatorState) -> Transition:
    item = state.active_item
    if item is not None:
        return _commit(state, item)
    if state.suggestions:
        return _commit(state, state.suggestions[0])
    return _stay(state)


def escape(state: NavigatorState) -> Transition:
    return _stay(state, is_open=False, active_section_index=-1, active_index=-1)


def _item_at(state: NavigatorState, section: int, index: int) -> SuggestionItem | None:
    sections = state.sections
    if not 0 <= section < len(sections):
        return None
    items = sections[section].items
    if not 0 <= index < len(items):
        return None
    return items[index]


def hover(state: NavigatorState, section: int, index: int) -> Transition:
    if _item_at(state, section, index) is None:
        return _stay(state)
    return _stay(state, active_section_index=section, active_index=index)


def click(state: NavigatorState, section: int, index: int) -> Transition:
    item = _item_at(state, section, index)
    if item is None:
        return _stay(state)
    return _commit(state, item)


def click_outside(state: NavigatorState) -> Transition:
    return _stay(state, is_open=False)


def apply(state: NavigatorState, event: NavigatorEvent) -> Transition:
    """Dispatch one UI event to its transition."""
    match event.kind:
        case "input":
            return type_query(state, event.text)
        case "suggestions":
            return set_suggestions(state, event.suggestions)
        case "arrow_down":
            return arrow_down(state)
        case "arrow_up":
            return arrow_up(state)
        case "enter":
            return enter(state)
        case "escape":
            return escape(state)
        case "hover":
            return hover(state, event.section, event.index)
        case "click":
            return click(state, event.section, event.index)
        case "click_outside":
            return click_outside(state)
        case "focus":
            return focus(state)
    raise ValueError(f"Unknown navigator event: {event.kind}")
