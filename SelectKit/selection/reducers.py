"""
Pure state transitions for the select widgets.

Each reducer takes the current state, an event and the owner's props and returns
the next state. Reducers never notify anyone and never compute candidates;
SelectionController does both after every step.
"""
import dataclasses
from typing import Callable, Dict, Optional, Tuple, Type

from SelectKit.model.Events import (
    ActivateOption, ApplyDefault, Blur, ChangeScope, Escape, Focus, RemoveOption, Reset, SelectEvent, ToggleOpen,
    TypeQuery
)
from SelectKit.model.Option import Option
from SelectKit.model.SelectionState import (
    MultiSelectState, ScopedSelectState, SelectionState, SelectProps, SingleSelectState
)


def _reduce_common(state: SelectionState, event: SelectEvent, props: SelectProps) -> Optional[SelectionState]:
    """
    Focus handling shared by every variant.
    Returns None if the event isn't a focus event.
    """
    if isinstance(event, Focus):
        return dataclasses.replace(state, is_focused=True, is_open=props.interactive)
    # escape drops focus, which closes the dropdown just like a blur
    if isinstance(event, (Blur, Escape)):
        return dataclasses.replace(state, is_focused=False, is_open=False)
    return None


def _dedupe(options) -> Tuple[Option, ...]:
    seen = set()
    unique = []
    for o in options:
        if o.identity() not in seen:
            seen.add(o.identity())
            unique.append(o)
    return tuple(unique)


def reduce_multi(state: MultiSelectState, event: SelectEvent, props: SelectProps) -> MultiSelectState:
    common = _reduce_common(state, event, props)
    if common is not None:
        return common

    if isinstance(event, Reset):
        return MultiSelectState()

    if isinstance(event, ApplyDefault):
        if state.default_applied or state.selection or not event.default:
            return state
        return dataclasses.replace(state, selection=_dedupe(event.default), default_applied=True)

    if not props.interactive:
        return state

    if isinstance(event, TypeQuery):
        return dataclasses.replace(state, query=event.query)

    if isinstance(event, ActivateOption):
        selection = state.selection
        if all(o.identity() != event.option.identity() for o in selection):
            selection = selection + (event.option,)
        # clear the search so the next item can be typed straight away
        return dataclasses.replace(state, selection=selection, query="")

    if isinstance(event, RemoveOption):
        selection = tuple(o for o in state.selection if o.identity() != event.option.identity())
        return dataclasses.replace(state, selection=selection)

    return state


def reduce_single(state: SingleSelectState, event: SelectEvent, props: SelectProps) -> SingleSelectState:
    common = _reduce_common(state, event, props)
    if common is not None:
        return common

    if isinstance(event, Reset):
        return SingleSelectState()

    if isinstance(event, ApplyDefault):
        if state.default_applied or state.selection is not None or event.default is None:
            return state
        # text the user already typed stays a search rather than being shown as the default
        return dataclasses.replace(state, selection=event.default, committed=state.query == "", default_applied=True)

    if not props.interactive:
        return state

    if isinstance(event, TypeQuery):
        # editing the text field un-commits, but the selection itself survives
        return dataclasses.replace(state, query=event.query, committed=False)

    if isinstance(event, ActivateOption):
        return dataclasses.replace(
            state,
            selection=event.option,
            query=event.option.display_text(),
            is_open=False,
            committed=True
        )

    if isinstance(event, RemoveOption):
        if state.selection is None or state.selection.identity() != event.option.identity():
            return state
        return dataclasses.replace(state, selection=None, query="", committed=False)

    return state


def reduce_scoped(state: ScopedSelectState, event: SelectEvent, props: SelectProps) -> ScopedSelectState:
    common = _reduce_common(state, event, props)
    if common is not None:
        return common

    if isinstance(event, Reset):
        return ScopedSelectState(scope_key=props.scope_key)

    if isinstance(event, ChangeScope):
        if not event.scope_key:
            # nothing is eligible without a scope; the last scope is remembered
            return state
        if state.scope_key and state.scope_key != event.scope_key:
            # the old value isn't guaranteed to exist under the new scope
            return dataclasses.replace(state, scope_key=event.scope_key, selection=None, query="")
        return dataclasses.replace(state, scope_key=event.scope_key, query="")

    if isinstance(event, ApplyDefault):
        if state.default_applied or state.selection is not None or event.default is None:
            return state
        return dataclasses.replace(state, selection=event.default, default_applied=True)

    if not props.interactive:
        return state

    if isinstance(event, ToggleOpen):
        return dataclasses.replace(state, is_open=not state.is_open)

    if isinstance(event, TypeQuery):
        return dataclasses.replace(state, query=event.query)

    if isinstance(event, ActivateOption):
        return dataclasses.replace(state, selection=event.option, query="", is_open=False)

    if isinstance(event, RemoveOption):
        if state.selection is None or state.selection.identity() != event.option.identity():
            return state
        return dataclasses.replace(state, selection=None)

    return state


REDUCERS: Dict[Type[SelectionState], Callable] = {
    MultiSelectState: reduce_multi,
    SingleSelectState: reduce_single,
    ScopedSelectState: reduce_scoped,
}
