import dataclasses
import logging
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Type

from SelectKit.model.Events import (
    ActivateOption, ApplyDefault, Blur, ChangeScope, Escape, Focus, RemoveOption, Reset, SelectEvent, TypeQuery
)
from SelectKit.model.Option import Option, as_option, as_options, find_option, is_option
from SelectKit.model.SelectionState import SelectionState, SelectProps
from SelectKit.selection.OwnerChannel import OwnerChannel, QUERY, SELECTION
from SelectKit.selection.reducers import REDUCERS


def option_key(o: Any) -> Hashable:
    """
    Identity of an option, or of anything that names one:
    an option, a raw option value (string or mapping), or a bare id.
    """
    if is_option(o) or isinstance(o, (str, Mapping)):
        return as_option(o).identity()
    return o


class SelectionController:
    """
    Owns the selection and search text of one select widget.

    Every interaction becomes an event that is run through the variant's reducer.
    After each step the candidate list is rebuilt from scratch and, if the
    selection changed, the owner is told about it.
    """

    state_class: Type[SelectionState] = SelectionState

    # whether raw search text is reported to the owner
    reports_query: bool = False

    def __init__(
            self,
            options: Iterable[Any],
            default_selection: Any = None,
            on_selection_change: Optional[Callable[[Any], None]] = None,
            on_query_change: Optional[Callable[[str], None]] = None,
            read_only: bool = False,
            disabled: bool = False,
            error: bool = False,
            error_text: str = "",
            channel: Optional[OwnerChannel] = None,
            **extra_props):
        options = tuple(as_options(options))
        self.props = SelectProps(
            options=options,
            default_selection=self._coerce_default(default_selection, options),
            read_only=read_only,
            disabled=disabled,
            error=error,
            error_text=error_text,
            **extra_props
        )
        self.channel = channel if channel is not None else OwnerChannel(
            on_selection_change=on_selection_change,
            on_query_change=on_query_change
        )
        self.state = self.state_class()
        self.candidates: List[Option] = self._project()
        self._mount()

    # --- hooks for the concrete variants ---

    def _mount(self):
        self.dispatch(ApplyDefault(self.props.default_selection))

    def _project(self) -> List[Option]:
        """
        Computes the candidate list from the current props and state
        """
        raise NotImplementedError()

    def _coerce_default(self, default: Any, options: Iterable[Option]) -> Any:
        raise NotImplementedError()

    def _selected_options(self) -> List[Option]:
        raise NotImplementedError()

    def _activation_pool(self) -> Iterable[Option]:
        """
        Options that may be activated
        """
        return self.props.options

    def _on_selection_changed(self):
        self.channel.notify(SELECTION, self.selection)

    # --- core loop ---

    def _reduce(self, state: SelectionState, event: SelectEvent) -> SelectionState:
        return REDUCERS[self.state_class](state, event, self.props)

    def dispatch(self, event: SelectEvent) -> SelectionState:
        """
        Applies one event: reduce, recompute candidates, then notify the owner.
        """
        before = self.state
        self.state = self._reduce(before, event)
        self.candidates = self._project()
        if self.state != before:
            logging.debug(f"{type(self).__name__}: {event} -> {self.state}")

        if self._selection_key(before) != self._selection_key(self.state):
            self._on_selection_changed()
        if self.reports_query and isinstance(event, TypeQuery) and self.state.query == event.query \
                and self.props.interactive:
            self.channel.notify(QUERY, event.query)
        return self.state

    def _selection_key(self, state: SelectionState):
        selection = state.selection
        if selection is None:
            return None
        if isinstance(selection, tuple):
            return tuple(o.identity() for o in selection)
        return selection.identity()

    def _resolve(self, options: Iterable[Option], o: Any) -> Optional[Option]:
        return find_option(options, option_key(o))

    def _resolve_default(self, raw: Any, options: Iterable[Option]) -> Option:
        """
        Prefers the owner's own option instance when the default names one.
        Defaults missing from the option source are kept as given.
        """
        option = as_option(raw)
        return find_option(options, option.identity()) or option

    # --- user events ---

    def activate_option(self, o: Any):
        if not self.props.interactive:
            logging.debug(f"{type(self).__name__}: ignoring activation of {o!r} while not interactive")
            return
        option = self._resolve(self._activation_pool(), o)
        if option is None:
            logging.debug(f"{type(self).__name__}: ignoring activation of unknown option {o!r}")
            return
        self.dispatch(ActivateOption(option))

    def remove_option(self, o: Any):
        option = self._resolve(self._selected_options(), o)
        if option is None:
            return
        self.dispatch(RemoveOption(option))

    def type_query(self, query: str):
        self.dispatch(TypeQuery(query))

    def focus(self):
        self.dispatch(Focus())

    def blur(self):
        self.dispatch(Blur())

    def escape(self):
        self.dispatch(Escape())

    # --- owner events ---

    def set_props(self, **changes):
        """
        Updates the owner-supplied inputs.
        The scope is reconciled before the default, and candidates are rebuilt afterwards.
        """
        before = self.props
        if "options" in changes:
            changes["options"] = tuple(as_options(changes["options"]))
        options = changes.get("options", before.options)
        if "default_selection" in changes:
            changes["default_selection"] = self._coerce_default(changes["default_selection"], options)
        self.props = dataclasses.replace(before, **changes)

        if self.props.scope_key != before.scope_key:
            self.dispatch(ChangeScope(self.props.scope_key))
        if self.props.default_selection != before.default_selection:
            self.dispatch(ApplyDefault(self.props.default_selection))
        self.candidates = self._project()

    def reset(self):
        """
        Forgets the selection and the fact that a default was adopted, as if newly mounted
        """
        self.dispatch(Reset())
        self.dispatch(ApplyDefault(self.props.default_selection))

    # --- accessors ---

    @property
    def selection(self):
        return self.state.selection

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def dropdown_visible(self) -> bool:
        return self.state.is_open and self.props.interactive

    def snapshot(self) -> Dict[str, Any]:
        return {
            "controller": type(self).__name__,
            "state": self.state.to_dict(),
            "candidates": [o.to_dict() for o in self.candidates],
        }
