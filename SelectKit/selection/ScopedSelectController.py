from typing import Any, Callable, Iterable, List, Optional

from SelectKit.WidgetConfig import WIDGET_CONFIG
from SelectKit.model.Events import ChangeScope, ToggleOpen
from SelectKit.model.Option import Option
from SelectKit.model.SelectionState import ScopedSelectState
from SelectKit.selection.OwnerChannel import OwnerChannel, VALIDATE
from SelectKit.selection.SearchFilter import compute_candidates, restrict_to_scope
from SelectKit.selection.SelectionController import SelectionController


class ScopedSelectController(SelectionController):
    """
    A single select whose eligible options depend on a scope key,
    usually the value chosen in another select.

    Moving from one scope to a different one drops the selection, since the
    old value may not exist in the new scope. The very first scope never does,
    so a value supplied by the owner survives it.
    """

    state_class = ScopedSelectState
    reports_query = True

    def __init__(
            self,
            options: Iterable[Any],
            value: Any = None,
            scope_key: str = "",
            on_selection_change: Optional[Callable[[Any], None]] = None,
            on_query_change: Optional[Callable[[str], None]] = None,
            on_validate: Optional[Callable[[str], None]] = None,
            read_only: bool = False,
            disabled: bool = False,
            error: bool = False,
            error_text: str = "",
            channel: Optional[OwnerChannel] = None):
        if channel is None:
            channel = OwnerChannel(
                on_selection_change=on_selection_change,
                on_query_change=on_query_change,
                on_validate=on_validate
            )
        super().__init__(
            options,
            default_selection=value,
            read_only=read_only,
            disabled=disabled,
            error=error,
            error_text=error_text,
            channel=channel,
            scope_key=scope_key or ""
        )

    def _mount(self):
        if self.props.scope_key:
            self.dispatch(ChangeScope(self.props.scope_key))
        super()._mount()

    def _coerce_default(self, default: Any, options: Iterable[Option]) -> Optional[Option]:
        if default is None or default == "":
            return None
        return self._resolve_default(default, options)

    def _project(self) -> List[Option]:
        if not self.props.scope_key:
            return []
        return compute_candidates(
            self.props.options,
            self.state.query,
            scope_key=self.props.scope_key,
            exclude_selected=False
        )

    def _activation_pool(self) -> Iterable[Option]:
        return restrict_to_scope(self.props.options, self.props.scope_key)

    def _selected_options(self) -> List[Option]:
        return [self.state.selection] if self.state.selection is not None else []

    def _on_selection_changed(self):
        super()._on_selection_changed()
        if self.state.selection is not None:
            self.channel.notify(VALIDATE, self.state.selection.display_text())

    def toggle_open(self):
        """
        Click on the displayed value; never opens a read-only select
        """
        self.dispatch(ToggleOpen())

    def set_scope(self, scope_key: str):
        self.set_props(scope_key=scope_key or "")

    def set_value(self, value: Any):
        """
        Owner-side update of the value. Adopted only while nothing is selected
        and no value has been adopted before.
        """
        self.set_props(default_selection=value)

    @property
    def value(self) -> str:
        return self.state.selection.display_text() if self.state.selection is not None else ""

    @property
    def display_value(self) -> str:
        return self.value or WIDGET_CONFIG.select_placeholder
