from typing import Any, Iterable, List, Optional

from SelectKit.model.Option import Option
from SelectKit.model.SelectionState import SingleSelectState
from SelectKit.selection.SearchFilter import compute_candidates
from SelectKit.selection.SelectionController import SelectionController


class SingleSelectController(SelectionController):
    """
    Selects at most one option through a search field.

    Committing an option writes its display text into the field, and the option is
    hidden from the candidates for as long as the field still shows it. Typing
    un-commits, so every matching option is offered again.
    """

    state_class = SingleSelectState
    reports_query = True

    def _coerce_default(self, default: Any, options: Iterable[Option]) -> Optional[Option]:
        if default is None or default == "":
            return None
        return self._resolve_default(default, options)

    def _project(self) -> List[Option]:
        if self.state.committed and self.state.selection is not None:
            # the field shows the committed option rather than a search
            return compute_candidates(self.props.options, "", (self.state.selection,))
        return compute_candidates(self.props.options, self.state.query)

    def _selected_options(self) -> List[Option]:
        return [self.state.selection] if self.state.selection is not None else []

    def clear(self):
        if self.state.selection is not None:
            self.remove_option(self.state.selection)
