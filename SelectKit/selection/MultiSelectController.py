from typing import Any, Iterable, List, Tuple

from SelectKit.model.Option import Option
from SelectKit.model.SelectionState import MultiSelectState
from SelectKit.selection.SearchFilter import compute_candidates
from SelectKit.selection.SelectionController import SelectionController


class MultiSelectController(SelectionController):
    """
    Selects any number of options, shown as chips in the order they were picked.
    Picked options disappear from the candidates, and the search text clears after each pick.
    The owner is always sent the whole selection, never a diff.
    """

    state_class = MultiSelectState

    def _coerce_default(self, default: Any, options: Iterable[Option]) -> Tuple[Option, ...]:
        if not default:
            return ()
        return tuple(self._resolve_default(d, options) for d in default)

    def _project(self) -> List[Option]:
        return compute_candidates(self.props.options, self.state.query, self.state.selection)

    def _selected_options(self) -> List[Option]:
        return list(self.state.selection)
