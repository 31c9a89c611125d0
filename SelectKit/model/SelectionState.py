from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from dataclasses_json import dataclass_json

from SelectKit.model.Option import Option


@dataclass(frozen=True)
class SelectProps:
    """ Inputs owned by the parent of a select widget """

    options: Tuple[Option, ...] = ()

    # initial selection: a tuple of options for multi-select, a single option (or None) otherwise
    default_selection: Any = None

    # scoped selects only
    scope_key: str = ""

    read_only: bool = False
    disabled: bool = False

    # purely presentational
    error: bool = False
    error_text: str = ""

    @property
    def interactive(self) -> bool:
        return not (self.read_only or self.disabled)


@dataclass_json
@dataclass(frozen=True)
class SelectionState:
    """ UI state shared by every select variant """
    query: str = ""
    is_open: bool = False
    is_focused: bool = False

    # set once the owner's default selection has been adopted
    default_applied: bool = False


@dataclass_json
@dataclass(frozen=True)
class MultiSelectState(SelectionState):
    # in insertion order, which is also the display order of the chips
    selection: Tuple[Option, ...] = field(default_factory=tuple)


@dataclass_json
@dataclass(frozen=True)
class SingleSelectState(SelectionState):
    selection: Optional[Option] = None

    # whether the text field still shows the committed option; typing clears this
    committed: bool = False


@dataclass_json
@dataclass(frozen=True)
class ScopedSelectState(SelectionState):
    selection: Optional[Option] = None

    # last non-empty scope key seen
    scope_key: str = ""
