from dataclasses import dataclass
from typing import Any

from SelectKit.model.Option import Option


class SelectEvent:
    """ Something that happened to a select widget """


@dataclass(frozen=True)
class TypeQuery(SelectEvent):
    query: str


@dataclass(frozen=True)
class ActivateOption(SelectEvent):
    option: Option


@dataclass(frozen=True)
class RemoveOption(SelectEvent):
    option: Option


@dataclass(frozen=True)
class Focus(SelectEvent):
    pass


@dataclass(frozen=True)
class Blur(SelectEvent):
    pass


@dataclass(frozen=True)
class Escape(SelectEvent):
    pass


@dataclass(frozen=True)
class ToggleOpen(SelectEvent):
    """ Click on the displayed value of a scoped select """


@dataclass(frozen=True)
class ChangeScope(SelectEvent):
    scope_key: str


@dataclass(frozen=True)
class ApplyDefault(SelectEvent):
    # tuple of options for multi-select, a single option (or None) otherwise
    default: Any


@dataclass(frozen=True)
class Reset(SelectEvent):
    pass
