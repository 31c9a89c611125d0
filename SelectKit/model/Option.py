import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, List, Mapping, Optional, Union

from dataclasses_json import dataclass_json, config

from SelectKit.WidgetConfig import WIDGET_CONFIG


class MalformedOptionError(ValueError):
    """Raised when an owner-supplied option is missing the fields needed to display it"""


@dataclass_json
@dataclass(frozen=True)
class StringOption:
    """ A plain string option; the string is both its identity and its display text """
    value: str

    def identity(self) -> Hashable:
        return self.value

    def display_text(self) -> str:
        return self.value


@dataclass_json
@dataclass(frozen=True)
class IdentifiedOption:
    """ A record option, identified by `id` and displayed by `name` """
    id: Hashable
    name: str

    def identity(self) -> Hashable:
        return self.id

    def display_text(self) -> str:
        return self.name


@dataclass_json
@dataclass(frozen=True)
class ScopedOption:
    """ An option that only belongs to the group named by its filter key """
    label: str

    # the scope this option is eligible under
    filter_key: str = field(metadata=config(field_name="filterKey"))

    def identity(self) -> Hashable:
        return self.label

    def display_text(self) -> str:
        return self.label


Option = Union[StringOption, IdentifiedOption, ScopedOption]
OPTION_TYPES = (StringOption, IdentifiedOption, ScopedOption)


def identity(option: Option) -> Hashable:
    return option.identity()


def display_text(option: Option) -> str:
    return option.display_text()


def is_option(o: Any) -> bool:
    return isinstance(o, OPTION_TYPES)


def as_option(raw: Any) -> Option:
    """
    Converts an owner-supplied value into an Option.

    Accepts existing options, plain strings, and mappings with either
    `id`/`name` or `label`/`filterKey` (`filter_key` is also understood).

    :raises MalformedOptionError: if the value has none of the recognised shapes
    """
    if is_option(raw):
        return raw
    if isinstance(raw, str):
        return StringOption(raw)
    if isinstance(raw, Mapping):
        if "id" in raw and raw.get("name") is not None:
            return IdentifiedOption(id=raw["id"], name=str(raw["name"]))
        filter_key = raw.get("filterKey", raw.get("filter_key"))
        if raw.get("label") is not None and filter_key is not None:
            return ScopedOption(label=str(raw["label"]), filter_key=str(filter_key))
    raise MalformedOptionError(f"Cannot interpret {raw!r} as an option")


def as_options(raws: Optional[Iterable[Any]]) -> List[Option]:
    """
    Normalises an option source.
    Malformed rows raise when `strict_options` is set, otherwise they are dropped.
    Only the first option with a given identity is kept.
    """
    options = []
    seen = set()
    for raw in raws or []:
        try:
            option = as_option(raw)
        except MalformedOptionError:
            if WIDGET_CONFIG.strict_options:
                raise
            logging.warning(f"Dropping malformed option {raw!r}")
            continue
        if option.identity() in seen:
            logging.debug(f"Duplicate option identity {option.identity()!r}, keeping the first occurrence")
            continue
        seen.add(option.identity())
        options.append(option)
    return options


def find_option(options: Iterable[Option], key: Hashable) -> Optional[Option]:
    """
    Returns the first option whose identity is `key`, or None
    """
    for o in options:
        if o.identity() == key:
            return o
    return None
