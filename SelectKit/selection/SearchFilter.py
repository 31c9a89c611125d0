from typing import Any, Iterable, List, Optional, Sequence

from SelectKit.model.Option import Option, ScopedOption, as_options


def matches_query(option: Option, query: str) -> bool:
    """
    Case-insensitive substring match against the option's display text.
    An empty query matches everything.
    """
    if not query:
        return True
    return query.lower() in option.display_text().lower()


def restrict_to_scope(options: Iterable[Option], scope_key: str) -> List[Option]:
    """
    Keeps only the options eligible under `scope_key`.
    Options without a filter key never belong to a scope.
    """
    return [o for o in options if isinstance(o, ScopedOption) and o.filter_key == scope_key]


def compute_candidates(
        option_source: Iterable[Any],
        query: str = "",
        selection: Sequence[Option] = (),
        scope_key: Optional[str] = None,
        exclude_selected: bool = True) -> List[Option]:
    """
    Derives the list of options that can currently be offered to the user.

    Args:
        option_source: the owner's options, in display order
        query: free text typed into the search box
        selection: options already committed
        scope_key: if non-empty, only options with this filter key are eligible
        exclude_selected: whether committed options are removed from the result

    Returns:
        The candidates, in option source order.
    """
    candidates = as_options(option_source)
    if scope_key:
        candidates = restrict_to_scope(candidates, scope_key)
    if exclude_selected and selection:
        taken = {o.identity() for o in selection}
        candidates = [o for o in candidates if o.identity() not in taken]
    return [o for o in candidates if matches_query(o, query)]


def filter_search(items: Sequence[Any], property_name: str, searched_value: str) -> List[Any]:
    """
    Filters a list of strings or records (mappings or objects) on one property.
    Strings are matched directly; records are matched on `property_name`.
    An empty search returns every item.
    """
    if not searched_value:
        return list(items)
    needle = searched_value.lower()

    def value_of(item):
        if isinstance(item, str):
            return item
        if isinstance(item, dict):
            return str(item.get(property_name, ""))
        return str(getattr(item, property_name, ""))

    return [item for item in items if needle in value_of(item).lower()]
