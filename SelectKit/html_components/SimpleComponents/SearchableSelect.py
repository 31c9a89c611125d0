from html import escape
from typing import Any, Callable, List, Optional

from SelectKit.WidgetConfig import WIDGET_CONFIG
from SelectKit.html_components import HTMLComponent
from SelectKit.model.Option import Option
from SelectKit.selection.ScopedSelectController import ScopedSelectController


class SearchableSelect(HTMLComponent):
    """
    A select whose options are restricted to one group (the scope).
    Clicking the displayed value opens a search box over the options of that group.

    scope_identifier: identifier of the component whose value provides the scope, if any
    """

    name: str = "SearchableSelect"

    def __init__(
            self,
            identifier: str,
            title: str,
            options: List[Any],
            value: Optional[str] = None,
            scope_key: str = "",
            scope_identifier: Optional[str] = None,
            on_selection_change: Optional[Callable[[Optional[Option]], None]] = None,
            on_query_change: Optional[Callable[[str], None]] = None,
            on_validate: Optional[Callable[[str], None]] = None,
            read_only: bool = False):
        self.identifier = identifier
        self.title = title
        self.scope_identifier = scope_identifier
        self.controller = ScopedSelectController(
            options,
            value=value,
            scope_key=scope_key,
            on_selection_change=on_selection_change,
            on_query_change=on_query_change,
            on_validate=on_validate,
            read_only=read_only
        )
        super().__init__()

    def value(self) -> str:
        return self.controller.value

    def _representation(self) -> str:
        c = self.controller
        cursor = "cursor-default" if c.props.read_only else "cursor-pointer"
        dropdown = ""
        if c.dropdown_visible:
            if c.candidates:
                items = "\n".join(f"""<div class="option">{escape(o.display_text())}</div>""" for o in c.candidates)
            else:
                items = f"""<div class="empty">{escape(WIDGET_CONFIG.no_options_text)}</div>"""
            dropdown = f"""<div class="dropdown">
            <input type="text" placeholder="{escape(WIDGET_CONFIG.search_placeholder)}" value="{escape(c.query)}" />
            {items}
            </div>"""
        return f"""<label for="{self.html_id(self.title)}">{escape(self.title)}</label>
        <div class="{cursor}"><div class="value">{escape(c.display_value)}</div></div>
        {dropdown}"""
