from html import escape
from typing import Any, Callable, List, Optional

from SelectKit.html_components import HTMLComponent
from SelectKit.model.Option import Option
from SelectKit.selection.MultiSelectController import MultiSelectController


class MultiSelect(HTMLComponent):
    """
    Search box with the chosen options shown as removable chips above it.
    """

    name: str = "MultiSelect"

    def __init__(
            self,
            identifier: str,
            title: str,
            options: List[Any],
            defaults: Optional[List[Any]] = None,
            placeholder: str = "",
            on_selection_change: Optional[Callable[[tuple], None]] = None,
            error: bool = False,
            error_text: str = ""):
        self.identifier = identifier
        self.title = title
        self.placeholder = placeholder
        self.controller = MultiSelectController(
            options,
            default_selection=defaults,
            on_selection_change=on_selection_change,
            error=error,
            error_text=error_text
        )
        super().__init__()

    def value(self) -> List[Option]:
        return list(self.controller.selection)

    def _chip(self, option: Option) -> str:
        return f"""<div class="chip" data-identity="{escape(str(option.identity()))}">{escape(option.display_text())}
            <button aria-label="remove {escape(option.display_text())}">X</button></div>"""

    def _representation(self) -> str:
        c = self.controller
        html_id = self.html_id(self.title)
        chips = "\n".join(self._chip(o) for o in c.selection)
        items = ""
        if c.dropdown_visible and c.candidates:
            items = "\n".join(
                f"""<li data-identity="{escape(str(o.identity()))}">{escape(o.display_text())}</li>"""
                for o in c.candidates
            )
        label = f"""<label for="{html_id}">{escape(self.title)}</label>""" if self.title else ""
        placeholder = "" if c.selection else escape(self.placeholder)
        return f"""{label}
        <div id="{html_id}" aria-label="{escape(self.title)}">
            <div class="chips">{chips}
                <input type="search" value="{escape(c.query)}" placeholder="{placeholder}" />
            </div>
            <ul data-testid="{html_id}">{items}</ul>
        </div>
        {self.error_html(c.props.error, c.props.error_text)}"""
