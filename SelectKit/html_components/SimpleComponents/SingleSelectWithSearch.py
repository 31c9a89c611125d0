from html import escape
from typing import Any, Callable, List, Optional

from SelectKit.html_components import HTMLComponent
from SelectKit.model.Option import Option
from SelectKit.selection.SingleSelectController import SingleSelectController


class SingleSelectWithSearch(HTMLComponent):
    """
    A search field that doubles as the display of the chosen option.
    """

    name: str = "SingleSelectWithSearch"

    def __init__(
            self,
            identifier: str,
            title: str,
            options: List[Any],
            default: Any = None,
            on_selection_change: Optional[Callable[[Option], None]] = None,
            on_query_change: Optional[Callable[[str], None]] = None,
            disabled: bool = False,
            error: bool = False,
            error_text: str = ""):
        self.identifier = identifier
        self.title = title
        self.controller = SingleSelectController(
            options,
            default_selection=default,
            on_selection_change=on_selection_change,
            on_query_change=on_query_change,
            disabled=disabled,
            error=error,
            error_text=error_text
        )
        super().__init__()

    def value(self) -> Optional[Option]:
        return self.controller.selection

    def _representation(self) -> str:
        c = self.controller
        html_id = self.html_id(self.title)
        items = ""
        if c.dropdown_visible and c.candidates:
            items = "\n".join(
                f"""<li data-testid="option" data-identity="{escape(str(o.identity()))}">{escape(o.display_text())}</li>"""
                for o in c.candidates
            )
        disabled = " disabled" if c.props.disabled else ""
        return f"""<label for="{html_id}">{escape(self.title)}</label>
        <input id="{html_id}" type="search" role="searchbox" aria-label="{escape(self.title)}" value="{escape(c.query)}"{disabled} />
        <ul aria-label="option">{items}</ul>
        {self.error_html(c.props.error, c.props.error_text)}"""
