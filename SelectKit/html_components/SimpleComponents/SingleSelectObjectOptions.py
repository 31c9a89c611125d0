from html import escape
from typing import Any, Callable, Hashable, List, Optional

from SelectKit.html_components import HTMLComponent
from SelectKit.model.Option import IdentifiedOption, as_option, as_options, find_option


class SingleSelectObjectOptions(HTMLComponent):
    """
    A plain drop down over {id, name} options.
    The default option is listed first and not repeated among the others.
    """

    name: str = "SingleSelectObjectOptions"

    def __init__(
            self,
            identifier: str,
            title: str,
            options: List[Any],
            default: Any = None,
            disabled: bool = False,
            on_select: Optional[Callable[[Optional[IdentifiedOption]], None]] = None,
            error: bool = False,
            error_text: str = ""):
        self.identifier = identifier
        self.title = title
        self.options = as_options(options)
        self.default = as_option(default) if default is not None else None
        self.disabled = disabled
        self.on_select = on_select
        self.error = error
        self.error_text = error_text
        self.selected = self.default
        super().__init__()

    def option_list(self) -> List[IdentifiedOption]:
        if self.default is None:
            return list(self.options)
        return [o for o in self.options if o.identity() != self.default.identity()]

    def select(self, option_id: Hashable):
        """
        Chooses the first option with this id; an unknown id (the blank entry) chooses nothing
        """
        if self.disabled:
            return
        self.selected = find_option(self.options, option_id)
        if self.selected is None and self.default is not None and self.default.identity() == option_id:
            self.selected = self.default
        if self.on_select is not None:
            self.on_select(self.selected)

    def value(self) -> Optional[IdentifiedOption]:
        return self.selected

    def _representation(self) -> str:
        first = '<option value=""></option>'
        if self.default is not None:
            first = f'<option value="{escape(str(self.default.identity()))}">{escape(self.default.display_text())}</option>'
        options = "\n".join(
            f'<option value="{escape(str(o.identity()))}">{escape(o.display_text())}</option>'
            for o in self.option_list()
        )
        html_id = self.html_id(self.title)
        label = f"""<label for="{html_id}">{escape(self.title)}</label>""" if self.title else ""
        disabled = " disabled" if self.disabled else ""
        return f"""{label}
        <select id="{html_id}" aria-label="{escape(self.title)}"{disabled}>
        {first}
        {options}
        </select>
        {self.error_html(self.error, self.error_text)}"""
