import logging
from html import escape
from typing import Callable, List, Optional

from SelectKit.html_components import HTMLComponent


class SingleSelect(HTMLComponent):
    """
    A plain drop down over string options, without search.
    A default that isn't one of the options is offered first.
    """

    name: str = "SingleSelect"

    def __init__(
            self,
            identifier: str,
            title: str,
            options: List[str],
            default: str = "",
            blank_first_option: bool = True,
            disabled: bool = False,
            on_select: Optional[Callable[[str], None]] = None):
        self.identifier = identifier
        self.title = title
        self.options = [o for o in options]
        self.default = default
        self.blank_first_option = blank_first_option
        self.disabled = disabled
        self.on_select = on_select
        self.selected = default
        super().__init__()

    def option_list(self) -> List[str]:
        choices = []
        if self.default and self.default not in self.options:
            choices.append(self.default)
        if self.blank_first_option:
            choices.append("")
        return choices + self.options

    def select(self, choice: str):
        if self.disabled:
            return
        if choice not in self.option_list():
            logging.debug(f"{self.identifier}: ignoring unknown choice {choice!r}")
            return
        self.selected = choice
        if self.on_select is not None:
            self.on_select(choice)

    def value(self) -> str:
        return self.selected

    def _representation(self) -> str:
        list_options = []
        for option in self.option_list():
            selected = " selected" if option == self.selected else ""
            list_options.append(f'<option value="{escape(option.lower())}"{selected}>{escape(option)}</option>')
        options = "\n".join(list_options)
        html_id = self.html_id(self.title)
        disabled = " disabled" if self.disabled else ""
        return f"""<label for="{html_id}">{escape(self.title)}</label>
        <select id="{html_id}"{disabled}>
        {options}
        </select>"""
