from html import escape
from typing import Any


class HTMLComponent:
    identifier: str
    uniqueId = 0

    name = "abstract_HTMLComponent"

    # whether a component requires user interaction (no: label, yes: select)
    noInteraction = False

    def render(self) -> str:
        return f"""<div class="{escape(self.name)}">{self._representation()}</div>"""

    def _representation(self) -> str:
        """
        Renders this component as HTML
        :return: the html rendering of this component
        """
        raise NotImplementedError()

    def value(self) -> Any:
        """
        The value this component hands back to its owner
        """
        return None

    @staticmethod
    def html_id(label: str) -> str:
        """
        Turns a label into an element id: spaces become hyphens, everything lowercase
        """
        return "-".join(label.split(" ")).lower()

    @staticmethod
    def error_html(error: bool, error_text: str) -> str:
        if not error:
            return ""
        return f"""<p class="error">{escape(error_text)}</p>"""

    @classmethod
    def get_unique_str(cls) -> str:
        t = cls.uniqueId
        cls.uniqueId += 1
        return str(t)
