from html import escape

from SelectKit.html_components import HTMLComponent


class Label(HTMLComponent):

    name: str = "Label"
    noInteraction = True

    def __init__(self, title: str):
        self.title = title
        self.identifier = "label" + self.get_unique_str()
        super().__init__()

    def _representation(self) -> str:
        return f"""<p>{escape(self.title)}</p>"""
