from typing import List

from SelectKit.html_components import HTMLComponent
from SelectKit.model.Option import is_option


class Dependency(HTMLComponent):
    """
    Groups components whose scope comes from the value of another component.
    The component depended on is kept at the front.

    dependentOn: the identifier of the HTMLComponent depended on
    """

    name: str = "Dependency"

    def __init__(self, dependentOn: str, htmlComponents: List[HTMLComponent]):
        self.dependentOn = dependentOn
        self.identifier = "dependency" + self.get_unique_str()
        self.htmlComponents = htmlComponents
        self.move_dependent_to_front()
        super().__init__()

    def move_dependent_to_front(self):
        # only the required element should have score False(=0) (and the rest True(=1))
        self.htmlComponents.sort(key=lambda h: h.identifier != self.dependentOn)
        assert self.htmlComponents and self.htmlComponents[0].identifier == self.dependentOn, \
            f"Dependency on {self.dependentOn} does not contain it"

    @property
    def source(self) -> HTMLComponent:
        return self.htmlComponents[0]

    @property
    def dependents(self) -> List[HTMLComponent]:
        return self.htmlComponents[1:]

    def scope_key(self) -> str:
        """
        The source's value as a scope key: an option's display text, or the empty string
        """
        value = self.source.value()
        if is_option(value):
            return value.display_text()
        return value if isinstance(value, str) else ""

    def propagate(self):
        """
        Hands the source's current value to every dependent as its scope
        """
        key = self.scope_key()
        for h in self.dependents:
            if getattr(h, "scope_identifier", None) == self.dependentOn:
                h.controller.set_scope(key)

    def _representation(self) -> str:
        self.propagate()
        return "\n".join(h.render() for h in self.htmlComponents)
