"""unit tests for `inquirer_cli`"""
from unittest.mock import patch

import pytest

from SelectKit.frontends import inquirer_cli
from SelectKit.frontends.inquirer_cli import (
    DONE, KEEP, SAMPLE_FORM, SEARCH, build_components, describe, merge_dependency, render, render_form
)
from SelectKit.html_components.MetaComponents.Dependency import Dependency
from SelectKit.html_components.SimpleComponents.Label import Label
from SelectKit.html_components.SimpleComponents.MultiSelect import MultiSelect
from SelectKit.html_components.SimpleComponents.SearchableSelect import SearchableSelect
from SelectKit.html_components.SimpleComponents.SingleSelect import SingleSelect
from SelectKit.html_components.SimpleComponents.SingleSelectWithSearch import SingleSelectWithSearch
from SelectKit.model.Option import IdentifiedOption
from SelectKit.test.test_utils import ALPHA_BETA, ENVIRONMENTS


def scripted(*answers):
    """
    Replaces inquirer.prompt with one that returns the given answers in order.
    None simulates the user pressing Ctrl+C.
    """
    remaining = list(answers)

    def prompt(questions, *args, **kwargs):
        answer = remaining.pop(0)
        if answer is None:
            return None
        return {questions[0].name: answer}

    return patch("SelectKit.frontends.inquirer_cli.inquirer.prompt", side_effect=prompt)


class TestRender:
    def test_multi_select(self):
        m = MultiSelect("projects", "Projects", ALPHA_BETA)
        with scripted("", ("add", 1), "", ("add", 2), "", ("remove", 1), "", DONE):
            out = render(m)
        assert out == {"projects": [IdentifiedOption(2, "Beta")]}
        assert not m.controller.is_open

    def test_multi_select_search(self):
        m = MultiSelect("projects", "Projects", ALPHA_BETA)
        with scripted("bet", SEARCH, "", DONE):
            out = render(m)
        assert out == {"projects": []}
        assert m.controller.query == ""

    def test_single_select_with_search(self):
        s = SingleSelectWithSearch("app", "App", ALPHA_BETA)
        with scripted("alp", ("choose", 1)):
            out = render(s)
        assert out == {"app": IdentifiedOption(1, "Alpha")}

    def test_single_select_keep(self):
        s = SingleSelectWithSearch("app", "App", ALPHA_BETA, default={"id": 2, "name": "Beta"})
        with scripted("", KEEP):
            out = render(s)
        assert out == {"app": IdentifiedOption(2, "Beta")}

    def test_searchable_select_uses_dependency_context(self):
        s = SearchableSelect("env", "Environment", ENVIRONMENTS, scope_identifier="group")
        with scripted("", ("choose", "Option 3")):
            out = render(s, {"group": "Group 2"})
        assert out == {"env": "Option 3"}

    def test_read_only_searchable_select_asks_nothing(self):
        s = SearchableSelect("env", "Environment", ENVIRONMENTS, value="Option 1", read_only=True)
        with scripted() as prompt:
            out = render(s)
        assert out == {"env": "Option 1"}
        prompt.assert_not_called()

    def test_dependency(self):
        group = SingleSelect("group", "Group", ["Group 1", "Group 2"])
        env = SearchableSelect("env", "Environment", ENVIRONMENTS, scope_identifier="group")
        with scripted("Group 1", "", ("choose", "Option 2")):
            out = render(Dependency("group", [env, group]))
        assert out == {"group": "Group 1", "env": "Option 2"}

    def test_label(self, capsys):
        assert render(Label("Hello")) == {}
        assert "Hello" in capsys.readouterr().out

    def test_unknown_component(self):
        with pytest.raises(Exception):
            render(object())


class TestForms:
    def test_build_and_merge_sample_form(self):
        components = merge_dependency(build_components(SAMPLE_FORM))
        assert isinstance(components[0], Dependency)
        assert components[0].source.identifier == "app"
        assert [c.identifier for c in components[0].dependents] == ["environment"]
        assert isinstance(components[1], MultiSelect)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            build_components({"components": [{"type": "Slider", "identifier": "x"}]})

    def test_unknown_dependency(self):
        components = [SearchableSelect("env", "Environment", ENVIRONMENTS, scope_identifier="nowhere")]
        with pytest.raises(ValueError):
            merge_dependency(components)

    def test_ctrl_c_goes_back(self):
        components = [SingleSelect("a", "A", ["x", "y"]), SingleSelect("b", "B", ["p", "q"])]
        with scripted("x", None, "y", "q"):
            answers = render_form(components)
        assert answers == {"a": "y", "b": "q"}

    def test_ctrl_c_on_first_cancels(self):
        with scripted(None):
            assert render_form([SingleSelect("a", "A", ["x"])]) is None

    def test_sample_form_end_to_end(self, capsys):
        with scripted(
                "plan", ("choose", "app-3"),
                "", ("choose", "planner-prod"),
                "", ("add", "p-2"), "", DONE):
            inquirer_cli.main()
        out = capsys.readouterr().out
        assert "Production Planner" in out
        assert "planner-prod" in out
        assert "Beta" in out


class TestDescribe:
    def test_describe(self):
        assert describe(None) == ""
        assert describe(IdentifiedOption(1, "Alpha")) == "Alpha"
        assert describe([IdentifiedOption(1, "Alpha"), IdentifiedOption(2, "Beta")]) == "Alpha, Beta"
        assert describe("x") == "x"
