# -*- coding: utf-8 -*-
import json
import logging
from typing import Any, Dict, List, Optional

import inquirer
import tabulate

from SelectKit.WidgetConfig import WIDGET_CONFIG
from SelectKit.html_components import HTMLComponent
from SelectKit.html_components.MetaComponents.Dependency import Dependency
from SelectKit.html_components.SimpleComponents.Label import Label
from SelectKit.html_components.SimpleComponents.MultiSelect import MultiSelect
from SelectKit.html_components.SimpleComponents.SearchableSelect import SearchableSelect
from SelectKit.html_components.SimpleComponents.SingleSelect import SingleSelect
from SelectKit.html_components.SimpleComponents.SingleSelectObjectOptions import SingleSelectObjectOptions
from SelectKit.html_components.SimpleComponents.SingleSelectWithSearch import SingleSelectWithSearch
from SelectKit.model.Option import is_option

COMPONENT_TYPES = {
    c.name: c for c in
    [Label, MultiSelect, SearchableSelect, SingleSelect, SingleSelectObjectOptions, SingleSelectWithSearch]
}

# components of the form currently being filled in, for crash reports
ACTIVE_COMPONENTS: List[HTMLComponent] = []

# menu entries are (action, key) pairs so they can't collide with option identities
DONE = ("done", None)
SEARCH = ("search", None)
KEEP = ("keep", None)
CLEAR = ("clear", None)

SAMPLE_FORM = {
    "title": "Create an API key",
    "components": [
        {
            "type": "SingleSelectWithSearch",
            "identifier": "app",
            "title": "Application",
            "options": [
                {"id": "app-1", "name": "Billing"},
                {"id": "app-2", "name": "Inventory"},
                {"id": "app-3", "name": "Production Planner"},
            ],
        },
        {
            "type": "SearchableSelect",
            "identifier": "environment",
            "title": "Environment",
            "scope_identifier": "app",
            "options": [
                {"label": "billing-dev", "filterKey": "Billing"},
                {"label": "billing-prod", "filterKey": "Billing"},
                {"label": "inventory-staging", "filterKey": "Inventory"},
                {"label": "planner-prod", "filterKey": "Production Planner"},
            ],
        },
        {
            "type": "MultiSelect",
            "identifier": "projects",
            "title": "Projects",
            "placeholder": "Search projects",
            "options": [
                {"id": "p-1", "name": "Alpha"},
                {"id": "p-2", "name": "Beta"},
                {"id": "p-3", "name": "Gamma"},
            ],
        },
    ]
}


def inquirer_prompt_with_abort(*args, **kwargs) -> Any:
    """
    Catches implicit keyboard interrupts in user code (i.e., inquirer output = None)
    """
    output = inquirer.prompt(*args, **kwargs)
    if output is None:
        raise KeyboardInterrupt
    return output


def escape_format_braces(s: str) -> str:
    """
    inquirer runs messages through str.format, so braces in user text must be doubled
    """
    return s.replace("{", "{{").replace("}", "}}")


def describe(value: Any) -> str:
    """
    Human readable text for a component's value
    """
    if value is None:
        return ""
    if is_option(value):
        return value.display_text()
    if isinstance(value, (list, tuple)):
        return ", ".join(describe(v) for v in value)
    return str(value)


def search(message: str, current: str) -> str:
    q = [inquirer.Text(
        name="q",
        default=current,
        message=f"{escape_format_braces(message)} (search, blank for everything)"
    )]
    return inquirer_prompt_with_abort(q)["q"]


def render(html_component, dependency_context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Asks the user for the value of a component.
    Returns a map from the component's identifier to its value.
    """
    if dependency_context is None:
        dependency_context = {}

    if isinstance(html_component, Dependency):
        out = render(html_component.source, dependency_context)
        html_component.propagate()
        context = dependency_context.copy()
        context.update(out)
        for h in html_component.dependents:
            out.update(render(h, context))
        return out

    elif isinstance(html_component, MultiSelect):
        c = html_component.controller
        title = escape_format_braces(html_component.title)
        c.focus()
        while True:
            c.type_query(search(html_component.title, c.query))
            if c.selection:
                print(tabulate.tabulate([[o.display_text()] for o in c.selection], headers=[html_component.title]))
            choices = [("*DONE*", DONE), ("*SEARCH AGAIN*", SEARCH)] \
                + [(f"Remove {escape_format_braces(o.display_text())}", ("remove", o.identity())) for o in c.selection] \
                + [(escape_format_braces(o.display_text()), ("add", o.identity())) for o in c.candidates]
            q = [inquirer.List(name="q", message=title, choices=choices)]
            action, key = inquirer_prompt_with_abort(q)["q"]
            if action == "done":
                break
            elif action == "add":
                c.activate_option(key)
            elif action == "remove":
                c.remove_option(key)
        c.blur()
        return {html_component.identifier: html_component.value()}

    elif isinstance(html_component, SingleSelectWithSearch):
        c = html_component.controller
        if c.props.disabled:
            return {html_component.identifier: html_component.value()}
        c.focus()
        while True:
            c.type_query(search(html_component.title, c.query))
            choices = [("*SEARCH AGAIN*", SEARCH)]
            if c.selection is not None:
                choices.append((f"*KEEP {escape_format_braces(c.selection.display_text())}*", KEEP))
            choices += [(escape_format_braces(o.display_text()), ("choose", o.identity())) for o in c.candidates]
            q = [inquirer.List(name="q", message=escape_format_braces(html_component.title), choices=choices)]
            action, key = inquirer_prompt_with_abort(q)["q"]
            if action == "keep":
                break
            elif action == "choose":
                c.activate_option(key)
                break
        c.blur()
        return {html_component.identifier: html_component.value()}

    elif isinstance(html_component, SearchableSelect):
        c = html_component.controller
        if html_component.scope_identifier in dependency_context:
            scope = describe(dependency_context[html_component.scope_identifier])
            c.set_scope(scope)
        if c.props.read_only:
            print(f"{html_component.title}: {c.display_value}")
            return {html_component.identifier: html_component.value()}
        c.toggle_open()
        while c.is_open:
            c.type_query(search(html_component.title, c.query))
            if not c.candidates:
                print(WIDGET_CONFIG.no_options_text)
            choices = [("*SEARCH AGAIN*", SEARCH), (f"*KEEP {escape_format_braces(c.display_value)}*", KEEP)] \
                + [(escape_format_braces(o.display_text()), ("choose", o.identity())) for o in c.candidates]
            q = [inquirer.List(name="q", message=escape_format_braces(html_component.title), choices=choices)]
            action, key = inquirer_prompt_with_abort(q)["q"]
            if action == "keep":
                c.toggle_open()
            elif action == "choose":
                c.activate_option(key)
        return {html_component.identifier: html_component.value()}

    elif isinstance(html_component, SingleSelectObjectOptions):
        if html_component.disabled:
            return {html_component.identifier: html_component.value()}
        choices = [(escape_format_braces(o.display_text()), o.identity()) for o in html_component.option_list()]
        if html_component.default is not None:
            choices.insert(0, (escape_format_braces(html_component.default.display_text()),
                               html_component.default.identity()))
        else:
            choices.insert(0, ("", None))
        q = [inquirer.List(
            name="q",
            message=escape_format_braces(html_component.title),
            choices=choices
        )]
        html_component.select(inquirer_prompt_with_abort(q)["q"])
        return {html_component.identifier: html_component.value()}

    elif isinstance(html_component, SingleSelect):
        if html_component.disabled:
            return {html_component.identifier: html_component.value()}
        q = [inquirer.List(
            name="q",
            message=escape_format_braces(html_component.title),
            choices=html_component.option_list(),
            default=html_component.selected
        )]
        html_component.select(inquirer_prompt_with_abort(q)["q"])
        return {html_component.identifier: html_component.value()}

    elif isinstance(html_component, Label):
        print(html_component.title)
        return {}

    else:
        raise Exception("Unknown component type:", type(html_component))


def build_components(form: Dict[str, Any]) -> List[HTMLComponent]:
    """
    Creates the components described by a form definition.
    Each entry names its component class under "type"; the other keys are passed to the constructor.
    """
    components = []
    for spec in form.get("components", []):
        spec = dict(spec)
        component_type = spec.pop("type")
        if component_type not in COMPONENT_TYPES:
            raise ValueError(f"Unknown component type {component_type!r} in form {form.get('title', '')!r}")
        components.append(COMPONENT_TYPES[component_type](**spec))
    return components


def merge_dependency(component_list: List[HTMLComponent]) -> List[HTMLComponent]:
    """
    Groups every scoped component with the component it depends on.
    Each group takes the place of the component depended on.
    """
    dependents: Dict[str, List[HTMLComponent]] = {}
    for c in component_list:
        scope_identifier = getattr(c, "scope_identifier", None)
        if scope_identifier:
            dependents.setdefault(scope_identifier, []).append(c)

    known = {c.identifier for c in component_list}
    for scope_identifier in dependents:
        if scope_identifier not in known:
            raise ValueError(f"Components depend on unknown component {scope_identifier!r}")

    final = []
    for c in component_list:
        if getattr(c, "scope_identifier", None):
            continue
        if c.identifier in dependents:
            final.append(Dependency(c.identifier, [c] + dependents[c.identifier]))
        else:
            final.append(c)
    return final


def render_form(components: List[HTMLComponent]) -> Optional[Dict[str, Any]]:
    """
    Asks for each component in turn. Ctrl+C goes back one component,
    and going back from the first component cancels the form (returning None).
    """
    answers = {}
    iteration = 0
    last_step = 1
    while iteration < len(components):
        if iteration == -1:
            return None
        try:
            if last_step == -1 and components[iteration].noInteraction:
                iteration -= 1
                continue
            answers.update(render(components[iteration]))
            iteration += 1
            last_step = 1
        except KeyboardInterrupt:
            iteration -= 1
            last_step = -1
    return answers


def load_form(path: Optional[str]) -> Dict[str, Any]:
    if path is None:
        return SAMPLE_FORM
    with open(path, "r", encoding="utf-8") as F:
        return json.load(F)


def main(form_path: Optional[str] = None):
    form = load_form(form_path)
    components = merge_dependency(build_components(form))
    ACTIVE_COMPONENTS[:] = components
    if form.get("title"):
        print(form["title"])

    answers = render_form(components)
    if answers is None:
        print("Cancelled.")
        return
    logging.info(f"Form {form.get('title', '')!r} completed with {len(answers)} answers")
    print(tabulate.tabulate([[k, describe(v)] for k, v in answers.items()], headers=["Field", "Selection"]))


if __name__ == "__main__":
    main()
