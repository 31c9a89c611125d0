from SelectKit.model.Option import IdentifiedOption
from SelectKit.selection.SingleSelectController import SingleSelectController
from SelectKit.test.test_utils import ALPHA_BETA, TEST_OPTIONS, Recorder, names

ALPHA = IdentifiedOption(1, "Alpha")


class TestSingleSelectController:
    def test_search_filters_options(self):
        c = SingleSelectController(TEST_OPTIONS)
        c.focus()
        c.type_query("two")
        assert names(c.candidates) == ["testOptionNameTwo"]

    def test_commit_writes_display_text_and_notifies(self):
        owner = Recorder()
        c = SingleSelectController(ALPHA_BETA, on_selection_change=owner)
        c.focus()
        c.activate_option(1)
        assert c.selection == ALPHA
        assert c.query == "Alpha"
        assert not c.is_open
        assert owner.calls == [ALPHA]

    def test_committed_option_hidden_until_text_edited(self):
        c = SingleSelectController(ALPHA_BETA)
        c.activate_option(1)
        assert names(c.candidates) == ["Beta"]
        c.type_query("")
        assert names(c.candidates) == ["Alpha", "Beta"]
        assert c.selection == ALPHA

    def test_query_reported_as_typed(self):
        queries = Recorder()
        owner = Recorder()
        c = SingleSelectController(ALPHA_BETA, on_selection_change=owner, on_query_change=queries)
        c.type_query("a")
        c.type_query("al")
        assert queries.calls == ["a", "al"]
        assert owner.calls == []

    def test_default_excluded_from_candidates(self):
        c = SingleSelectController(ALPHA_BETA, default_selection={"id": 1, "name": "Alpha"})
        assert c.selection == ALPHA
        assert names(c.candidates) == ["Beta"]

    def test_default_adopted_once(self):
        c = SingleSelectController(ALPHA_BETA, default_selection=ALPHA)
        c.clear()
        assert c.selection is None
        c.set_props(default_selection={"id": 2, "name": "Beta"})
        assert c.selection is None

    def test_same_default_not_readopted_after_clear(self):
        c = SingleSelectController(ALPHA_BETA, default_selection={"id": 1, "name": "Alpha"})
        c.clear()
        c.set_props(default_selection={"id": 1, "name": "Alpha"})
        assert c.selection is None
        assert names(c.candidates) == ["Alpha", "Beta"]

    def test_late_default_keeps_typed_search(self):
        c = SingleSelectController(ALPHA_BETA)
        c.focus()
        c.type_query("zz")
        c.set_props(default_selection={"id": 1, "name": "Alpha"})
        assert c.selection == ALPHA
        assert c.query == "zz"
        assert c.candidates == []

    def test_late_default_on_empty_field_is_committed(self):
        c = SingleSelectController(ALPHA_BETA)
        c.set_props(default_selection={"id": 1, "name": "Alpha"})
        assert c.selection == ALPHA
        assert names(c.candidates) == ["Beta"]

    def test_disabled(self):
        owner = Recorder()
        c = SingleSelectController(ALPHA_BETA, on_selection_change=owner, disabled=True)
        c.focus()
        c.activate_option(1)
        assert c.selection is None
        assert not c.dropdown_visible
        assert owner.calls == []
