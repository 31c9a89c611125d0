from SelectKit.model.Events import (
    ActivateOption, ApplyDefault, Blur, ChangeScope, Escape, Focus, RemoveOption, Reset, ToggleOpen, TypeQuery
)
from SelectKit.model.Option import IdentifiedOption, ScopedOption
from SelectKit.model.SelectionState import MultiSelectState, ScopedSelectState, SelectProps, SingleSelectState
from SelectKit.selection.reducers import reduce_multi, reduce_scoped, reduce_single

ALPHA = IdentifiedOption(1, "Alpha")
BETA = IdentifiedOption(2, "Beta")
PROPS = SelectProps(options=(ALPHA, BETA))
READ_ONLY = SelectProps(options=(ALPHA, BETA), read_only=True)


class TestReduceMulti:
    def test_activate_appends_and_clears_query(self):
        s = reduce_multi(MultiSelectState(query="al"), ActivateOption(ALPHA), PROPS)
        assert s.selection == (ALPHA,)
        assert s.query == ""

    def test_activate_twice_keeps_one(self):
        s = MultiSelectState()
        for _ in range(3):
            s = reduce_multi(s, ActivateOption(ALPHA), PROPS)
        assert s.selection == (ALPHA,)

    def test_insertion_order(self):
        s = reduce_multi(MultiSelectState(), ActivateOption(BETA), PROPS)
        s = reduce_multi(s, ActivateOption(ALPHA), PROPS)
        assert s.selection == (BETA, ALPHA)

    def test_remove_missing_is_noop(self):
        s = MultiSelectState(selection=(ALPHA,))
        assert reduce_multi(s, RemoveOption(BETA), PROPS) == s

    def test_query_never_changes_selection(self):
        s = MultiSelectState(selection=(ALPHA,))
        after = reduce_multi(s, TypeQuery("be"), PROPS)
        assert after.selection == (ALPHA,)
        assert after.query == "be"

    def test_focus_blur_escape(self):
        s = reduce_multi(MultiSelectState(query="x"), Focus(), PROPS)
        assert s.is_open and s.is_focused
        assert not reduce_multi(s, Blur(), PROPS).is_open
        escaped = reduce_multi(s, Escape(), PROPS)
        assert not escaped.is_focused and not escaped.is_open
        assert escaped.query == "x"

    def test_default_applied_once(self):
        s = reduce_multi(MultiSelectState(), ApplyDefault((ALPHA,)), PROPS)
        assert s.selection == (ALPHA,) and s.default_applied
        s = reduce_multi(s, RemoveOption(ALPHA), PROPS)
        assert reduce_multi(s, ApplyDefault((BETA,)), PROPS).selection == ()

    def test_default_ignored_when_selection_present(self):
        s = MultiSelectState(selection=(BETA,))
        assert reduce_multi(s, ApplyDefault((ALPHA,)), PROPS).selection == (BETA,)

    def test_read_only_ignores_edits(self):
        s = MultiSelectState()
        assert reduce_multi(s, ActivateOption(ALPHA), READ_ONLY) == s
        assert reduce_multi(s, TypeQuery("a"), READ_ONLY) == s
        assert not reduce_multi(s, Focus(), READ_ONLY).is_open

    def test_reset(self):
        s = MultiSelectState(selection=(ALPHA,), default_applied=True)
        assert reduce_multi(s, Reset(), PROPS) == MultiSelectState()


class TestReduceSingle:
    def test_activate_commits_display_text(self):
        s = reduce_single(SingleSelectState(is_open=True, query="al"), ActivateOption(ALPHA), PROPS)
        assert s.selection == ALPHA
        assert s.query == "Alpha"
        assert s.committed
        assert not s.is_open

    def test_typing_uncommits_but_keeps_selection(self):
        s = SingleSelectState(selection=ALPHA, query="Alpha", committed=True)
        s = reduce_single(s, TypeQuery("Alp"), PROPS)
        assert s.selection == ALPHA
        assert not s.committed

    def test_remove(self):
        s = SingleSelectState(selection=ALPHA, query="Alpha", committed=True)
        s = reduce_single(s, RemoveOption(ALPHA), PROPS)
        assert s.selection is None and s.query == ""


class TestReduceScoped:
    A1 = ScopedOption("A1", "G1")

    def test_first_scope_keeps_value(self):
        s = ScopedSelectState(selection=self.A1)
        s = reduce_scoped(s, ChangeScope("G1"), PROPS)
        assert s.selection == self.A1
        assert s.scope_key == "G1"

    def test_different_scope_clears(self):
        s = ScopedSelectState(selection=self.A1, query="A", scope_key="G1")
        s = reduce_scoped(s, ChangeScope("G2"), PROPS)
        assert s.selection is None
        assert s.query == ""
        assert s.scope_key == "G2"

    def test_same_scope_keeps_selection(self):
        s = ScopedSelectState(selection=self.A1, scope_key="G1")
        assert reduce_scoped(s, ChangeScope("G1"), PROPS).selection == self.A1

    def test_empty_scope_remembers_last(self):
        s = ScopedSelectState(selection=self.A1, scope_key="G1")
        s = reduce_scoped(s, ChangeScope(""), PROPS)
        assert s.scope_key == "G1"
        assert s.selection == self.A1

    def test_toggle_open_respects_read_only(self):
        assert reduce_scoped(ScopedSelectState(), ToggleOpen(), PROPS).is_open
        assert not reduce_scoped(ScopedSelectState(), ToggleOpen(), READ_ONLY).is_open

    def test_activate_resets_query(self):
        s = reduce_scoped(ScopedSelectState(query="A", is_open=True), ActivateOption(self.A1), PROPS)
        assert s.selection == self.A1
        assert s.query == ""
        assert not s.is_open
