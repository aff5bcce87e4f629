# FILE: tests/test_session_store.py
"""
Tests for cowriter/session/store.py, editor.py and request_state.py
"""

import pytest

from cowriter.actions.schemas import Tone, WritingStyle
from cowriter.llm.schemas import LLMConfig, LLMType
from cowriter.session.editor import EditorView
from cowriter.session.models import NEW_ACTION_NAME, ActionButton, default_actions
from cowriter.session.request_state import RequestState, RequestTracker
from cowriter.session.store import ConfigurationStore


def ids(store):
    return [a.id for a in store.actions]


class TestDefaults:
    def test_three_default_actions(self):
        store = ConfigurationStore()
        assert [a.name for a in store.actions] == ["Expand", "Shorten", "Critique"]
        assert ids(store) == ["1", "2", "3"]

    def test_starts_unconnected_with_default_profile(self):
        store = ConfigurationStore()
        assert store.is_connected is False
        assert store.profile.preferred_style == WritingStyle.PROFESSIONAL
        assert store.profile.tone == Tone.FORMAL
        assert store.profile.about_me == ""

    def test_default_actions_are_fresh_copies(self):
        first = default_actions()
        first[0].name = "Changed"
        assert default_actions()[0].name == "Expand"


class TestAddAndDelete:
    """Test add_action / delete_action id invariants."""

    def test_add_assigns_distinct_id(self):
        store = ConfigurationStore()
        new = store.add_action()

        assert new.id not in ["1", "2", "3"]
        assert new.name == NEW_ACTION_NAME
        assert store.actions[-1] == new

    def test_id_unique_after_delete_then_add(self):
        store = ConfigurationStore()
        store.delete_action("1")
        new = store.add_action()

        assert new.id not in ["2", "3"]
        assert len(set(ids(store))) == len(ids(store))

    def test_ids_never_reused(self):
        store = ConfigurationStore()
        a = store.add_action()
        store.delete_action(a.id)
        b = store.add_action()
        assert b.id != a.id

    def test_non_numeric_existing_ids(self):
        store = ConfigurationStore(actions=[ActionButton("x", "X", "do x"), ActionButton("1", "Y", "do y")])
        new = store.add_action()
        assert new.id not in ["x", "1"]

    def test_delete_removes_exactly_one(self):
        store = ConfigurationStore()
        before = store.actions

        assert store.delete_action("2") is True
        assert store.actions == [before[0], before[2]]

    def test_delete_unknown_id(self):
        store = ConfigurationStore()
        assert store.delete_action("99") is False
        assert len(store.actions) == 3


class TestUpdate:
    def test_update_merges_fields(self):
        store = ConfigurationStore()
        updated = store.update_action("1", name="Elaborate", emoji="\U0001f4dd")

        assert updated.name == "Elaborate"
        assert updated.action == "Expand the text while maintaining the context"
        assert store.get_action("1").emoji == "\U0001f4dd"

    def test_update_unknown_id_is_noop(self):
        store = ConfigurationStore()
        assert store.update_action("42", name="x") is None
        assert [a.name for a in store.actions] == ["Expand", "Shorten", "Critique"]

    def test_update_rejects_id_change(self):
        store = ConfigurationStore()
        with pytest.raises(ValueError):
            store.update_action("1", id="7")


class TestReorder:
    """Test drag reorder (array move)."""

    def test_move_down(self):
        store = ConfigurationStore()
        assert store.reorder("1", "3") is True
        assert ids(store) == ["2", "3", "1"]

    def test_move_up(self):
        store = ConfigurationStore()
        store.reorder("3", "1")
        assert ids(store) == ["3", "1", "2"]

    def test_preserves_set(self):
        store = ConfigurationStore()
        store.add_action()
        before = {a.id for a in store.actions}
        store.reorder("4", "2")
        assert {a.id for a in store.actions} == before

    def test_drop_on_self_is_noop(self):
        store = ConfigurationStore()
        assert store.reorder("2", "2") is False
        assert ids(store) == ["1", "2", "3"]

    def test_drop_on_nothing_is_noop(self):
        store = ConfigurationStore()
        assert store.reorder("2", None) is False

    def test_unknown_id_is_noop(self):
        store = ConfigurationStore()
        assert store.reorder("2", "99") is False
        assert ids(store) == ["1", "2", "3"]


class TestProfileAndConnection:
    def test_set_profile_fields(self):
        store = ConfigurationStore()
        store.set_about_me("Teacher")
        store.set_style("Academic")
        store.set_tone(Tone.FRIENDLY)

        assert store.profile.about_me == "Teacher"
        assert store.profile.preferred_style == WritingStyle.ACADEMIC
        assert store.profile.tone == Tone.FRIENDLY

    def test_invalid_style(self):
        with pytest.raises(ValueError):
            ConfigurationStore().set_style("Poetic")

    def test_connection_gate(self):
        store = ConfigurationStore()
        store.set_llm_config(LLMConfig(type=LLMType.OPENAI, api_key="sk"))
        assert store.is_connected is True
        store.clear_llm_config()
        assert store.is_connected is False


class TestEditorView:
    def test_empty(self):
        assert EditorView().is_empty is True
        assert EditorView("  \n").is_empty is True
        assert EditorView("text").is_empty is False

    def test_as_context(self):
        assert EditorView().as_context() == ""
        assert EditorView("Draft").as_context() == "Current editor content: Draft"


class TestRequestTracker:
    def test_lifecycle(self):
        t = RequestTracker("chat")
        assert t.state == RequestState.IDLE
        assert t.begin() is True
        assert t.in_flight is True
        assert t.begin() is False
        t.fail("boom")
        assert t.state == RequestState.FAILED
        assert t.error == "boom"
        assert t.begin() is True
        t.succeed()
        assert t.state == RequestState.SUCCEEDED
        assert t.error is None
