"""Tests for the per-document filter session."""

from __future__ import annotations

import pytest

from photoEditor.core.parameters import FILTER_DEFAULTS, FILTER_KEYS
from photoEditor.core.session import FilterSession
from photoEditor.errors import InvalidParameterKey


def test_new_session_starts_with_one_default_snapshot(session: FilterSession) -> None:
    assert not session.has_image
    assert len(session.history) == 1
    assert session.history.index == 0
    assert session.parameters == FILTER_DEFAULTS


def test_cursor_tracks_last_entry_after_every_edit(session: FilterSession) -> None:
    edits = [("brightness", 120), ("sepia", 30), ("tint", 45)]
    for key, value in edits:
        session.update_filter(key, value)
        assert session.history.index == len(session.history) - 1
    session.reset_filters()
    assert session.history.index == len(session.history) - 1
    assert len(session.history) == 5


def test_undo_then_redo_restores_pre_undo_state(session: FilterSession) -> None:
    session.update_filter("contrast", 80)
    session.update_filter("grain", 15)
    before = session.parameters

    assert session.undo()
    assert session.value("grain") == 0
    assert session.redo()

    assert session.parameters == before


def test_undo_does_not_see_later_mutations(session: FilterSession) -> None:
    session.update_filter("fade", 10)
    session.update_filter("fade", 20)
    session.undo()
    assert session.value("fade") == 10
    session.undo()
    assert session.value("fade") == 0


def test_edit_after_undo_discards_redo_branch(session: FilterSession) -> None:
    session.update_filter("brightness", 110)
    session.update_filter("brightness", 120)
    session.update_filter("brightness", 130)
    assert len(session.history) == 4

    session.undo()
    session.undo()
    assert session.history.index == 1

    session.update_filter("sepia", 50)

    assert len(session.history) == 3
    assert session.history.index == 2
    latest = session.history.current
    assert latest is not None
    assert latest.filters["brightness"] == 110
    assert latest.filters["sepia"] == 50
    assert not session.can_redo
    assert session.redo() is False


def test_reset_is_a_single_undoable_step(session: FilterSession) -> None:
    for key in FILTER_KEYS:
        session.update_filter(key, 7)
    length = len(session.history)

    session.reset_filters()

    assert len(session.history) == length + 1
    assert session.parameters == FILTER_DEFAULTS
    assert session.undo()
    assert all(session.value(key) == 7 for key in FILTER_KEYS)


def test_invalid_key_leaves_state_and_history_untouched(session: FilterSession) -> None:
    session.update_filter("clarity", 5)
    with pytest.raises(InvalidParameterKey):
        session.update_filter("exposure", 1)
    assert len(session.history) == 2
    assert session.value("clarity") == 5


def test_loading_second_image_discards_history(session: FilterSession) -> None:
    session.load_original(b"first")
    for value in range(5):
        session.update_filter("noise", value + 1)
    assert session.can_undo

    session.load_original(b"second")

    assert session.original_image == b"second"
    assert session.edited_image == b"second"
    assert session.current_image == b"second"
    assert not session.can_undo
    assert not session.can_redo
    assert len(session.history) == 1
    assert session.parameters == FILTER_DEFAULTS


def test_update_current_image_keeps_history(session: FilterSession) -> None:
    session.load_original("original")
    session.update_current_image("preview")
    assert session.current_image == "preview"
    assert session.original_image == "original"
    assert len(session.history) == 1


def test_parameters_property_is_a_copy(session: FilterSession) -> None:
    params = session.parameters
    params.update("brightness", 1)
    assert session.value("brightness") == 100


def test_session_projects_descriptors(session: FilterSession) -> None:
    session.update_filter("sharpness", 30)
    session.update_filter("tint", 45)
    assert session.filter_style().endswith("contrast(103%) hue-rotate(45deg)")
    data = session.advanced_filter_data()
    assert data["sharpness"] == 30
    assert data["tint"] == 45
    assert [op.name for op in session.composable_descriptor()][-1] == "hue-rotate"


def test_sessions_are_independent() -> None:
    first = FilterSession()
    second = FilterSession()
    first.update_filter("vignette", 40)
    assert second.value("vignette") == 0
    assert not second.can_undo
