"""
Tests machine à états du glisser-déposer
  idle → dragging → hovering → drop/end → idle
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from page_builder.editor.drag import DragController, DragPhase, can_transition

ITEMS = ["a", "b", "c", "d", "e"]


@pytest.fixture
def drag():
    return DragController()


class TestTransitions:
    def test_table(self):
        assert can_transition("idle", "dragging")
        assert not can_transition("idle", "hovering")
        assert can_transition("dragging", "hovering")
        assert can_transition("dragging", "dragging")
        assert can_transition("hovering", "idle")
        assert not can_transition("unknown", "idle")

    def test_start(self, drag):
        assert drag.start(2, len(ITEMS)) is True
        assert drag.phase == DragPhase.DRAGGING
        assert drag.state.source == 2

    def test_start_out_of_range_refused(self, drag):
        assert drag.start(7, len(ITEMS)) is False
        assert drag.phase == DragPhase.IDLE

    def test_new_start_replaces_stale_drag(self, drag):
        # dragend jamais reçu : le geste suivant doit repartir de sa propre source
        drag.start(3, len(ITEMS))
        assert drag.start(0, len(ITEMS)) is True
        assert drag.state.source == 0
        drag.over(2, "below")
        assert drag.drop(ITEMS) == ["b", "c", "a", "d", "e"]

    def test_start_while_hovering_resets_target(self, drag):
        drag.start(1, len(ITEMS))
        drag.over(3, "above")
        drag.start(4, len(ITEMS))
        assert drag.phase == DragPhase.DRAGGING
        assert drag.state.source == 4
        assert drag.state.target is None

    def test_over_while_idle_ignored(self, drag):
        assert drag.over(1, "above") is False
        assert drag.phase == DragPhase.IDLE

    def test_over_then_other_target(self, drag):
        drag.start(0, len(ITEMS))
        drag.over(2, "above")
        drag.over(3, "below")
        assert drag.phase == DragPhase.HOVERING
        assert (drag.state.target, drag.state.side) == (3, "below")

    def test_leave_back_to_dragging(self, drag):
        drag.start(0, len(ITEMS))
        drag.over(2, "above")
        assert drag.leave() is True
        assert drag.phase == DragPhase.DRAGGING
        assert drag.state.target is None


class TestDrop:
    def test_drop_applies_reorder(self, drag):
        drag.start(2, len(ITEMS))
        drag.over(0, "above")
        assert drag.drop(ITEMS) == ["c", "a", "b", "d", "e"]
        assert drag.phase == DragPhase.IDLE

    def test_drop_without_target_unchanged(self, drag):
        drag.start(2, len(ITEMS))
        assert drag.drop(ITEMS) == ITEMS
        assert drag.phase == DragPhase.IDLE

    def test_noop_drop_unchanged(self, drag):
        drag.start(1, len(ITEMS))
        drag.over(2, "above")
        assert drag.drop(ITEMS) == ITEMS

    def test_end_without_drop(self, drag):
        drag.start(1, len(ITEMS))
        drag.over(4, "below")
        drag.end()
        assert drag.phase == DragPhase.IDLE
        assert drag.drop(ITEMS) == ITEMS

    def test_cancel_alias(self, drag):
        drag.start(1, len(ITEMS))
        drag.cancel()
        assert drag.phase == DragPhase.IDLE


class TestIndicator:
    def test_none_while_dragging(self, drag):
        drag.start(1, len(ITEMS))
        assert drag.indicator is None

    def test_hidden_over_self(self, drag):
        drag.start(1, len(ITEMS))
        drag.over(1, "above")
        assert drag.indicator is None

    def test_hidden_on_noop(self, drag):
        drag.start(1, len(ITEMS))
        drag.over(0, "below")
        assert drag.indicator is None

    def test_shown_on_real_move(self, drag):
        drag.start(3, len(ITEMS))
        drag.over(0, "above")
        assert drag.indicator == (0, "above")
