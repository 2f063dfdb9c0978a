"""
Tests algorithme de réordonnancement (glisser-déposer)
  reorder(items, dragged, target, side) → nouvelle liste
  move_to(items, from, to)              → l'élément finit en `to`
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from collections import Counter
import itertools

import pytest

from page_builder.core.reorder import (
    compute_insert_index, is_noop_drop, drop_side, should_show_indicator, reorder, move_to,
)

ITEMS = ["a", "b", "c", "d", "e"]
SIDES = ("above", "below")


# ── Scénarios ─────────────────────────────────────────────────────────────

class TestScenarios:
    def test_drag_c_above_a(self):
        assert reorder(ITEMS, 2, 0, "above") == ["c", "a", "b", "d", "e"]

    def test_drag_a_below_c(self):
        assert reorder(ITEMS, 0, 2, "below") == ["b", "c", "a", "d", "e"]

    def test_drag_b_above_c_is_noop(self):
        assert reorder(ITEMS, 1, 2, "above") == ITEMS

    def test_drag_b_below_a_is_noop(self):
        assert reorder(ITEMS, 1, 0, "below") == ITEMS

    def test_drag_last_above_first(self):
        assert reorder(ITEMS, 4, 0, "above") == ["e", "a", "b", "c", "d"]

    def test_drag_first_below_last(self):
        assert reorder(ITEMS, 0, 4, "below") == ["b", "c", "d", "e", "a"]

    def test_input_not_mutated(self):
        items = list(ITEMS)
        reorder(items, 0, 3, "below")
        assert items == ITEMS


# ── Propriétés ────────────────────────────────────────────────────────────

class TestProperties:
    def _all_drops(self, n):
        return itertools.product(range(n), range(n), SIDES)

    def test_length_and_multiset_preserved(self):
        for d, t, s in self._all_drops(len(ITEMS)):
            out = reorder(ITEMS, d, t, s)
            assert len(out) == len(ITEMS)
            assert Counter(out) == Counter(ITEMS)

    def test_noop_drops_are_identity(self):
        for d, t, s in self._all_drops(len(ITEMS)):
            if is_noop_drop(d, compute_insert_index(t, s)):
                assert reorder(ITEMS, d, t, s) == ITEMS

    def test_dragged_item_lands_at_adjusted_index(self):
        for d, t, s in self._all_drops(len(ITEMS)):
            insert = compute_insert_index(t, s)
            if is_noop_drop(d, insert):
                continue
            expected = insert - 1 if d < insert else insert
            assert reorder(ITEMS, d, t, s)[expected] == ITEMS[d]

    def test_round_trip_law(self):
        """Déplacer i → j puis j → i rend la séquence d'origine."""
        n = len(ITEMS)
        for i in range(n):
            for j in range(n):
                once = move_to(ITEMS, i, j)
                assert once[j] == ITEMS[i]
                assert move_to(once, j, i) == ITEMS

    def test_relative_order_of_others_kept(self):
        for d, t, s in self._all_drops(len(ITEMS)):
            out = reorder(ITEMS, d, t, s)
            others = [x for x in ITEMS if x != ITEMS[d]]
            assert [x for x in out if x != ITEMS[d]] == others


# ── Bornes / indicateur ───────────────────────────────────────────────────

class TestEdges:
    @pytest.mark.parametrize("dragged,target", [(-1, 0), (0, 5), (5, 0), (0, -1)])
    def test_out_of_range_is_cancelled(self, dragged, target):
        assert reorder(ITEMS, dragged, target, "above") == ITEMS

    def test_empty_sequence(self):
        assert reorder([], 0, 0, "above") == []

    def test_single_item(self):
        assert reorder(["x"], 0, 0, "below") == ["x"]

    def test_drop_side_midpoint(self):
        assert drop_side(10, 0, 100) == "above"
        assert drop_side(49.9, 0, 100) == "above"
        assert drop_side(50, 0, 100) == "below"
        assert drop_side(90, 0, 100) == "below"

    def test_indicator_hidden_on_dragged_itself(self):
        assert should_show_indicator(2, 2, "above") is False
        assert should_show_indicator(2, 2, "below") is False

    def test_indicator_hidden_on_noop(self):
        assert should_show_indicator(1, 2, "above") is False
        assert should_show_indicator(1, 0, "below") is False

    def test_indicator_shown_on_real_move(self):
        assert should_show_indicator(2, 0, "above") is True
        assert should_show_indicator(0, 2, "below") is True

    def test_move_to_same_index(self):
        assert move_to(ITEMS, 3, 3) == ITEMS
