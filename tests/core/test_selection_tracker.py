"""
Unit Tests for SelectionTracker

Covers page-local intersection, reconciliation idempotence and
cross-page non-interference.
"""

import pytest

from catalog_picker.core.selection import SelectionTracker


PAGE_A = list(range(1, 13))
PAGE_B = list(range(13, 25))


class TestVisibleSelection:
    """Tests for visible_selection()."""

    def test_visible_selection_is_page_intersection(self):
        """visible_selection should be exactly page ids ∩ global set."""
        tracker = SelectionTracker({2, 5, 14, 99})
        assert tracker.visible_selection(PAGE_A) == [2, 5]
        assert tracker.visible_selection(PAGE_B) == [14]
        assert tracker.visible_selection([]) == []

    def test_visible_selection_preserves_page_order(self):
        tracker = SelectionTracker({1, 2, 3})
        assert tracker.visible_selection([3, 9, 1, 2]) == [3, 1, 2]

    def test_visible_selection_has_no_side_effects(self):
        tracker = SelectionTracker({1, 2})
        tracker.visible_selection([1, 2, 3])
        assert tracker.snapshot() == frozenset({1, 2})

    @pytest.mark.parametrize("selected", [set(), {1}, {1, 12}, set(PAGE_A)])
    def test_intersection_holds_after_reconcile(self, selected):
        tracker = SelectionTracker({13, 20})
        tracker.reconcile_page(PAGE_A, selected)
        for page in (PAGE_A, PAGE_B):
            assert set(tracker.visible_selection(page)) == set(page) & tracker.snapshot()


class TestReconcilePage:
    """Tests for reconcile_page()."""

    def test_adds_checked_ids(self):
        tracker = SelectionTracker()
        result = tracker.reconcile_page(PAGE_A, {1, 3})
        assert result == frozenset({1, 3})
        assert tracker.count() == 2

    def test_removes_unchecked_page_ids(self):
        tracker = SelectionTracker({1, 2, 3})
        tracker.reconcile_page(PAGE_A, {2})
        assert tracker.snapshot() == frozenset({2})

    def test_idempotent(self):
        """Applying the same event twice equals applying it once."""
        tracker = SelectionTracker({4, 30})
        once = tracker.reconcile_page(PAGE_A, {1, 2})
        twice = tracker.reconcile_page(PAGE_A, {1, 2})
        assert once == twice == frozenset({1, 2, 30})

    def test_other_page_untouched_when_deselecting(self):
        """Clearing page B must not drop ids that belong only to page A."""
        tracker = SelectionTracker()
        tracker.reconcile_page(PAGE_A, set(PAGE_A))
        tracker.reconcile_page(PAGE_B, set())
        assert tracker.snapshot() == frozenset(PAGE_A)

    def test_other_page_untouched_when_selecting(self):
        tracker = SelectionTracker({1, 2})
        tracker.reconcile_page(PAGE_B, {13})
        assert tracker.snapshot() == frozenset({1, 2, 13})

    def test_stray_selected_id_is_added(self):
        """Ids outside the page in the event are added, nothing else changes."""
        tracker = SelectionTracker({20})
        tracker.reconcile_page([1, 2], {1, 99})
        assert tracker.snapshot() == frozenset({1, 20, 99})

    def test_accepts_any_iterable(self):
        tracker = SelectionTracker()
        tracker.reconcile_page((1, 2, 3), [3, 1])
        assert 1 in tracker and 3 in tracker and 2 not in tracker


class TestReplaceAndClear:
    """Tests for wholesale replacement."""

    def test_replace_discards_previous_selection(self):
        tracker = SelectionTracker({1, 2, 3})
        tracker.replace([1, 2])
        assert tracker.snapshot() == frozenset({1, 2})

    def test_clear(self):
        tracker = SelectionTracker({1, 2, 3})
        tracker.clear()
        assert len(tracker) == 0

    def test_snapshot_is_a_copy(self):
        tracker = SelectionTracker({1})
        snap = tracker.snapshot()
        tracker.replace([2])
        assert snap == frozenset({1})


class TestOnChange:
    """Tests for the change callback."""

    def test_called_with_count_after_each_mutation(self):
        counts = []
        tracker = SelectionTracker(on_change=counts.append)
        tracker.reconcile_page(PAGE_A, {1, 2})
        tracker.replace([5])
        tracker.clear()
        assert counts == [2, 1, 0]

    def test_not_called_on_reads(self):
        counts = []
        tracker = SelectionTracker({1}, on_change=counts.append)
        tracker.visible_selection([1])
        tracker.count()
        list(tracker)
        assert counts == []
