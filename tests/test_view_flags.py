"""
Tests for per-task view flags.

Date: 2026-10-19
"""

from multidrag.app.state.view_flags import is_ghosting, selection_badge_count, tasks_for_column


class TestIsGhosting:
    """Test ghosting of tasks travelling with a group drag."""

    def test_no_drag(self):
        """Test that nothing ghosts without a drag."""
        assert not is_ghosting(("t1", "t2"), None, "t1")

    def test_dragged_task_does_not_ghost(self):
        """Test that the card under the pointer is not ghosted."""
        assert not is_ghosting(("t1", "t2"), "t1", "t1")

    def test_other_selected_task_ghosts(self):
        """Test that other selected cards are ghosted."""
        assert is_ghosting(("t1", "t2"), "t1", "t2")

    def test_unselected_task_does_not_ghost(self):
        """Test that unselected cards are left alone."""
        assert not is_ghosting(("t1", "t2"), "t1", "t3")


class TestSelectionBadge:
    """Test the selection count badge."""

    def test_group_drag_shows_count(self):
        """Test that the dragged card shows the group size."""
        assert selection_badge_count(("t1", "t2", "t3"), "t2", "t2") == 3

    def test_only_dragged_card(self):
        """Test that other cards show no badge."""
        assert selection_badge_count(("t1", "t2"), "t1", "t2") is None

    def test_single_selection(self):
        """Test that a one-task drag shows no badge."""
        assert selection_badge_count(("t1",), "t1", "t1") is None

    def test_not_dragging(self):
        """Test that there is no badge outside a drag."""
        assert selection_badge_count(("t1", "t2"), None, "t1") is None


def test_tasks_for_column(board):
    """Test that tasks come back in display order."""
    assert [task.id for task in tasks_for_column(board, "c2")] == ["t5", "t6", "t7"]
