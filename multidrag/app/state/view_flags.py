"""Module: view_flags.py.

Date: 2026-10-19

Per-task presentation flags derived from the board, the selection and the
drag session. Views read these instead of re-deriving them.
"""

from __future__ import annotations

from multidrag.domain.board import Board, Task
from multidrag.domain.selection import Selection, is_selected


def tasks_for_column(board: Board, column_id: str) -> list[Task]:
    """Tasks of a column, in display order."""
    return board.tasks_in(column_id)


def is_ghosting(selection: Selection, dragging_task_id: str | None, task_id: str) -> bool:
    """True for selected tasks that travel with another task's drag."""
    return (
        dragging_task_id is not None
        and dragging_task_id != task_id
        and is_selected(selection, task_id)
    )


def selection_badge_count(
    selection: Selection, dragging_task_id: str | None, task_id: str
) -> int | None:
    """Number shown on the dragged card, or None when no badge is shown.

    Only the card under the pointer shows a badge, and only for group drags.
    """
    if dragging_task_id != task_id or len(selection) <= 1:
        return None
    return len(selection)
