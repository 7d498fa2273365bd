"""Module: errors.py.

Date: 2026-10-19

Exception hierarchy for board, selection and drag operations.

Cancelled drags and no-op range selections are ordinary results,
not errors, and have no exception type here.
"""


class BoardError(Exception):
    """Base class for all multidrag errors."""


class InvalidBoardError(BoardError, ValueError):
    """Raised when a board snapshot violates its structural invariants."""


class TaskNotFoundError(BoardError, LookupError):
    """Raised when a task id is not present in any column."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id!r} is not in any column")
        self.task_id = task_id


class InvalidDragState(BoardError):
    """Raised when a drag source/destination is inconsistent with the board.

    This is a caller precondition violation: drag locations must come from
    the same board snapshot they are applied to.
    """
