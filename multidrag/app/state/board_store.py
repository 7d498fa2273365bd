"""Module: board_store.py.

Date: 2026-10-19

BoardStore - holder of the current board/selection snapshot pair.

The store owns no rules: selection and reorder logic live in
multidrag.core and return new snapshots, which are committed here in a
single replacement. Observers are notified through Observable signals
after the replacement, so a callback never sees a half-updated pair.

The store also tracks the transient drag session (the id of the task
being dragged), which views use to ghost the other selected tasks.
"""

from __future__ import annotations

from multidrag.domain.board import Board
from multidrag.domain.selection import (
    EMPTY_SELECTION,
    Selection,
    normalize_selection,
    validate_selection,
)
from multidrag.utils.events import Observable, Signal
from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class BoardStore(Observable):
    """Current board, selection and drag session."""

    board_changed = Signal(Board)  # new board snapshot
    selection_changed = Signal(tuple)  # new selection tuple
    dragging_changed = Signal(object)  # dragged task id or None

    def __init__(self, board: Board, selection: Selection = EMPTY_SELECTION) -> None:
        """Initialize the store with an initial board and selection."""
        super().__init__()

        self._board = board
        self._selection: Selection = normalize_selection(selection)
        self._dragging_task_id: str | None = None

        logger.debug(
            "BoardStore initialized: %d columns, %d tasks",
            len(board.column_order),
            board.task_count,
            extra={"dev_only": True},
        )

    # =====================================
    # Snapshot access
    # =====================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def dragging_task_id(self) -> str | None:
        return self._dragging_task_id

    def snapshot(self) -> tuple[Board, Selection]:
        """Return the current (board, selection) pair."""
        return self._board, self._selection

    def is_selected(self, task_id: str) -> bool:
        return task_id in self._selection

    def get_selection_count(self) -> int:
        return len(self._selection)

    def is_dragging(self) -> bool:
        return self._dragging_task_id is not None

    # =====================================
    # Replacement
    # =====================================

    def commit(self, board: Board | None = None, selection: Selection | None = None) -> None:
        """Replace board and/or selection, then notify observers of what changed.

        Args:
            board: New board snapshot, or None to keep the current one
            selection: New selection, or None to keep the current one

        Raises:
            TaskNotFoundError: If the selection references a task not on the board

        """
        board_changed = board is not None and board is not self._board
        new_selection = (
            normalize_selection(selection) if selection is not None else self._selection
        )
        selection_changed = new_selection != self._selection

        if selection is not None:
            validate_selection(board if board is not None else self._board, new_selection)

        if board_changed:
            self._board = board
        self._selection = new_selection

        if board_changed:
            logger.debug("Board replaced", extra={"dev_only": True})
            self.board_changed.emit(self._board)
        if selection_changed:
            logger.debug(
                "Selection replaced: %d selected",
                len(self._selection),
                extra={"dev_only": True},
            )
            self.selection_changed.emit(self._selection)

    def set_selection(self, selection: Selection) -> None:
        self.commit(selection=selection)

    def clear_selection(self) -> None:
        """Clear the selection (no signal if it is already empty)."""
        self.commit(selection=EMPTY_SELECTION)

    def set_dragging(self, task_id: str | None) -> None:
        """Start (task id) or end (None) the drag session."""
        if task_id == self._dragging_task_id:
            return

        old = self._dragging_task_id
        self._dragging_task_id = task_id
        logger.debug("Dragging: %s -> %s", old, task_id, extra={"dev_only": True})
        self.dragging_changed.emit(task_id)
