"""Module: drag_session.py.

Date: 2026-10-19

Drag session coordinator.

Receives decoded drag-start / drag-end events from the gesture layer,
runs the reorder engine and commits the result to the BoardStore.

Usage:
    coordinator = DragSessionCoordinator(store)
    coordinator.on_drag_start(DragStart("t2"))
    coordinator.on_drag_end(DropResult("t2", source, destination))
"""

from __future__ import annotations

from multidrag.app.state.board_store import BoardStore
from multidrag.core.reorder import ReorderResult, reorder
from multidrag.domain.drag import DragStart, DropResult
from multidrag.domain.errors import InvalidDragState
from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class DragSessionCoordinator:
    """Applies drag events to a BoardStore."""

    def __init__(self, store: BoardStore) -> None:
        self._store = store

    def on_drag_start(self, start: DragStart) -> None:
        """Begin a drag session.

        Dragging a task that is not selected starts over: the selection is
        cleared so that only that task moves.

        Raises:
            InvalidDragState: If start.source does not hold the dragged task

        """
        if start.source is not None:
            found = self._store.board.task_at(start.source)
            if found != start.draggable_id:
                logger.warning(
                    "[DragSession] %s reported at %s, which holds %s",
                    start.draggable_id,
                    start.source,
                    found,
                )
                raise InvalidDragState(
                    f"Drag source {start.source} holds {found!r}, not {start.draggable_id!r}"
                )

        if not self._store.is_selected(start.draggable_id):
            self._store.clear_selection()

        self._store.set_dragging(start.draggable_id)
        logger.debug("[DragSession] Started: %s", start.draggable_id, extra={"dev_only": True})

    def on_drag_end(self, result: DropResult) -> ReorderResult:
        """Finish a drag session and apply the drop.

        The drag session is cleared in every case, including cancellation
        and InvalidDragState (which is re-raised to the caller).

        Returns:
            The committed ReorderResult (unchanged snapshots on cancel)

        """
        try:
            board, selection = self._store.snapshot()

            if result.is_cancelled:
                logger.debug(
                    "[DragSession] %s cancelled (%s)",
                    result.draggable_id,
                    result.reason,
                    extra={"dev_only": True},
                )
                return ReorderResult(board, selection)

            outcome = reorder(board, selection, result.source, result.destination)
            self._store.commit(board=outcome.board, selection=outcome.selection)
            return outcome
        finally:
            self._store.set_dragging(None)
