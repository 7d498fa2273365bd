"""Module: engine.py.

Date: 2026-10-19

Group reorder engine.

Applies a finished drag to a board snapshot. When the dragged task is part
of a multi-task selection, the whole selection moves as one contiguous
block to the drop point; otherwise only the dragged task moves.

Both paths are pure: the input board and selection are never modified and
a new ReorderResult is returned.
"""

from __future__ import annotations

from dataclasses import dataclass

from multidrag.domain.board import Board, Column
from multidrag.domain.drag import DraggableLocation
from multidrag.domain.errors import InvalidDragState, TaskNotFoundError
from multidrag.domain.selection import (
    Selection,
    partition_by_column,
    selected_map,
    validate_selection,
)
from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReorderResult:
    """Board and selection after a drop."""

    board: Board
    selection: Selection


def reorder(
    board: Board,
    selection: Selection,
    source: DraggableLocation,
    destination: DraggableLocation | None,
) -> ReorderResult:
    """Move the dragged task (or the selected group containing it) to destination.

    Args:
        board: Board snapshot the drag started on
        selection: Current selection
        source: Where the dragged task was picked up
        destination: Drop slot, or None when the drag was cancelled

    Returns:
        ReorderResult with the new board and selection; the inputs unchanged
        when destination is None

    Raises:
        InvalidDragState: If source/destination do not match the board, or the
            selection references tasks that are not on it

    """
    selection = tuple(selection)

    if destination is None:
        logger.debug("[Reorder] Drag cancelled, nothing to do", extra={"dev_only": True})
        return ReorderResult(board, selection)

    dragged = _check_locations(board, source, destination)

    try:
        validate_selection(board, selection)
    except TaskNotFoundError as e:
        logger.warning("[Reorder] Selection does not match board: %s", e)
        raise InvalidDragState(f"Selection references a task not on the board: {e}") from e

    if dragged not in selected_map(selection) or len(selection) <= 1:
        return _reorder_single(board, dragged, source, destination)

    return _reorder_group(board, selection, dragged, source, destination)


def _check_locations(
    board: Board, source: DraggableLocation, destination: DraggableLocation
) -> str:
    """Validate both drag locations and return the dragged task id."""
    try:
        dragged = board.task_at(source)
    except InvalidDragState as e:
        logger.warning("[Reorder] Invalid drag source %s: %s", source, e)
        raise

    column = board.columns.get(destination.column_id)
    if column is None:
        logger.warning("[Reorder] Unknown destination column %r", destination.column_id)
        raise InvalidDragState(f"Unknown column {destination.column_id!r}")

    # Within the home column the dragged task no longer occupies a slot
    last_slot = len(column) - 1 if column.id == source.column_id else len(column)
    if not 0 <= destination.index <= last_slot:
        logger.warning(
            "[Reorder] Destination index %d out of range 0-%d in %r",
            destination.index,
            last_slot,
            column.id,
        )
        raise InvalidDragState(
            f"Index {destination.index} out of range for column {column.id!r}"
        )

    return dragged


def _reorder_single(
    board: Board,
    dragged: str,
    source: DraggableLocation,
    destination: DraggableLocation,
) -> ReorderResult:
    home = board.columns[source.column_id]
    home_ids = list(home.task_ids)
    del home_ids[source.index]

    if destination.column_id == source.column_id:
        home_ids.insert(destination.index, dragged)
        updated = {home.id: home.with_task_ids(home_ids)}
    else:
        foreign = board.columns[destination.column_id]
        foreign_ids = list(foreign.task_ids)
        foreign_ids.insert(destination.index, dragged)
        updated = {
            home.id: home.with_task_ids(home_ids),
            foreign.id: foreign.with_task_ids(foreign_ids),
        }

    logger.debug(
        "[Reorder] Moved %s: %s[%d] -> %s[%d]",
        dragged,
        source.column_id,
        source.index,
        destination.column_id,
        destination.index,
        extra={"dev_only": True},
    )
    return ReorderResult(board.with_columns(updated), (dragged,))


def _reorder_group(
    board: Board,
    selection: Selection,
    dragged: str,
    source: DraggableLocation,
    destination: DraggableLocation,
) -> ReorderResult:
    groups = partition_by_column(board, selection)
    wanted = selected_map(selection)
    final = board.columns[destination.column_id]

    # Selected tasks above the drop slot in the destination column are about
    # to be removed, so the slot moves up by that many
    offset = sum(
        1
        for task_id in groups.get(final.id, ())
        if task_id != dragged and final.index_of(task_id) < destination.index
    )

    # Source column first, then the remaining columns in board order
    block = [
        task_id
        for column_id in board.columns_from(source.column_id)
        for task_id in groups.get(column_id, ())
    ]

    updated: dict[str, Column] = {
        column_id: board.columns[column_id].with_task_ids(
            task_id for task_id in board.columns[column_id].task_ids if task_id not in wanted
        )
        for column_id in groups
    }

    remaining = list(updated.get(final.id, final).task_ids)
    insert_at = max(0, min(destination.index - offset, len(remaining)))
    remaining[insert_at:insert_at] = block
    updated[final.id] = final.with_task_ids(remaining)

    logger.debug(
        "[Reorder] Moved group of %d (dragged %s) from %d column(s) to %s[%d]",
        len(block),
        dragged,
        len(groups),
        final.id,
        insert_at,
        extra={"dev_only": True},
    )
    return ReorderResult(board.with_columns(updated), tuple(block))
