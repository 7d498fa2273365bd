"""Module: range_resolver.py.

Date: 2026-10-19

Shift-click range selection, modelled on the macOS Finder.

The resolver only ever produces a contiguous run inside a single column
(the column of the clicked task). Selected ids in other columns are kept
in front of that run when the click lands in the column the selection
was last extended in; a click in any other column starts over from the
nearest already-selected task of that column.
"""

from __future__ import annotations

from multidrag.domain.board import Board, Column
from multidrag.domain.selection import Selection, validate_selection
from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _run(column: Column, first: int, second: int) -> Selection:
    start, end = sorted((first, second))
    return column.task_ids[start : end + 1]


def multi_select_to(board: Board, selection: Selection, new_task_id: str) -> Selection | None:
    """Extend (or shrink) the selection up to new_task_id.

    Args:
        board: Current board snapshot
        selection: Current selection, in the order ids were selected
        new_task_id: The task that was shift-clicked

    Returns:
        The new selection, or None when nothing changes

    Raises:
        TaskNotFoundError: If new_task_id or a selected id is not on the board

    """
    selection = tuple(selection)
    target = board.home_column(new_task_id)

    if not selection:
        return (new_task_id,)

    validate_selection(board, selection)

    if selection == (new_task_id,):
        return None

    new_index = target.index_of(new_task_id)
    local = [task_id for task_id in selection if task_id in target]
    anchor_column = board.home_column(selection[-1])

    # Jumping to a column other than the one last touched: start a fresh run
    if anchor_column.id != target.id:
        if not local:
            logger.debug(
                "[RangeSelect] %s: no selected task in %s, single select",
                new_task_id,
                target.id,
                extra={"dev_only": True},
            )
            return (new_task_id,)

        closest = min(local, key=lambda task_id: abs(target.index_of(task_id) - new_index))
        return _run(target, target.index_of(closest), new_index)

    local_indices = [target.index_of(task_id) for task_id in local]
    low, high = min(local_indices), max(local_indices)

    if new_index in (low, high):
        return None

    if new_index > high:
        run = _run(target, low, new_index)
    elif new_index < low:
        run = _run(target, new_index, high)
    else:
        # Clicked inside the current span: shrink to the nearer boundary
        nearer = low if new_index - low <= high - new_index else high
        run = _run(target, nearer, new_index)

    untouched = tuple(task_id for task_id in selection if task_id not in target)

    logger.debug(
        "[RangeSelect] %s in %s: run %d-%d, %d kept from other columns",
        new_task_id,
        target.id,
        target.index_of(run[0]),
        target.index_of(run[-1]),
        len(untouched),
        extra={"dev_only": True},
    )
    return untouched + run
