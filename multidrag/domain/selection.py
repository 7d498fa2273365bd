"""Module: selection.py.

Date: 2026-10-19

Selection helpers.

A selection is a plain tuple of task ids: ordered by the moment each id
entered the selection (not by board position) and free of duplicates.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import TYPE_CHECKING

from multidrag.domain.errors import TaskNotFoundError

if TYPE_CHECKING:
    from multidrag.domain.board import Board

Selection = tuple[str, ...]

EMPTY_SELECTION: Selection = ()


def normalize_selection(task_ids: Iterable[str]) -> Selection:
    """Return task_ids as a selection tuple, keeping the first occurrence of each id."""
    return tuple(dict.fromkeys(task_ids))


@lru_cache(maxsize=32)
def selected_map(selection: Selection) -> frozenset[str]:
    """Membership set for a selection, cached per selection tuple."""
    return frozenset(selection)


def is_selected(selection: Selection, task_id: str) -> bool:
    return task_id in selected_map(selection)


def validate_selection(board: Board, selection: Selection) -> None:
    """Check that every selected id is placed on the board.

    Raises:
        TaskNotFoundError: For the first selected id without a home column

    """
    for task_id in selection:
        if not board.contains(task_id):
            raise TaskNotFoundError(task_id)


def partition_by_column(board: Board, selection: Selection) -> dict[str, list[str]]:
    """Group selected ids by home column, each group in column order.

    Columns without selected ids are omitted; the dict follows column_order.
    """
    wanted = selected_map(selection)
    return {
        column_id: [task_id for task_id in board.columns[column_id].task_ids if task_id in wanted]
        for column_id in board.column_order
        if any(task_id in wanted for task_id in board.columns[column_id].task_ids)
    }
