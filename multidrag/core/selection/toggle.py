"""Module: toggle.py.

Date: 2026-10-19

The selection gestures: plain click, group toggle (ctrl/cmd-click) and
range extend (shift-click). Every function returns a new selection and
leaves its arguments untouched.
"""

from __future__ import annotations

from multidrag.core.selection import range_resolver
from multidrag.domain.board import Board
from multidrag.domain.keyboard import SelectionIntent
from multidrag.domain.selection import EMPTY_SELECTION, Selection
from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def toggle_selection(selection: Selection, task_id: str) -> Selection:
    """Plain click.

    - task not selected: it becomes the only selected task
    - task part of a group: the group collapses to the task
    - task is the only selected task: selection is cleared
    """
    selection = tuple(selection)

    if task_id not in selection:
        return (task_id,)

    if len(selection) > 1:
        return (task_id,)

    return EMPTY_SELECTION


def toggle_selection_in_group(selection: Selection, task_id: str) -> Selection:
    """Add task_id to the end of the selection, or remove it if already there."""
    selection = tuple(selection)

    if task_id not in selection:
        return (*selection, task_id)

    return tuple(selected for selected in selection if selected != task_id)


def multi_select_to(board: Board, selection: Selection, task_id: str) -> Selection:
    """Shift-click; an unchanged selection is returned when the resolver has nothing to do."""
    selection = tuple(selection)
    updated = range_resolver.multi_select_to(board, selection, task_id)

    if updated is None:
        return selection

    return updated


def clear_selection() -> Selection:
    return EMPTY_SELECTION


def apply_selection_intent(
    board: Board, selection: Selection, task_id: str, intent: SelectionIntent
) -> Selection:
    """Dispatch a classified gesture to the matching operation."""
    if intent is SelectionIntent.GROUP_TOGGLE:
        updated = toggle_selection_in_group(selection, task_id)
    elif intent is SelectionIntent.RANGE_EXTEND:
        updated = multi_select_to(board, selection, task_id)
    else:
        updated = toggle_selection(selection, task_id)

    logger.debug(
        "[Selection] %s on %s: %d -> %d selected",
        intent,
        task_id,
        len(selection),
        len(updated),
        extra={"dev_only": True},
    )
    return updated
