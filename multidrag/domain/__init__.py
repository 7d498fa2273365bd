"""
Domain layer for multidrag.

Pure Python data types with no UI dependencies.

Exports:
    Board, Column, Task: Immutable board snapshot types.
    DraggableLocation, DragStart, DropResult, DropReason: Decoded drag events.
    Selection: Ordered tuple of selected task ids.
    KeyboardModifier, Platform, SelectionIntent: Gesture classification types.
    BoardError and subclasses: Error taxonomy.
"""

from multidrag.domain.board import Board, Column, Task
from multidrag.domain.drag import DraggableLocation, DragStart, DropReason, DropResult
from multidrag.domain.errors import (
    BoardError,
    InvalidBoardError,
    InvalidDragState,
    TaskNotFoundError,
)
from multidrag.domain.keyboard import KeyboardModifier, Platform, SelectionIntent
from multidrag.domain.selection import EMPTY_SELECTION, Selection

__all__: list[str] = [
    "Board",
    "BoardError",
    "Column",
    "DragStart",
    "DraggableLocation",
    "DropReason",
    "DropResult",
    "EMPTY_SELECTION",
    "InvalidBoardError",
    "InvalidDragState",
    "KeyboardModifier",
    "Platform",
    "Selection",
    "SelectionIntent",
    "Task",
    "TaskNotFoundError",
]
