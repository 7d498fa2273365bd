"""multidrag - multi-selection and group drag reordering for task boards.

Public API:
    Board, Column, Task             immutable board snapshot
    toggle_selection, toggle_selection_in_group, multi_select_to,
    clear_selection                 selection gestures
    reorder                         drag-aware reorder engine
    create_board_app                store + services wiring
"""

from multidrag.boot import BoardApp, create_board_app
from multidrag.config import APP_VERSION as __version__
from multidrag.core import (
    ReorderResult,
    apply_selection_intent,
    clear_selection,
    multi_select_to,
    reorder,
    toggle_selection,
    toggle_selection_in_group,
)
from multidrag.domain import (
    Board,
    BoardError,
    Column,
    DraggableLocation,
    DragStart,
    DropReason,
    DropResult,
    InvalidBoardError,
    InvalidDragState,
    KeyboardModifier,
    Platform,
    SelectionIntent,
    Task,
    TaskNotFoundError,
)

__all__ = [
    "Board",
    "BoardApp",
    "BoardError",
    "Column",
    "DragStart",
    "DraggableLocation",
    "DropReason",
    "DropResult",
    "InvalidBoardError",
    "InvalidDragState",
    "KeyboardModifier",
    "Platform",
    "ReorderResult",
    "SelectionIntent",
    "Task",
    "TaskNotFoundError",
    "__version__",
    "apply_selection_intent",
    "clear_selection",
    "create_board_app",
    "multi_select_to",
    "reorder",
    "toggle_selection",
    "toggle_selection_in_group",
]
