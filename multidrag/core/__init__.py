"""
Core operations for multidrag.

Pure functions over Board/Selection snapshots: selection gestures,
range extension and drag-aware reordering.
"""

from multidrag.core.reorder import ReorderResult, reorder
from multidrag.core.selection import (
    apply_selection_intent,
    clear_selection,
    multi_select_to,
    toggle_selection,
    toggle_selection_in_group,
)

__all__ = [
    "ReorderResult",
    "apply_selection_intent",
    "clear_selection",
    "multi_select_to",
    "reorder",
    "toggle_selection",
    "toggle_selection_in_group",
]
