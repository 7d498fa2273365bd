"""Drag-aware reordering of board columns."""

from multidrag.core.reorder.engine import ReorderResult, reorder

__all__ = ["ReorderResult", "reorder"]
