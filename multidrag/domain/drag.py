"""Module: drag.py.

Date: 2026-10-19

Decoded drag events as delivered by the gesture layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DropReason(str, Enum):
    """Why a drag ended."""

    DROP = "DROP"
    CANCEL = "CANCEL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DraggableLocation:
    """A slot in a column: the column id and a zero-based index."""

    column_id: str
    index: int


@dataclass(frozen=True, slots=True)
class DragStart:
    """Start of a drag gesture; source, when given, must hold draggable_id."""

    draggable_id: str
    source: DraggableLocation | None = None


@dataclass(frozen=True, slots=True)
class DropResult:
    """End of a drag gesture.

    destination is None when the task was dropped outside any column.
    """

    draggable_id: str
    source: DraggableLocation
    destination: DraggableLocation | None
    reason: DropReason = DropReason.DROP

    @property
    def is_cancelled(self) -> bool:
        return self.destination is None or self.reason is DropReason.CANCEL
