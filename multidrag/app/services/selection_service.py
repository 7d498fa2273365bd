"""Module: selection_service.py.

Date: 2026-10-19

Selection service - turns classified gestures into committed selections.

Task-level gestures (click, key press, touch) are classified with the
platform the service was created for, dispatched to the pure selection
operations in multidrag.core.selection and committed to the BoardStore.
Window-level dismissal signals clear the selection.
"""

from __future__ import annotations

from multidrag.app.state.board_store import BoardStore
from multidrag.core.selection import (
    apply_selection_intent,
    multi_select_to,
    toggle_selection,
    toggle_selection_in_group,
)
from multidrag.domain.keyboard import (
    KeyboardModifier,
    Platform,
    SelectionIntent,
    classify_click,
    classify_key_press,
    classify_touch_end,
    is_dismiss_key,
)
from multidrag.domain.selection import Selection
from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SelectionService:
    """Selection gestures bound to a BoardStore and a platform."""

    def __init__(self, store: BoardStore, platform: Platform) -> None:
        self._store = store
        self._platform = platform

    @property
    def platform(self) -> Platform:
        return self._platform

    # =====================================
    # Direct operations
    # =====================================

    def toggle_selection(self, task_id: str) -> Selection:
        return self._commit(toggle_selection(self._store.selection, task_id))

    def toggle_selection_in_group(self, task_id: str) -> Selection:
        return self._commit(toggle_selection_in_group(self._store.selection, task_id))

    def multi_select_to(self, task_id: str) -> Selection:
        board, selection = self._store.snapshot()
        return self._commit(multi_select_to(board, selection, task_id))

    def apply(self, task_id: str, intent: SelectionIntent) -> Selection:
        board, selection = self._store.snapshot()
        return self._commit(apply_selection_intent(board, selection, task_id, intent))

    def clear_selection(self) -> Selection:
        self._store.clear_selection()
        return self._store.selection

    # =====================================
    # Task gestures
    # =====================================

    def handle_click(
        self,
        task_id: str,
        button: int,
        modifiers: KeyboardModifier = KeyboardModifier.NONE,
        *,
        handled: bool = False,
    ) -> bool:
        """Handle a pointer click on a task.

        Args:
            task_id: Clicked task
            button: Pointer button index (0 is primary)
            modifiers: Active keyboard modifiers
            handled: True if another handler already consumed the event

        Returns:
            True if the click changed (or re-applied) the selection and should
            be marked as consumed

        """
        if handled:
            return False

        intent = classify_click(button, modifiers, self._platform)
        if intent is None:
            return False

        self.apply(task_id, intent)
        return True

    def handle_key_press(
        self,
        task_id: str,
        key: str,
        modifiers: KeyboardModifier = KeyboardModifier.NONE,
        *,
        is_dragging: bool = False,
        handled: bool = False,
    ) -> bool:
        """Handle a key press on a focused task; only the activate key selects."""
        if handled:
            return False

        intent = classify_key_press(key, modifiers, self._platform, is_dragging=is_dragging)
        if intent is None:
            return False

        self.apply(task_id, intent)
        return True

    def handle_touch_end(self, task_id: str, *, handled: bool = False) -> bool:
        if handled:
            return False

        self.apply(task_id, classify_touch_end())
        return True

    # =====================================
    # Window-level dismissal
    # =====================================

    def on_window_click(self, *, handled: bool = False) -> None:
        """Click outside any task: deselect everything."""
        if not handled:
            self.clear_selection()

    def on_window_touch_end(self, *, handled: bool = False) -> None:
        if not handled:
            self.clear_selection()

    def on_window_key_press(self, key: str, *, handled: bool = False) -> None:
        if not handled and is_dismiss_key(key):
            self.clear_selection()

    def _commit(self, selection: Selection) -> Selection:
        self._store.set_selection(selection)
        return self._store.selection
