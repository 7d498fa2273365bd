"""Module: keyboard.py.

Date: 2026-10-19

Domain types for selection gestures.

Pure domain layer - no UI dependencies. UI adapters translate their own
modifier/key types into KeyboardModifier and key names, and these helpers
decide which selection gesture a click, key press or touch represents.
"""

from __future__ import annotations

import platform as _platform
from enum import Enum, Flag, auto

from multidrag.config import (
    ACTIVATE_KEY,
    DISMISS_KEY,
    PLATFORM_OVERRIDE,
    PRIMARY_BUTTON,
    WINDOWS_SYSTEM_NAMES,
)


class KeyboardModifier(Flag):
    """Keyboard modifier keys.

    Uses Flag enum for bitwise operations (multiple modifiers can be active).

    Example:
        >>> mods = KeyboardModifier.CTRL | KeyboardModifier.SHIFT
        >>> bool(mods & KeyboardModifier.CTRL)
        True

    """

    NONE = 0
    CTRL = auto()
    SHIFT = auto()
    ALT = auto()
    META = auto()  # Windows key / Command key


class Platform(str, Enum):
    """Host platform family; decides which key toggles group membership."""

    WINDOWS = "windows"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value

    @property
    def group_toggle_modifier(self) -> KeyboardModifier:
        """CTRL on Windows, Command (META) everywhere else."""
        return KeyboardModifier.CTRL if self is Platform.WINDOWS else KeyboardModifier.META

    @classmethod
    def detect(cls, system: str | None = None) -> Platform:
        """Resolve the platform once at startup.

        PLATFORM_OVERRIDE wins when set; otherwise platform.system() is used.
        """
        if PLATFORM_OVERRIDE:
            return cls(PLATFORM_OVERRIDE)
        system = system if system is not None else _platform.system()
        return cls.WINDOWS if system in WINDOWS_SYSTEM_NAMES else cls.OTHER


class SelectionIntent(str, Enum):
    """The three selection gestures."""

    PLAIN = "plain"
    GROUP_TOGGLE = "group_toggle"
    RANGE_EXTEND = "range_extend"

    def __str__(self) -> str:
        return self.value


def resolve_selection_intent(modifiers: KeyboardModifier, platform: Platform) -> SelectionIntent:
    """Map active modifiers to a selection intent.

    The group toggle key takes precedence over SHIFT.
    """
    if modifiers & platform.group_toggle_modifier:
        return SelectionIntent.GROUP_TOGGLE
    if modifiers & KeyboardModifier.SHIFT:
        return SelectionIntent.RANGE_EXTEND
    return SelectionIntent.PLAIN


def classify_click(
    button: int, modifiers: KeyboardModifier, platform: Platform
) -> SelectionIntent | None:
    """Selection intent for a pointer click, or None for non-primary buttons."""
    if button != PRIMARY_BUTTON:
        return None
    return resolve_selection_intent(modifiers, platform)


def classify_key_press(
    key: str, modifiers: KeyboardModifier, platform: Platform, *, is_dragging: bool = False
) -> SelectionIntent | None:
    """Selection intent for a key press on a task, or None if the key does not select.

    Only the activate key selects, and never while the task is being dragged.
    """
    if is_dragging or key != ACTIVATE_KEY:
        return None
    return resolve_selection_intent(modifiers, platform)


def classify_touch_end() -> SelectionIntent:
    # touch has no modifiers; a tap always toggles group membership
    return SelectionIntent.GROUP_TOGGLE


def is_dismiss_key(key: str) -> bool:
    """True for the key that clears the selection when pressed outside a task."""
    return key == DISMISS_KEY
