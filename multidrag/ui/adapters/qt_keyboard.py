"""Module: qt_keyboard.py.

Date: 2026-10-19

Qt keyboard adapter - converts Qt input types to domain types.

Lets a PyQt5 board view classify its mouse/key events with
multidrag.domain.keyboard without the domain importing Qt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt5.QtCore import Qt

from multidrag.config import ACTIVATE_KEY, DISMISS_KEY, PRIMARY_BUTTON
from multidrag.domain.keyboard import KeyboardModifier


def qt_modifiers_to_domain(qt_modifiers: Qt.KeyboardModifiers) -> KeyboardModifier:
    """Convert Qt keyboard modifiers to domain KeyboardModifier.

    Args:
        qt_modifiers: Qt.KeyboardModifiers from event

    Returns:
        Domain KeyboardModifier flags

    Example:
        >>> from PyQt5.QtCore import Qt
        >>> qt_mods = Qt.ControlModifier | Qt.ShiftModifier
        >>> domain_mods = qt_modifiers_to_domain(qt_mods)
        >>> bool(domain_mods & KeyboardModifier.CTRL)
        True

    """
    from PyQt5.QtCore import Qt

    result = KeyboardModifier.NONE

    if qt_modifiers & Qt.ControlModifier:
        result |= KeyboardModifier.CTRL
    if qt_modifiers & Qt.ShiftModifier:
        result |= KeyboardModifier.SHIFT
    if qt_modifiers & Qt.AltModifier:
        result |= KeyboardModifier.ALT
    if qt_modifiers & Qt.MetaModifier:
        result |= KeyboardModifier.META

    return result


def qt_button_to_index(qt_button: Qt.MouseButton) -> int:
    """Convert a Qt mouse button to the DOM-style button index (0 primary, 1 middle, 2 secondary)."""
    from PyQt5.QtCore import Qt

    if qt_button == Qt.LeftButton:
        return PRIMARY_BUTTON
    if qt_button == Qt.MiddleButton:
        return 1
    if qt_button == Qt.RightButton:
        return 2
    return -1


def qt_key_to_name(qt_key: int) -> str | None:
    """Name of a Qt key code as used by the domain, or None for keys it ignores."""
    from PyQt5.QtCore import Qt

    if qt_key in (Qt.Key_Return, Qt.Key_Enter):
        return ACTIVATE_KEY
    if qt_key == Qt.Key_Escape:
        return DISMISS_KEY
    return None
