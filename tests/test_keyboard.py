"""
Tests for gesture classification.

Date: 2026-10-19
"""

import pytest

from multidrag.domain.keyboard import (
    KeyboardModifier,
    Platform,
    SelectionIntent,
    classify_click,
    classify_key_press,
    classify_touch_end,
    is_dismiss_key,
    resolve_selection_intent,
)


class TestPlatform:
    """Test platform detection."""

    @pytest.mark.parametrize(
        "system, expected",
        [
            ("Windows", Platform.WINDOWS),
            ("Darwin", Platform.OTHER),
            ("Linux", Platform.OTHER),
        ],
    )
    def test_detect(self, system, expected):
        """Test mapping of platform.system() names."""
        assert Platform.detect(system) is expected

    def test_group_toggle_modifier(self):
        """Test the group key for each platform."""
        assert Platform.WINDOWS.group_toggle_modifier is KeyboardModifier.CTRL
        assert Platform.OTHER.group_toggle_modifier is KeyboardModifier.META


class TestResolveSelectionIntent:
    """Test modifier to intent mapping."""

    @pytest.mark.parametrize(
        "platform, modifiers, expected",
        [
            (Platform.WINDOWS, KeyboardModifier.NONE, SelectionIntent.PLAIN),
            (Platform.WINDOWS, KeyboardModifier.CTRL, SelectionIntent.GROUP_TOGGLE),
            (Platform.WINDOWS, KeyboardModifier.META, SelectionIntent.PLAIN),
            (Platform.WINDOWS, KeyboardModifier.SHIFT, SelectionIntent.RANGE_EXTEND),
            (Platform.OTHER, KeyboardModifier.META, SelectionIntent.GROUP_TOGGLE),
            (Platform.OTHER, KeyboardModifier.CTRL, SelectionIntent.PLAIN),
            (
                Platform.OTHER,
                KeyboardModifier.META | KeyboardModifier.SHIFT,
                SelectionIntent.GROUP_TOGGLE,
            ),
            (Platform.OTHER, KeyboardModifier.ALT, SelectionIntent.PLAIN),
        ],
    )
    def test_mapping(self, platform, modifiers, expected):
        """Test each modifier combination."""
        assert resolve_selection_intent(modifiers, platform) is expected


class TestClassifiers:
    """Test click, key and touch classification."""

    def test_primary_click(self):
        """Test that the primary button is classified."""
        assert classify_click(0, KeyboardModifier.NONE, Platform.WINDOWS) is SelectionIntent.PLAIN

    def test_secondary_click(self):
        """Test that other buttons are not selection gestures."""
        assert classify_click(2, KeyboardModifier.CTRL, Platform.WINDOWS) is None

    def test_activate_key(self):
        """Test that Enter is classified and other keys are not."""
        assert classify_key_press("Enter", KeyboardModifier.SHIFT, Platform.OTHER) is (
            SelectionIntent.RANGE_EXTEND
        )
        assert classify_key_press("a", KeyboardModifier.NONE, Platform.OTHER) is None

    def test_activate_key_while_dragging(self):
        """Test that Enter during a drag is not a selection gesture."""
        assert (
            classify_key_press("Enter", KeyboardModifier.NONE, Platform.OTHER, is_dragging=True)
            is None
        )

    def test_touch_is_group_toggle(self):
        """Test that touch always toggles group membership."""
        assert classify_touch_end() is SelectionIntent.GROUP_TOGGLE

    def test_dismiss_key(self):
        """Test Escape detection."""
        assert is_dismiss_key("Escape")
        assert not is_dismiss_key("Enter")
