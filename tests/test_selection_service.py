"""
Tests for SelectionService gesture handling.

Date: 2026-10-19
"""

import pytest

from multidrag.app.services.selection_service import SelectionService
from multidrag.app.state.board_store import BoardStore
from multidrag.domain.keyboard import KeyboardModifier, Platform, SelectionIntent

CTRL = KeyboardModifier.CTRL
META = KeyboardModifier.META
SHIFT = KeyboardModifier.SHIFT


@pytest.fixture
def store(board):
    return BoardStore(board)


@pytest.fixture
def service(store, windows):
    return SelectionService(store, windows)


@pytest.fixture
def mac_service(store, mac):
    return SelectionService(store, mac)


class TestDirectOperations:
    """Test the store-bound operations."""

    def test_toggle_commits(self, store, service):
        """Test that toggle_selection updates the store."""
        assert service.toggle_selection("t1") == ("t1",)
        assert store.selection == ("t1",)

    def test_group_toggle_and_range(self, store, service):
        """Test chaining group toggle and range extension."""
        service.toggle_selection("t5")
        service.toggle_selection_in_group("t1")
        service.multi_select_to("t3")

        assert store.selection == ("t5", "t1", "t2", "t3")

    def test_range_no_op_keeps_selection(self, store, service):
        """Test that a range no-op leaves the store untouched."""
        service.toggle_selection("t2")
        received = []
        store.selection_changed.connect(received.append)

        assert service.multi_select_to("t2") == ("t2",)
        assert received == []

    def test_apply_intent(self, service):
        """Test dispatch through apply."""
        service.apply("t1", SelectionIntent.PLAIN)
        assert service.apply("t6", SelectionIntent.GROUP_TOGGLE) == ("t1", "t6")


class TestClickHandling:
    """Test pointer clicks."""

    def test_plain_click(self, store, service):
        """Test that a plain primary click selects the task."""
        assert service.handle_click("t1", 0) is True
        assert store.selection == ("t1",)

    def test_ctrl_click_on_windows(self, store, service):
        """Test that CTRL toggles group membership on Windows."""
        service.handle_click("t1", 0)
        service.handle_click("t6", 0, CTRL)
        assert store.selection == ("t1", "t6")

    def test_meta_click_on_windows_is_plain(self, store, service):
        """Test that META is not the group key on Windows."""
        service.handle_click("t1", 0)
        service.handle_click("t6", 0, META)
        assert store.selection == ("t6",)

    def test_meta_click_on_mac(self, store, mac_service):
        """Test that Command toggles group membership off Windows."""
        mac_service.handle_click("t1", 0)
        mac_service.handle_click("t6", 0, META)
        assert store.selection == ("t1", "t6")

    def test_ctrl_click_on_mac_is_plain(self, store, mac_service):
        """Test that CTRL is not the group key off Windows."""
        mac_service.handle_click("t1", 0)
        mac_service.handle_click("t6", 0, CTRL)
        assert store.selection == ("t6",)

    def test_shift_click_extends(self, store, service):
        """Test that SHIFT extends the range."""
        service.handle_click("t1", 0)
        service.handle_click("t3", 0, SHIFT)
        assert store.selection == ("t1", "t2", "t3")

    def test_group_key_beats_shift(self, store, service):
        """Test that CTRL+SHIFT is treated as a group toggle."""
        service.handle_click("t1", 0)
        service.handle_click("t3", 0, CTRL | SHIFT)
        assert store.selection == ("t1", "t3")

    @pytest.mark.parametrize("button", [1, 2])
    def test_non_primary_button_ignored(self, store, service, button):
        """Test that middle and right clicks do not select."""
        assert service.handle_click("t1", button) is False
        assert store.selection == ()

    def test_handled_click_ignored(self, store, service):
        """Test that an already consumed click is ignored."""
        assert service.handle_click("t1", 0, handled=True) is False
        assert store.selection == ()


class TestKeyAndTouchHandling:
    """Test keyboard and touch gestures."""

    def test_enter_selects(self, store, service):
        """Test that the activate key selects the focused task."""
        assert service.handle_key_press("t2", "Enter") is True
        assert store.selection == ("t2",)

    def test_enter_with_shift_extends(self, store, service):
        """Test that modifiers apply to the activate key too."""
        service.handle_key_press("t1", "Enter")
        service.handle_key_press("t3", "Enter", SHIFT)
        assert store.selection == ("t1", "t2", "t3")

    def test_other_keys_ignored(self, store, service):
        """Test that keys other than the activate key do nothing."""
        assert service.handle_key_press("t2", "Space") is False
        assert store.selection == ()

    def test_enter_while_dragging_ignored(self, store, service):
        """Test that the activate key is ignored during a drag."""
        assert service.handle_key_press("t2", "Enter", is_dragging=True) is False
        assert store.selection == ()

    def test_touch_toggles_group(self, store, service):
        """Test that taps add to and remove from the group."""
        service.handle_touch_end("t1")
        service.handle_touch_end("t6")
        assert store.selection == ("t1", "t6")

        service.handle_touch_end("t1")
        assert store.selection == ("t6",)

    def test_handled_touch_ignored(self, store, service):
        """Test that an already consumed touch is ignored."""
        assert service.handle_touch_end("t1", handled=True) is False
        assert store.selection == ()


class TestWindowDismissal:
    """Test clearing the selection from window-level events."""

    def test_window_click_clears(self, store, service):
        """Test that clicking outside any task clears the selection."""
        service.toggle_selection("t1")
        service.on_window_click()
        assert store.selection == ()

    def test_handled_window_click_keeps(self, store, service):
        """Test that a consumed click does not clear the selection."""
        service.toggle_selection("t1")
        service.on_window_click(handled=True)
        assert store.selection == ("t1",)

    def test_window_touch_clears(self, store, service):
        """Test that a touch outside any task clears the selection."""
        service.toggle_selection("t1")
        service.on_window_touch_end()
        assert store.selection == ()

    def test_escape_clears(self, store, service):
        """Test that Escape clears and other keys do not."""
        service.toggle_selection("t1")

        service.on_window_key_press("Enter")
        assert store.selection == ("t1",)

        service.on_window_key_press("Escape")
        assert store.selection == ()
