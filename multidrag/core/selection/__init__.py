"""Selection operations: plain/group toggles and Finder-style range extension."""

from multidrag.core.selection.toggle import (
    apply_selection_intent,
    clear_selection,
    multi_select_to,
    toggle_selection,
    toggle_selection_in_group,
)

__all__ = [
    "apply_selection_intent",
    "clear_selection",
    "multi_select_to",
    "toggle_selection",
    "toggle_selection_in_group",
]
