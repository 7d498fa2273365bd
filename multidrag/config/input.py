"""Module: multidrag.config.input

Date: 2026-10-19

Input classification settings used when turning pointer/keyboard
gestures into selection intents.
"""

# =====================================
# PLATFORM
# =====================================

# Force "windows" or "other"; None means detect once at startup
PLATFORM_OVERRIDE: str | None = None

# platform.system() values treated as Windows
WINDOWS_SYSTEM_NAMES = ("Windows",)

# =====================================
# KEYS AND BUTTONS
# =====================================

# https://developer.mozilla.org/en-US/docs/Web/API/MouseEvent/button
PRIMARY_BUTTON = 0

ACTIVATE_KEY = "Enter"
DISMISS_KEY = "Escape"
