"""Module: multidrag.config

Date: 2026-10-19

Configuration package.

- app: package info and logging settings
- input: platform and gesture classification settings

All settings are re-exported from this module:
    from multidrag.config import LOG_CONSOLE_LEVEL, PRIMARY_BUTTON
"""

from multidrag.config.app import *  # noqa: F401, F403
from multidrag.config.input import *  # noqa: F401, F403
