"""Module: __init__.py.

Date: 2026-10-19

Pure Python event/signal implementation for decoupling observers
from state changes.
"""

from multidrag.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
