"""Module: observable.py.

Date: 2026-10-19

Change notification for BoardStore without a Qt dependency.

Signals are declared on the class and bound per instance on first access,
so two stores never share subscribers.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from multidrag.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__name__", repr(callback))


class Signal:
    """Class-level signal declaration, e.g. ``selection_changed = Signal(tuple)``."""

    def __init__(self, *arg_types: type):
        self.arg_types = arg_types  # payload types, informational
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        slot = f"_signal_{self.name}"
        bound = obj.__dict__.get(slot)
        if bound is None:
            bound = obj.__dict__[slot] = SignalInstance(self.name, self.arg_types)
        return bound


class SignalInstance:
    """Subscribers of one signal on one store."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Subscribe callback; subscribing it again has no effect."""
        with self._lock:
            if callback in self._callbacks:
                return
            self._callbacks.append(callback)

        logger.debug(
            "Signal connected: %s -> %s",
            self.name,
            _callback_name(callback),
            extra={"dev_only": True},
        )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Unsubscribe callback, or every subscriber when callback is None."""
        with self._lock:
            if callback is None:
                self._callbacks.clear()
            elif callback in self._callbacks:
                self._callbacks.remove(callback)

    def receiver_count(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def emit(self, *args: Any) -> None:
        """Call every subscriber with args.

        A subscriber that raises is logged; the rest are still called.
        """
        with self._lock:
            callbacks = tuple(self._callbacks)

        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s", self.name, _callback_name(callback)
                )


class Observable:
    """Base for objects that declare Signal attributes (see BoardStore)."""
