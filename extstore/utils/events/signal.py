"""Module: signal.py.

Author: Michael Economou
Date: 2026-02-02

Signal - Qt-like custom signal that can be defined, connected and emitted.

Provides pyqtSignal-like wiring without a QObject:
- connect/disconnect/emit interface (subscribe/unsubscribe aliases)
- optional receiver context stored with each slot
- signals can be connected to other signals (chaining)
- blocking without losing connections

The signal is not threaded: connected slots run directly inside ``emit``,
in connection order, and the code after ``emit`` runs once they all returned.
An exception raised by a slot stops the dispatch and reaches the emitter.

Usage:
    progress = Signal(float, name="progress")
    progress.connect(button.set_progress)
    progress.connect(panel, StorePanel.on_progress)  # called as on_progress(panel, value)
    progress.emit(0.5)
"""

from __future__ import annotations

import threading
import types
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, NamedTuple

from extstore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Connection", "Signal", "blocked_signals"]


class Connection(NamedTuple):
    """A connected slot and the receiver it is bound to (None for plain callables)."""

    context: Any
    slot: Callable[..., Any] | Signal


class Signal:
    """Synchronous signal with ordered connections.

    The same slot can be connected several times and is then called once per
    connection. ``disconnect(slot)`` removes all of them.
    """

    def __init__(self, *arg_types: type, name: str = ""):
        """Initialize the signal.

        Args:
            *arg_types: Types of the emitted values (for documentation only,
                emitted values are never checked against them)
            name: Signal name used in log messages

        """
        self.arg_types = arg_types
        self.name = name
        self.blocked = False
        self._connections: list[Connection] = []
        self._lock = threading.Lock()

    # ----- connections -----

    def connect(self, context: Any, slot: Callable[..., Any] | Signal | None = None) -> None:
        """Connect a slot to this signal.

        Supports both ``connect(slot)`` and ``connect(context, slot)``. In the
        second form the slot is called as ``slot(context, *args)``.
        """
        if slot is None:
            context, slot = None, context

        if not callable(slot) and not isinstance(slot, Signal):
            raise TypeError(f"Cannot connect {self!r} to non-callable {slot!r}")

        with self._lock:
            self._connections.append(Connection(context, slot))

        logger.debug(
            "[Signal] Connected %s -> %s",
            self._label(),
            _slot_name(slot),
            extra={"dev_only": True},
        )

    def disconnect(self, slot: Callable[..., Any] | Signal | None = None) -> None:
        """Disconnect a slot, or every slot when called without argument.

        Slots are matched by identity, bound methods by receiver and function.
        Disconnecting a slot that is not connected does nothing.
        """
        with self._lock:
            if slot is None:
                count = len(self._connections)
                self._connections = []
            else:
                remaining = [c for c in self._connections if not _same_slot(c.slot, slot)]
                count = len(self._connections) - len(remaining)
                self._connections = remaining

        logger.debug(
            "[Signal] Disconnected %d slot(s) from %s",
            count,
            self._label(),
            extra={"dev_only": True},
        )

    subscribe = connect
    unsubscribe = disconnect

    def connections(self) -> tuple[Connection, ...]:
        """Return the current connections in dispatch order."""
        with self._lock:
            return tuple(self._connections)

    def receivers(self) -> int:
        """Return the number of connections."""
        with self._lock:
            return len(self._connections)

    def __len__(self) -> int:
        return self.receivers()

    def __bool__(self) -> bool:
        # truthy even without connections
        return True

    # ----- blocking -----

    @property
    def suspended(self) -> bool:
        """Same as ``blocked``."""
        return self.blocked

    @suspended.setter
    def suspended(self, value: bool) -> None:
        self.blocked = bool(value)

    def block(self) -> None:
        self.blocked = True

    def unblock(self) -> None:
        self.blocked = False

    # ----- emission -----

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``, in connection order.

        Slots connected or disconnected while the signal is emitting only
        take part from the next emission.
        """
        if self.blocked:
            return

        with self._lock:
            connections = list(self._connections)

        logger.debug(
            "[Signal] Emitting %s with %r to %d slot(s)",
            self._label(),
            args,
            len(connections),
            extra={"dev_only": True},
        )

        for context, slot in connections:
            if isinstance(slot, Signal):
                slot.emit(*args)
            elif context is None:
                slot(*args)
            else:
                slot(context, *args)

    __call__ = emit

    def _label(self) -> str:
        return self.name or "<anonymous>"

    def __repr__(self) -> str:
        return f"<Signal {self._label()} ({self.receivers()} connection(s))>"


def _same_slot(connected: Any, slot: Any) -> bool:
    """Match slots by identity.

    Bound methods are created anew on every attribute access, so two bound
    methods match when they bind the same function to the same receiver.
    """
    if connected is slot:
        return True
    if isinstance(connected, types.MethodType) and isinstance(slot, types.MethodType):
        return connected.__self__ is slot.__self__ and connected.__func__ is slot.__func__
    if isinstance(connected, types.BuiltinMethodType) and isinstance(slot, types.BuiltinMethodType):
        # list.append and friends: same receiver and same method name
        return connected.__self__ is slot.__self__ and connected.__name__ == slot.__name__
    return False


def _slot_name(slot: Any) -> str:
    if isinstance(slot, Signal):
        return repr(slot)
    return getattr(slot, "__qualname__", None) or getattr(slot, "__name__", repr(slot))


@contextmanager
def blocked_signals(*signals: Signal) -> Iterator[None]:
    """Block the given signals for the duration of the ``with`` block.

    Each signal gets back the blocked state it had on entry, so nesting is safe.
    """
    previous = [signal.blocked for signal in signals]
    for signal in signals:
        signal.blocked = True
    try:
        yield
    finally:
        for signal, was_blocked in zip(signals, previous):
            signal.blocked = was_blocked
