# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Reactive signals for host input values.

Signals hold a value and notify subscribers when that value changes. The
reference Field host uses them for its inputs, which is what drives the
change notifier of the dependency engine.

Example:
    checked = Signal(False)
    checked.subscribe(lambda v: print(f"Checked is now {v}"))
    checked.value = True  # Prints: "Checked is now True"
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Signal(Generic[T]):
    """A reactive value that notifies subscribers when it changes.

    Subscribers run synchronously, in subscription order, on the thread that
    sets the value. A subscriber that raises stops the notification: the error
    is logged and re-raised to whoever set the value.

    Example:
        value = Signal("")
        value.subscribe(lambda v: validate(v))
        value.value = "hello"  # Triggers validate("hello")
    """

    __slots__ = ("_value", "_subscribers", "_name", "_next_id")

    def __init__(self, initial_value: T, name: str = "") -> None:
        self._value = initial_value
        self._subscribers: dict[int, Callable[[T], None]] = {}
        self._name = name
        self._next_id = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._value == new_value:
            return

        self._value = new_value

        if _batch_context.is_batching:
            _batch_context.pending_notifications.append(self)
            return

        self._notify()

    def _notify(self) -> None:
        callbacks = list(self._subscribers.values())

        for callback in callbacks:
            try:
                callback(self._value)
            except Exception as e:
                logger.error("Signal '%s' callback error: %s", self._name or "unnamed", e)
                raise

    def emit(self) -> None:
        """Notify subscribers with the current value even if it did not change."""
        if _batch_context.is_batching:
            _batch_context.pending_notifications.append(self)
            return
        self._notify()

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Subscribe to value changes.

        Args:
            callback: Called with new value when signal changes.

        Returns:
            Unsubscribe function. Call it to stop receiving notifications.
        """
        sub_id = self._next_id
        self._next_id += 1
        self._subscribers[sub_id] = callback

        def unsubscribe() -> None:
            self._subscribers.pop(sub_id, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def peek(self) -> T:
        """Get value without notifying anyone."""
        return self._value

    def __repr__(self) -> str:
        name = f" '{self._name}'" if self._name else ""
        return f"<Signal{name}: {self._value!r}>"


class _BatchContext:
    """Context for batching signal updates."""

    __slots__ = ("is_batching", "pending_notifications")

    def __init__(self) -> None:
        self.is_batching = False
        self.pending_notifications: list[Signal] = []


_batch_context = _BatchContext()


class Batch:
    """Context manager for batching multiple signal updates.

    Inside a batch, signal notifications are deferred until the batch ends.
    Each signal notifies once, in the order it first changed. Field bumps a
    single revision signal for all of its inputs, so setting several inputs
    of one field inside a batch raises a single cascade.

    If a subscriber raises during the flush, the remaining signals still
    notify and the first error is re-raised afterwards.

    Example:
        with Batch():
            field.value = "x"
            field.checked = True
        # Subscribers notified once per signal, not per assignment
    """

    def __enter__(self) -> Batch:
        _batch_context.is_batching = True
        return self

    def __exit__(self, *args: object) -> None:
        _batch_context.is_batching = False
        pending = list(dict.fromkeys(_batch_context.pending_notifications))
        _batch_context.pending_notifications.clear()

        first_error: Exception | None = None
        for signal in pending:
            try:
                signal._notify()
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error


@contextmanager
def batch():
    """Context manager for batching signal updates.

    Alias for Batch() as a function.
    """
    with Batch():
        yield
