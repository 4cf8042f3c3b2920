# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Registry for tracking change notifier subscriptions by owner."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Hashable

logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """Tracks unsubscribe handles by owner so they can be released together.

    The element registry files every change notifier hook under the key of the
    element it belongs to.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[Hashable, list[Callable[[], None]]] = defaultdict(list)

    def register(self, owner: Hashable, unsubscribe: Callable[[], None]) -> None:
        """Register an unsubscribe function under an owner."""
        self._subscriptions[owner].append(unsubscribe)

    def count(self, owner: Hashable | None = None) -> int:
        """Number of live subscriptions for an owner, or for everyone."""
        if owner is not None:
            return len(self._subscriptions.get(owner, ()))
        return sum(len(unsubs) for unsubs in self._subscriptions.values())

    def unsubscribe_all(self, owner: Hashable) -> int:
        """Unsubscribe all callbacks for an owner. Returns count.

        A failing unsubscribe is logged and the remaining ones still run.
        """
        unsubs = self._subscriptions.pop(owner, [])

        for unsub in unsubs:
            try:
                unsub()
            except Exception as e:
                logger.error("Error unsubscribing for %s: %s", owner, e)

        if unsubs:
            logger.debug("Released %d subscription(s) for %s", len(unsubs), owner)
        return len(unsubs)

    def clear(self) -> int:
        """Unsubscribe everything. Returns count."""
        return sum(self.unsubscribe_all(owner) for owner in list(self._subscriptions))
