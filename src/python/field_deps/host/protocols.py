# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Protocol definitions for host collaborators.

The engine never inspects host elements itself. It only hands them to an
element key resolver, a change notifier, and the State/Modifier callbacks.
Using protocols instead of base classes means any object with the right
shape works, no inheritance required.

Example:
    class Checkbox:
        def __init__(self, id):
            self.id = id
            self.checked = False
        def on_change(self, callback): ...

    engine.create_relationship(Checkbox("agree"), "checked", panel, "show")
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class HostElement(Protocol):
    """Protocol for host elements usable with the default collaborators.

    The default key resolver reads ``id`` and the default change notifier
    calls ``on_change``.
    """

    id: Any

    def on_change(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` whenever a relevant input changes.

        Args:
            callback: Called with no arguments.

        Returns:
            Function that removes the callback again.
        """
        ...


class KeyResolver(Protocol):
    """Produces a stable, unique identifier for a host element."""

    def __call__(self, host: Any) -> Any:
        ...


class ChangeNotifier(Protocol):
    """Hooks ``callback`` into the change events of ``host``.

    Returns an unsubscribe function, or None when nothing needs releasing.
    """

    def __call__(self, host: Any, callback: Callable[[], None]) -> Optional[Callable[[], None]]:
        ...

