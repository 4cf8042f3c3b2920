# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Change notifiers hooking the engine into host change events."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..errors import UnsupportedHost


def on_change_notifier(host: Any, callback: Callable[[], None]) -> Optional[Callable[[], None]]:
    """Default notifier: subscribe through ``host.on_change(callback)``."""
    hook = getattr(host, "on_change", None)
    if not callable(hook):
        raise UnsupportedHost(
            f"{type(host).__name__} has no on_change(); pass change_notifier=manual_notifier "
            "and drive it with trigger(), or supply a custom notifier"
        )
    return hook(callback)


def manual_notifier(host: Any, callback: Callable[[], None]) -> None:
    """Notifier for hosts that are only ever propagated through ``trigger()``."""
    return None
