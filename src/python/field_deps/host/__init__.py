# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Host collaborators: key resolvers, change notifiers and reactive signals.

Usage:
    from field_deps.host import attribute_key, manual_notifier

    engine = FieldDependencies(change_notifier=manual_notifier)
    engine.set_element_key_resolver(attribute_key("name"))
"""

from .signals import Signal, Batch, batch
from .subscription_registry import SubscriptionRegistry
from .protocols import HostElement, KeyResolver, ChangeNotifier
from .keys import attribute_key, default_element_key, require_key
from .notifiers import on_change_notifier, manual_notifier

__all__ = [
    # Signals
    "Signal",
    "Batch",
    "batch",
    "SubscriptionRegistry",
    # Protocols
    "HostElement",
    "KeyResolver",
    "ChangeNotifier",
    # Collaborators
    "attribute_key",
    "default_element_key",
    "require_key",
    "on_change_notifier",
    "manual_notifier",
]
