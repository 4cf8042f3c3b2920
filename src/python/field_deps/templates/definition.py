# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Dataclass definitions for State and Modifier templates.

Templates are immutable values: a name plus a callback. Attaching a template
to an element never shares it; ``instantiate()`` wraps the callback in a fresh
graph node with its own edge list.

Example:
    checked = StateDef("checked", lambda host: host.checked)
    show = ModifierDef("show", lambda host: setattr(host, "visible", True))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..graph.nodes import ModifierNode, StateNode


@dataclass(frozen=True)
class StateDef:
    """Immutable definition of a named State.

    Args:
        name: Registry name, shared by every element using this state.
        predicate: Called with the raw host element; truthy means active.
            Must be fast and free of side effects.
        description: Optional human readable summary.
    """

    name: str
    predicate: Callable[[Any], bool]
    description: str = ""

    def instantiate(self) -> StateNode:
        """Create a new, unattached State node for this template."""
        return StateNode(name=self.name, predicate=self.predicate)


@dataclass(frozen=True)
class ModifierDef:
    """Immutable definition of a named Modifier.

    Args:
        name: Registry name, shared by every element using this modifier.
        mutate: Called with the raw host element when a subscribed State
            publishes. Must not raise a change event on its own host.
        description: Optional human readable summary.
    """

    name: str
    mutate: Callable[[Any], None]
    description: str = ""

    def instantiate(self) -> ModifierNode:
        """Create a new, unattached Modifier node for this template."""
        return ModifierNode(name=self.name, mutate=self.mutate)
