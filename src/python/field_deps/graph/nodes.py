# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Graph node records.

Nodes reference each other by integer index, never by object reference:
an Element lists the ids of its State and Modifier nodes, a State lists the
ids of its subscribed Modifiers, and a Modifier lists the ids of the States
it listens to. The arenas in ``elements.py`` and ``arena.py`` own the records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable

UNATTACHED = -1


@dataclass(frozen=True)
class ElementHandle:
    """Opaque identity of an Element.

    Args:
        key: Output of the element key resolver at creation time.
        index: Position of the Element record in its registry.
    """

    key: Hashable
    index: int

    def __str__(self) -> str:
        return str(self.key)


@dataclass
class Element:
    """One host element in the graph.

    Args:
        handle: Identity of this element.
        host: The host element reference handed to callbacks.
        states: State name to StateNode id, in attachment order.
        modifiers: Modifier name to ModifierNode id, in attachment order.
    """

    handle: ElementHandle
    host: Any
    states: dict[str, int] = field(default_factory=dict)
    modifiers: dict[str, int] = field(default_factory=dict)

    @property
    def key(self) -> Hashable:
        return self.handle.key

    @property
    def index(self) -> int:
        return self.handle.index

    def get_state(self, name: str) -> int | None:
        return self.states.get(name)

    def get_modifier(self, name: str) -> int | None:
        return self.modifiers.get(name)

    def __repr__(self) -> str:
        return (
            f"<Element '{self.key}': states={list(self.states)} "
            f"modifiers={list(self.modifiers)}>"
        )


@dataclass(eq=False)
class StateNode:
    """A State instance attached to one dependency element.

    Publishes to ``subscribers`` when its predicate holds for the host.
    Activeness is never cached.
    """

    name: str
    predicate: Callable[[Any], bool]
    id: int = UNATTACHED
    element: int = UNATTACHED
    subscribers: list[int] = field(default_factory=list)

    @property
    def attached(self) -> bool:
        return self.element != UNATTACHED

    def is_active(self, host: Any) -> bool:
        return bool(self.predicate(host))


@dataclass(eq=False)
class ModifierNode:
    """A Modifier instance attached to one dependent element.

    Runs ``mutate`` against its host whenever any State in
    ``subscriptions`` publishes.
    """

    name: str
    mutate: Callable[[Any], None]
    id: int = UNATTACHED
    element: int = UNATTACHED
    subscriptions: list[int] = field(default_factory=list)

    @property
    def attached(self) -> bool:
        return self.element != UNATTACHED
