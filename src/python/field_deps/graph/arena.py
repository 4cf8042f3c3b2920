# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Storage for State and Modifier nodes and the edges between them."""

from __future__ import annotations

import logging

from .nodes import Element, ModifierNode, StateNode

_log = logging.getLogger(__name__)


class NodeArena:
    """Owns every State and Modifier node of one engine.

    Node ids are indices into ``states`` and ``modifiers``. Nodes are never
    removed, so ids stay valid for the life of the arena.
    """

    def __init__(self) -> None:
        self.states: list[StateNode] = []
        self.modifiers: list[ModifierNode] = []

    def attach_state(self, element: Element, node: StateNode) -> StateNode:
        """Adopt an unattached State node and file it under ``element``.

        Raises:
            RuntimeError: If the node already belongs to an element.
        """
        if node.attached:
            raise RuntimeError(f"State '{node.name}' is already attached to element #{node.element}")
        node.id = len(self.states)
        node.element = element.index
        self.states.append(node)
        element.states[node.name] = node.id
        _log.debug("Attached state '%s' to '%s'", node.name, element.key)
        return node

    def attach_modifier(self, element: Element, node: ModifierNode) -> ModifierNode:
        """Adopt an unattached Modifier node and file it under ``element``.

        Raises:
            RuntimeError: If the node already belongs to an element.
        """
        if node.attached:
            raise RuntimeError(f"Modifier '{node.name}' is already attached to element #{node.element}")
        node.id = len(self.modifiers)
        node.element = element.index
        self.modifiers.append(node)
        element.modifiers[node.name] = node.id
        _log.debug("Attached modifier '%s' to '%s'", node.name, element.key)
        return node

    def state(self, state_id: int) -> StateNode:
        return self.states[state_id]

    def modifier(self, modifier_id: int) -> ModifierNode:
        return self.modifiers[modifier_id]

    def is_subscribed(self, modifier_id: int, state_id: int) -> bool:
        return state_id in self.modifiers[modifier_id].subscriptions

    def subscribe(self, modifier_id: int, state_id: int, dedupe: bool = False) -> bool:
        """Create the edge State -> Modifier on both sides.

        Without ``dedupe`` an existing edge is added again, so the modifier
        runs once per edge when the state publishes.

        Returns:
            True if an edge was added.
        """
        modifier = self.modifiers[modifier_id]
        state = self.states[state_id]
        if self.is_subscribed(modifier_id, state_id):
            if dedupe:
                return False
            _log.debug(
                "Modifier '%s' #%d subscribes to state '%s' #%d again (duplicate edge)",
                modifier.name, modifier_id, state.name, state_id,
            )

        state.subscribers.append(modifier_id)
        modifier.subscriptions.append(state_id)
        _log.debug("Modifier '%s' #%d listens to state '%s' #%d",
                   modifier.name, modifier_id, state.name, state_id)
        return True

    def subscribed_states(self, modifier_id: int) -> list[StateNode]:
        return [self.states[i] for i in self.modifiers[modifier_id].subscriptions]

    def subscribers(self, state_id: int) -> list[ModifierNode]:
        return [self.modifiers[i] for i in self.states[state_id].subscribers]

    def __len__(self) -> int:
        return len(self.states) + len(self.modifiers)
