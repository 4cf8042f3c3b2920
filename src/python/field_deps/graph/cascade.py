# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Fan-out, publish and execute: the propagation algorithm.

A change on an element fans out to its active States. Each active State
publishes to its subscribed Modifiers, in subscription order. Each Modifier
first mutates its own host and then fans out its own element, so a chain
A -> B -> C ripples from A into C within one synchronous call.

The cascade keeps the path of elements currently fanning out. An element
showing up twice on that path is a dependency cycle; the path length is
bounded by ``EngineSettings.max_cascade_depth``. Callback exceptions pass
through untouched and nothing is rolled back.
"""

from __future__ import annotations

import logging

from ..errors import CascadeDepthExceeded, CycleDetected
from ..settings import EngineSettings
from .arena import NodeArena
from .elements import ElementRegistry
from .nodes import ModifierNode, StateNode

_log = logging.getLogger(__name__)


class Cascade:
    """Propagates state changes through one engine's graph."""

    def __init__(self, arena: NodeArena, settings: EngineSettings) -> None:
        self._arena = arena
        self._settings = settings
        self._elements: ElementRegistry | None = None
        self._path: list[int] = []

    def bind(self, elements: ElementRegistry) -> None:
        """Attach the element registry. Called once by the engine."""
        self._elements = elements

    @property
    def depth(self) -> int:
        """Number of elements currently fanning out."""
        return len(self._path)

    def active_states(self, element_index: int) -> list[StateNode]:
        """States of an element whose predicate currently holds, in attachment order."""
        element = self._elements.get(element_index)
        result = []
        for state_id in element.states.values():
            state = self._arena.state(state_id)
            if state.is_active(element.host):
                result.append(state)
        return result

    def fan_out(self, element_index: int) -> None:
        """Publish every active State of an element that has subscribers.

        The active set is computed before anything publishes.
        """
        self._enter(element_index)
        try:
            for state in self.active_states(element_index):
                if state.subscribers:
                    self.publish(state)
        finally:
            self._path.pop()

    def publish(self, state: StateNode) -> None:
        """Execute every subscribed Modifier, duplicates included."""
        _log.debug("State '%s' #%d publishes to %d modifier(s)",
                   state.name, state.id, len(state.subscribers))
        for modifier_id in list(state.subscribers):
            self.execute(self._arena.modifier(modifier_id))

    def execute(self, modifier: ModifierNode) -> None:
        """Mutate the modifier's host, then cascade from its element."""
        element = self._elements.get(modifier.element)
        _log.debug("Modifier '%s' #%d modifies '%s'", modifier.name, modifier.id, element.key)
        modifier.mutate(element.host)
        self.fan_out(modifier.element)

    def _enter(self, element_index: int) -> None:
        settings = self._settings
        if settings.detect_cycles and element_index in self._path:
            path = self._keys(self._path + [element_index])
            _log.warning("Dependency cycle: %s", " -> ".join(str(k) for k in path))
            raise CycleDetected(path)
        if len(self._path) >= settings.max_cascade_depth:
            path = self._keys(self._path + [element_index])
            _log.warning("Cascade depth limit %d reached at '%s'",
                         settings.max_cascade_depth, path[-1])
            raise CascadeDepthExceeded(path, settings.max_cascade_depth)
        self._path.append(element_index)

    def _keys(self, indices: list[int]) -> tuple:
        return tuple(self._elements.get(i).key for i in indices)
