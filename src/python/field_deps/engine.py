# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""The dependency engine and relationship builder.

A FieldDependencies engine owns its template registries, its element
registry, its node arena and its settings. Engines are independent of each
other, so a test or a form can build its own graph. The module-level
functions in ``field_deps`` use a lazily created default engine.

Example:
    engine = FieldDependencies()
    engine.add_state("checked", lambda host: host.checked)
    engine.add_modifier("show", lambda host: setattr(host, "visible", True))
    engine.create_relationship(checkbox, "checked", panel, "show")

    checkbox.checked = True  # panel.visible is now True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from .graph.arena import NodeArena
from .graph.cascade import Cascade
from .graph.elements import ElementRegistry
from .graph.nodes import Element, ElementHandle, ModifierNode, StateNode
from .host.keys import attribute_key
from .host.notifiers import on_change_notifier
from .host.subscription_registry import SubscriptionRegistry
from .settings import EngineSettings
from .templates.builtin import register_builtins
from .templates.registry import ModifierRegistry, StateRegistry

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relationship:
    """Record of one create_relationship call.

    Args:
        dependency: Handle of the observed element.
        state: State node id on the dependency.
        dependent: Handle of the modified element.
        modifier: Modifier node id on the dependent.
        inherited: State ids the modifier additionally subscribed to
            through inherit_state.
    """

    dependency: ElementHandle
    state: int
    dependent: ElementHandle
    modifier: int
    inherited: tuple[int, ...] = ()


class FieldDependencies:
    """Reactive dependency graph between host elements.

    Args:
        settings: Engine settings. Defaults to EngineSettings().
        key_resolver: Element key resolver. Defaults to reading the
            ``settings.key_attribute`` attribute of the host.
        change_notifier: Hooks the engine into host change events.
            Defaults to calling ``host.on_change(callback)``.
        builtins: Register the builtin templates.
    """

    _instance: FieldDependencies | None = None

    def __init__(
        self,
        settings: EngineSettings | None = None,
        key_resolver: Callable[[Any], Hashable] | None = None,
        change_notifier: Callable[[Any, Callable[[], None]], Optional[Callable[[], None]]] | None = None,
        builtins: bool = False,
    ) -> None:
        self.settings = settings if settings is not None else EngineSettings()
        self.states = StateRegistry()
        self.modifiers = ModifierRegistry()
        self.arena = NodeArena()
        self.subscriptions = SubscriptionRegistry()
        self.cascade = Cascade(self.arena, self.settings)
        self.elements = ElementRegistry(
            on_change=self.cascade.fan_out,
            key_resolver=key_resolver or attribute_key(self.settings.key_attribute),
            change_notifier=change_notifier or on_change_notifier,
            subscriptions=self.subscriptions,
        )
        self.cascade.bind(self.elements)
        if builtins:
            register_builtins(self)

    @classmethod
    def instance(cls) -> FieldDependencies:
        """Get the default engine used by the module-level functions."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Dispose of the default engine. The next instance() call builds a new one."""
        if cls._instance is not None:
            cls._instance.dispose()
        cls._instance = None

    # Templates

    def add_state(self, name: str, predicate: Callable[[Any], bool], description: str = "") -> None:
        """Register or overwrite the State template ``name``."""
        self.states.add(name, predicate, description)

    def add_modifier(self, name: str, mutate: Callable[[Any], None], description: str = "") -> None:
        """Register or overwrite the Modifier template ``name``."""
        self.modifiers.add(name, mutate, description)

    # Collaborators

    def set_element_key_resolver(self, resolver: Callable[[Any], Hashable]) -> None:
        """Replace the element key resolver for all future resolutions."""
        self.elements.set_key_resolver(resolver)

    def set_change_notifier(
        self, notifier: Callable[[Any, Callable[[], None]], Optional[Callable[[], None]]]
    ) -> None:
        """Replace the change notifier for elements created from now on."""
        self.elements.set_change_notifier(notifier)

    # Relationships

    def create_relationship(
        self,
        dependency: Any,
        state_name: str,
        dependent: Any,
        modifier_name: str,
        inherit_state: bool = False,
    ) -> Relationship:
        """Make ``modifier_name`` on ``dependent`` react to ``state_name`` on ``dependency``.

        Missing State and Modifier instances are attached on first use; later
        calls reuse them. With ``inherit_state``, the dependent's modifier also
        listens to every State that the dependency's own modifier of the same
        name listens to.

        Args:
            dependency: Host element whose state is observed.
            state_name: Registered State template name.
            dependent: Host element that gets modified.
            modifier_name: Registered Modifier template name.
            inherit_state: Copy the upstream modifier's subscriptions.

        Returns:
            Record of the edge that was created.

        Raises:
            UnknownTemplate: If either name is not registered. Nothing is
                resolved or attached in that case.
            MissingKey: If a host element has no key. Checked before anything
                is resolved.
            UnsupportedHost: If the change notifier rejects a host. If that
                host is the dependent, a dependency element created by this
                call is discarded again.
        """
        state_def = self.states.get(state_name)
        modifier_def = self.modifiers.get(modifier_name)
        dep_key = self.elements.key_of(dependency)
        self.elements.key_of(dependent)

        dep_created = dep_key not in self.elements
        dep_element = self.elements.resolve(dependency)
        try:
            sub_element = self.elements.resolve(dependent)
        except Exception:
            if dep_created:
                self.elements.discard(dep_element)
            raise

        if dep_element.get_state(state_name) is None:
            self.arena.attach_state(dep_element, state_def.instantiate())
        if sub_element.get_modifier(modifier_name) is None:
            self.arena.attach_modifier(sub_element, modifier_def.instantiate())

        state_id = dep_element.states[state_name]
        modifier_id = sub_element.modifiers[modifier_name]
        dedupe = self.settings.dedupe_subscriptions
        self.arena.subscribe(modifier_id, state_id, dedupe=dedupe)

        inherited: list[int] = []
        if inherit_state:
            upstream_id = dep_element.get_modifier(modifier_name)
            if upstream_id is not None:
                for upstream_state in list(self.arena.modifier(upstream_id).subscriptions):
                    if self.arena.subscribe(modifier_id, upstream_state, dedupe=dedupe):
                        inherited.append(upstream_state)
                _log.debug("'%s' inherited %d state(s) of '%s' from '%s'",
                           sub_element.key, len(inherited), modifier_name, dep_element.key)

        _log.debug("Relationship %s[%s] -> %s[%s]",
                   dep_element.key, state_name, sub_element.key, modifier_name)
        return Relationship(
            dependency=dep_element.handle,
            state=state_id,
            dependent=sub_element.handle,
            modifier=modifier_id,
            inherited=tuple(inherited),
        )

    # Propagation

    def trigger(self, host: Any) -> None:
        """Fan out ``host``'s element as if its change notifier fired.

        Does nothing for hosts that were never part of a relationship.
        """
        element = self.elements.lookup(host)
        if element is not None:
            self.cascade.fan_out(element.index)

    # Introspection

    def resolve(self, host: Any) -> Element:
        """Get or create the Element for ``host``."""
        return self.elements.resolve(host)

    def element(self, host: Any) -> Element | None:
        """Get the Element for ``host`` without creating it."""
        return self.elements.lookup(host)

    def state(self, host: Any, name: str) -> StateNode | None:
        """The State instance ``name`` attached to ``host``, if any."""
        element = self.elements.lookup(host)
        if element is None or name not in element.states:
            return None
        return self.arena.state(element.states[name])

    def modifier(self, host: Any, name: str) -> ModifierNode | None:
        """The Modifier instance ``name`` attached to ``host``, if any."""
        element = self.elements.lookup(host)
        if element is None or name not in element.modifiers:
            return None
        return self.arena.modifier(element.modifiers[name])

    def active_states(self, host: Any) -> dict[str, StateNode]:
        """Currently active States of ``host`` keyed by name."""
        element = self.elements.lookup(host)
        if element is None:
            return {}
        return {state.name: state for state in self.cascade.active_states(element.index)}

    def subscribed_states(self, host: Any, modifier_name: str) -> list[StateNode]:
        """States the modifier ``modifier_name`` on ``host`` listens to, with duplicates."""
        modifier = self.modifier(host, modifier_name)
        if modifier is None:
            return []
        return self.arena.subscribed_states(modifier.id)

    def subscribers(self, host: Any, state_name: str) -> list[ModifierNode]:
        """Modifiers the state ``state_name`` on ``host`` publishes to, with duplicates."""
        state = self.state(host, state_name)
        if state is None:
            return []
        return self.arena.subscribers(state.id)

    def describe(self) -> dict[str, Any]:
        """Plain-data dump of the graph for debugging.

        Elements are keyed by their raw key, so keys of different types
        such as ``1`` and ``"1"`` stay distinct.
        """
        elements = {}
        for element in self.elements:
            elements[element.key] = {
                "states": {
                    name: [
                        {"element": self.elements.get(m.element).key, "modifier": m.name}
                        for m in self.arena.subscribers(state_id)
                    ]
                    for name, state_id in element.states.items()
                },
                "modifiers": {
                    name: [
                        {"element": self.elements.get(s.element).key, "state": s.name}
                        for s in self.arena.subscribed_states(modifier_id)
                    ]
                    for name, modifier_id in element.modifiers.items()
                },
            }
        return {
            "templates": {"states": self.states.names(), "modifiers": self.modifiers.names()},
            "elements": elements,
        }

    def dispose(self) -> int:
        """Unhook every change notifier registered by this engine.

        The graph itself stays intact and can still be driven with trigger().

        Returns:
            Number of notifier hooks released.
        """
        released = self.elements.release()
        _log.debug("Disposed engine, released %d notifier hook(s)", released)
        return released

    def __repr__(self) -> str:
        return (
            f"<FieldDependencies: {len(self.elements)} element(s), "
            f"{len(self.arena.states)} state(s), {len(self.arena.modifiers)} modifier(s)>"
        )


def get_engine() -> FieldDependencies:
    """Convenience function to get the default engine."""
    return FieldDependencies.instance()
