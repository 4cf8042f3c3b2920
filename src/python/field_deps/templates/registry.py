# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Template registries for States and Modifiers.

Each engine owns one StateRegistry and one ModifierRegistry. Registering a
name twice replaces the template (last write wins); instances that were
already attached to elements keep the callback they were created with.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar, Union

from ..errors import UnknownTemplate
from ..graph.nodes import ModifierNode, StateNode
from .definition import ModifierDef, StateDef

_log = logging.getLogger(__name__)

D = TypeVar("D", StateDef, ModifierDef)


class TemplateRegistry(ABC, Generic[D]):
    """Name keyed store of template definitions.

    Subclasses set ``kind`` (used in errors and logs) and implement
    ``_make`` to build the definition from a callback.
    """

    kind: str = "template"

    def __init__(self) -> None:
        self._templates: dict[str, D] = {}

    @abstractmethod
    def _make(self, name: str, callback: Callable[[Any], Any], description: str) -> D:
        ...

    def add(self, name: str, callback: Callable[[Any], Any], description: str = "") -> D:
        """Register or overwrite a template.

        Args:
            name: Template name. Must be a non-empty string.
            callback: Predicate for states, mutation for modifiers.
            description: Optional summary.

        Returns:
            The stored definition.
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"{self.kind} name must be a non-empty string, got {name!r}")
        if not callable(callback):
            raise TypeError(f"{self.kind} '{name}' callback must be callable, got {type(callback).__name__}")

        definition = self._make(name, callback, description)
        if name in self._templates:
            _log.debug("Overwriting %s template '%s'", self.kind, name)
        else:
            _log.debug("Registered %s template '%s'", self.kind, name)
        self._templates[name] = definition
        return definition

    def register(self, definition: D) -> D:
        """Register a prebuilt definition under its own name."""
        return self.add(definition.name, _callback_of(definition), definition.description)

    def unregister(self, name: str) -> None:
        """Remove a template. Already attached instances are unaffected."""
        self._templates.pop(name, None)

    def get(self, name: str) -> D:
        """Get a template by name.

        Raises:
            UnknownTemplate: If nothing was registered under ``name``.
        """
        try:
            return self._templates[name]
        except KeyError:
            raise UnknownTemplate(self.kind, name) from None

    def instantiate(self, name: str) -> Union[StateNode, ModifierNode]:
        """Create a fresh, unattached instance of a template."""
        return self.get(name).instantiate()

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._templates)

    def clear(self) -> None:
        self._templates.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {len(self._templates)} {self.kind}(s)>"


class StateRegistry(TemplateRegistry[StateDef]):
    """Registry of named State predicates."""

    kind = "state"

    def _make(self, name: str, callback: Callable[[Any], Any], description: str) -> StateDef:
        return StateDef(name, callback, description)

    def instantiate(self, name: str) -> StateNode:
        return self.get(name).instantiate()


class ModifierRegistry(TemplateRegistry[ModifierDef]):
    """Registry of named Modifier mutations."""

    kind = "modifier"

    def _make(self, name: str, callback: Callable[[Any], Any], description: str) -> ModifierDef:
        return ModifierDef(name, callback, description)

    def instantiate(self, name: str) -> ModifierNode:
        return self.get(name).instantiate()


def _callback_of(definition: Union[StateDef, ModifierDef]) -> Callable[[Any], Any]:
    if isinstance(definition, StateDef):
        return definition.predicate
    return definition.mutate
