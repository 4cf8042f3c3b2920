# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Reactive dependencies between form fields.

A State is a named predicate observed on a dependency element. A Modifier is
a named mutation applied to a dependent element. Relationships subscribe
Modifiers to States; when a dependency changes, its active States publish,
their Modifiers run, and every modified element propagates onward.

Usage:
    import field_deps

    field_deps.add_state("checked", lambda host: host.checked)
    field_deps.add_modifier("show", lambda host: setattr(host, "visible", True))
    field_deps.create_relationship(checkbox, "checked", panel, "show")

    # Or with an explicit engine
    engine = field_deps.FieldDependencies(builtins=True)
    engine.create_relationship(checkbox, "checked", panel, "show")
"""

from typing import Any, Callable, Hashable, Optional

from .engine import FieldDependencies, Relationship, get_engine
from .errors import (
    FieldDependencyError,
    UnknownTemplate,
    MissingKey,
    CycleDetected,
    CascadeDepthExceeded,
    UnsupportedHost,
)
from .fields import Field
from .settings import EngineSettings
from .templates import StateDef, ModifierDef, register_builtins

__version__ = "0.1.0"


def add_state(name: str, predicate: Callable[[Any], bool]) -> None:
    """Register a State template on the default engine."""
    get_engine().add_state(name, predicate)


def add_modifier(name: str, mutate: Callable[[Any], None]) -> None:
    """Register a Modifier template on the default engine."""
    get_engine().add_modifier(name, mutate)


def create_relationship(
    dependency: Any,
    state_name: str,
    dependent: Any,
    modifier_name: str,
    inherit_state: bool = False,
) -> Relationship:
    """Create a relationship on the default engine."""
    return get_engine().create_relationship(
        dependency, state_name, dependent, modifier_name, inherit_state
    )


def set_element_key_resolver(resolver: Callable[[Any], Hashable]) -> None:
    """Replace the element key resolver of the default engine."""
    get_engine().set_element_key_resolver(resolver)


def set_change_notifier(
    notifier: Callable[[Any, Callable[[], None]], Optional[Callable[[], None]]]
) -> None:
    """Replace the change notifier of the default engine."""
    get_engine().set_change_notifier(notifier)


def trigger(host: Any) -> None:
    """Propagate ``host`` on the default engine."""
    get_engine().trigger(host)


__all__ = [
    # Engine
    "FieldDependencies",
    "Relationship",
    "EngineSettings",
    "get_engine",
    # Module-level API
    "add_state",
    "add_modifier",
    "create_relationship",
    "set_element_key_resolver",
    "set_change_notifier",
    "trigger",
    # Templates
    "StateDef",
    "ModifierDef",
    "register_builtins",
    # Host
    "Field",
    # Errors
    "FieldDependencyError",
    "UnknownTemplate",
    "MissingKey",
    "CycleDetected",
    "CascadeDepthExceeded",
    "UnsupportedHost",
]
