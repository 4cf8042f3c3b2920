# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Builtin State and Modifier templates.

These cover the common form field cases. They only use getattr/setattr on the
host, so they work with the reference Field and with any host object that
exposes ``checked``, ``value``, ``visible``, ``enabled`` and ``required``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .definition import ModifierDef, StateDef

if TYPE_CHECKING:
    from ..engine import FieldDependencies


def _is_checked(host: Any) -> bool:
    return bool(getattr(host, "checked", False))


def _is_filled(host: Any) -> bool:
    value = getattr(host, "value", None)
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def _setter(attr: str, value: Any):
    def mutate(host: Any) -> None:
        setattr(host, attr, value)

    mutate.__name__ = f"set_{attr}_{value}"
    return mutate


BUILTIN_STATES: tuple[StateDef, ...] = (
    StateDef("checked", _is_checked, "Checkbox or toggle is on"),
    StateDef("unchecked", lambda host: not _is_checked(host), "Checkbox or toggle is off"),
    StateDef("filled", _is_filled, "Value is present and not blank"),
    StateDef("empty", lambda host: not _is_filled(host), "Value is missing or blank"),
    StateDef("visible", lambda host: bool(getattr(host, "visible", True)), "Element is shown"),
    StateDef("hidden", lambda host: not getattr(host, "visible", True), "Element is hidden"),
    StateDef("enabled", lambda host: bool(getattr(host, "enabled", True)), "Element accepts input"),
    StateDef("disabled", lambda host: not getattr(host, "enabled", True), "Element is read only"),
)

BUILTIN_MODIFIERS: tuple[ModifierDef, ...] = (
    ModifierDef("show", _setter("visible", True), "Make the element visible"),
    ModifierDef("hide", _setter("visible", False), "Hide the element"),
    ModifierDef("enable", _setter("enabled", True), "Allow input"),
    ModifierDef("disable", _setter("enabled", False), "Block input"),
    ModifierDef("require", _setter("required", True), "Mark the element as required"),
    ModifierDef("unrequire", _setter("required", False), "Mark the element as optional"),
)


def get_state_by_name(name: str) -> StateDef | None:
    """Find a builtin state definition by name."""
    return next((s for s in BUILTIN_STATES if s.name == name), None)


def get_modifier_by_name(name: str) -> ModifierDef | None:
    """Find a builtin modifier definition by name."""
    return next((m for m in BUILTIN_MODIFIERS if m.name == name), None)


def register_builtins(engine: FieldDependencies) -> None:
    """Register every builtin template on ``engine``.

    Existing templates with the same names are overwritten.
    """
    for state in BUILTIN_STATES:
        engine.states.register(state)
    for modifier in BUILTIN_MODIFIERS:
        engine.modifiers.register(modifier)
