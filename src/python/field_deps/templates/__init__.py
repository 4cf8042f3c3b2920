# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""State and Modifier templates.

Usage:
    from field_deps.templates import StateRegistry, BUILTIN_STATES

    states = StateRegistry()
    states.add("checked", lambda host: host.checked)
    node = states.instantiate("checked")  # fresh, unattached
"""

from .definition import StateDef, ModifierDef
from .registry import TemplateRegistry, StateRegistry, ModifierRegistry
from .builtin import (
    BUILTIN_STATES,
    BUILTIN_MODIFIERS,
    get_state_by_name,
    get_modifier_by_name,
    register_builtins,
)

__all__ = [
    "StateDef",
    "ModifierDef",
    "TemplateRegistry",
    "StateRegistry",
    "ModifierRegistry",
    "BUILTIN_STATES",
    "BUILTIN_MODIFIERS",
    "get_state_by_name",
    "get_modifier_by_name",
    "register_builtins",
]
