# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Dependency graph: elements, State/Modifier nodes and propagation."""

from .nodes import Element, ElementHandle, StateNode, ModifierNode, UNATTACHED
from .arena import NodeArena
from .elements import ElementRegistry
from .cascade import Cascade

__all__ = [
    "Element",
    "ElementHandle",
    "StateNode",
    "ModifierNode",
    "UNATTACHED",
    "NodeArena",
    "ElementRegistry",
    "Cascade",
]
