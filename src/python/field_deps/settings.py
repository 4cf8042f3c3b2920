# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Engine configuration."""

from __future__ import annotations

from .props import BoolProperty, IntProperty, PropertyGroup, StringProperty


class EngineSettings(PropertyGroup):
    """Settings for one FieldDependencies engine.

    Attributes:
        max_cascade_depth: Longest chain of elements a single trigger may
            propagate through before CascadeDepthExceeded is raised.
        detect_cycles: Raise CycleDetected when a cascade re-enters an element
            that is already propagating.
        dedupe_subscriptions: Skip subscribing a modifier to a state it is
            already subscribed to. Off by default, so repeated
            create_relationship calls add duplicate edges.
        key_attribute: Host attribute read by the default element key resolver.
    """

    max_cascade_depth = IntProperty(default=64, min=1, max=10000, name="Max Cascade Depth")
    detect_cycles = BoolProperty(default=True, name="Detect Cycles")
    dedupe_subscriptions = BoolProperty(default=False, name="Dedupe Subscriptions")
    key_attribute = StringProperty(default="id", maxlen=128, name="Key Attribute")
