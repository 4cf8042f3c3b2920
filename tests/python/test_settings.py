# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for engine settings and the typed property system."""

import pytest

from field_deps.props import BoolProperty, IntProperty, PropertyGroup, StringProperty
from field_deps.settings import EngineSettings


class DemoSettings(PropertyGroup):
    count = IntProperty(default=5, min=0, max=10)
    flag = BoolProperty(default=True)
    label = StringProperty(default="x", maxlen=3)


class TestPropertyGroup:
    """Tests for PropertyGroup."""

    def test_defaults(self):
        """Properties should start at their defaults."""
        s = DemoSettings()
        assert s.count == 5
        assert s.flag is True
        assert s.label == "x"

    def test_overrides(self):
        """Constructor keywords should override defaults."""
        s = DemoSettings(count=7, flag=False)
        assert s.count == 7
        assert s.flag is False

    def test_int_clamped(self):
        """IntProperty should clamp to its bounds."""
        s = DemoSettings()
        s.count = 50
        assert s.count == 10
        s.count = -3
        assert s.count == 0

    def test_coercion(self):
        """Values should be coerced to the property type."""
        s = DemoSettings(count="4", flag=0)
        assert s.count == 4
        assert s.flag is False

    def test_string_truncated(self):
        """StringProperty should respect maxlen."""
        s = DemoSettings(label="abcdef")
        assert s.label == "abc"

    def test_unknown_override_rejected(self):
        """Unknown keywords should raise AttributeError."""
        with pytest.raises(AttributeError, match="nope"):
            DemoSettings(nope=1)

    def test_unknown_attribute_rejected(self):
        """Assigning an undeclared property should raise."""
        s = DemoSettings()
        with pytest.raises(AttributeError):
            s.typo = 1

    def test_instances_independent(self):
        """Two groups should not share values."""
        a = DemoSettings()
        b = DemoSettings()
        a.count = 1
        assert b.count == 5

    def test_copy_and_as_dict(self):
        """copy() should produce an equal but independent group."""
        a = DemoSettings(count=3)
        b = a.copy()
        b.count = 9
        assert a.as_dict() == {"count": 3, "flag": True, "label": "x"}
        assert b.count == 9

    def test_class_access_returns_descriptor(self):
        """Accessing a property on the class should return the descriptor."""
        assert isinstance(DemoSettings.count, IntProperty)
        assert set(DemoSettings().get_all_properties()) == {"count", "flag", "label"}


class TestEngineSettings:
    """Tests for EngineSettings."""

    def test_defaults(self):
        """Defaults match the documented behaviour."""
        s = EngineSettings()
        assert s.max_cascade_depth == 64
        assert s.detect_cycles is True
        assert s.dedupe_subscriptions is False
        assert s.key_attribute == "id"

    def test_depth_at_least_one(self):
        """max_cascade_depth should never drop below one."""
        assert EngineSettings(max_cascade_depth=0).max_cascade_depth == 1

    def test_repr(self):
        """repr should list the values."""
        assert "max_cascade_depth=64" in repr(EngineSettings())
