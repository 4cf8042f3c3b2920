# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for State/Modifier templates and their registries."""

import dataclasses

import pytest

from field_deps.errors import UnknownTemplate
from field_deps.graph.nodes import UNATTACHED
from field_deps.templates.registry import TemplateRegistry
from field_deps.templates import (
    BUILTIN_MODIFIERS,
    BUILTIN_STATES,
    ModifierDef,
    ModifierRegistry,
    StateDef,
    StateRegistry,
    get_modifier_by_name,
    get_state_by_name,
)


class TestDefinitions:
    """Tests for StateDef and ModifierDef."""

    def test_state_def_is_frozen(self):
        """StateDef should be immutable."""
        d = StateDef("on", lambda h: True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.name = "off"

    def test_instantiate_returns_fresh_node(self):
        """Each instantiate() call should return a new unattached node."""
        d = StateDef("on", lambda h: True)
        a = d.instantiate()
        b = d.instantiate()
        assert a is not b
        assert a.predicate is d.predicate
        assert a.id == UNATTACHED
        assert a.element == UNATTACHED
        assert a.subscribers == []
        assert a.subscribers is not b.subscribers

    def test_modifier_instantiate(self):
        """ModifierDef.instantiate() should carry the mutation."""
        mutate = lambda h: None
        node = ModifierDef("noop", mutate).instantiate()
        assert node.name == "noop"
        assert node.mutate is mutate
        assert not node.attached


class TestStateRegistry:
    """Tests for StateRegistry."""

    def test_add_and_get(self):
        """Registered templates should be retrievable by name."""
        reg = StateRegistry()
        predicate = lambda h: True
        reg.add("on", predicate, "always on")
        d = reg.get("on")
        assert d.name == "on"
        assert d.predicate is predicate
        assert d.description == "always on"
        assert "on" in reg
        assert len(reg) == 1

    def test_unknown_name_raises(self):
        """instantiate() of an unknown name should raise UnknownTemplate."""
        reg = StateRegistry()
        with pytest.raises(UnknownTemplate, match="missing") as info:
            reg.instantiate("missing")
        assert info.value.kind == "state"
        assert info.value.name == "missing"

    def test_unknown_template_is_lookup_error(self):
        """UnknownTemplate should be catchable as LookupError."""
        with pytest.raises(LookupError):
            ModifierRegistry().get("nope")

    def test_last_write_wins(self):
        """Re-registering a name should replace the template."""
        reg = StateRegistry()
        reg.add("flag", lambda h: False)
        reg.add("flag", lambda h: True)
        assert reg.instantiate("flag").is_active(object())
        assert len(reg) == 1

    def test_overwrite_keeps_existing_instances(self):
        """Instances created before an overwrite keep their old callback."""
        reg = StateRegistry()
        reg.add("flag", lambda h: False)
        before = reg.instantiate("flag")
        reg.add("flag", lambda h: True)
        assert not before.is_active(object())

    def test_rejects_empty_name(self):
        """Empty names should be rejected."""
        with pytest.raises(ValueError):
            StateRegistry().add("", lambda h: True)

    def test_rejects_non_callable(self):
        """Non-callable callbacks should be rejected."""
        with pytest.raises(TypeError):
            StateRegistry().add("bad", True)

    def test_unregister(self):
        """unregister() should remove the template."""
        reg = StateRegistry()
        reg.add("on", lambda h: True)
        reg.unregister("on")
        assert "on" not in reg
        reg.unregister("on")

    def test_names_in_registration_order(self):
        """names() should keep registration order."""
        reg = ModifierRegistry()
        reg.add("b", lambda h: None)
        reg.add("a", lambda h: None)
        assert reg.names() == ["b", "a"]

    def test_register_definition(self):
        """register() should store a prebuilt definition."""
        reg = ModifierRegistry()
        d = ModifierDef("hide", lambda h: None, "hide it")
        stored = reg.register(d)
        assert stored == d
        assert reg.get("hide").description == "hide it"

    def test_base_registry_is_abstract(self):
        """The shared base class cannot be used without a concrete _make."""
        with pytest.raises(TypeError):
            TemplateRegistry()


class TestBuiltins:
    """Tests for builtin templates."""

    def test_names_are_unique(self):
        """Builtin names should not collide within a kind."""
        state_names = [s.name for s in BUILTIN_STATES]
        modifier_names = [m.name for m in BUILTIN_MODIFIERS]
        assert len(state_names) == len(set(state_names))
        assert len(modifier_names) == len(set(modifier_names))

    @pytest.mark.parametrize(
        "value, filled",
        [(None, False), ("", False), ("   ", False), ("x", True), (0, True)],
    )
    def test_filled_and_empty(self, host, value, filled):
        """filled/empty should treat None and blank strings as empty."""
        h = host("f", value=value)
        assert get_state_by_name("filled").predicate(h) is filled
        assert get_state_by_name("empty").predicate(h) is not filled

    def test_checked_defaults_to_false(self, host):
        """checked should be inactive for hosts without a checked attribute."""
        assert get_state_by_name("checked").predicate(host("x")) is False
        assert get_state_by_name("unchecked").predicate(host("x")) is True

    def test_show_and_hide(self, host):
        """show/hide should set visible."""
        h = host("panel", visible=False)
        get_modifier_by_name("show").mutate(h)
        assert h.visible is True
        get_modifier_by_name("hide").mutate(h)
        assert h.visible is False

    def test_require(self, host):
        """require/unrequire should set required."""
        h = host("email")
        get_modifier_by_name("require").mutate(h)
        assert h.required is True
        get_modifier_by_name("unrequire").mutate(h)
        assert h.required is False

    def test_unknown_builtin(self):
        """Lookup of an unknown builtin should return None."""
        assert get_state_by_name("nope") is None
        assert get_modifier_by_name("nope") is None
