# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for element identity and the element registry."""

import pytest

from field_deps import FieldDependencies, MissingKey, UnsupportedHost
from field_deps.graph import ElementHandle, ElementRegistry
from field_deps.host import attribute_key, manual_notifier


class TestElementIdentity:
    """Singleton resolution by key."""

    def test_same_key_same_element(self, engine, field):
        """Two references with the same key should resolve to one Element."""
        a = engine.resolve(field("name"))
        b = engine.resolve(field("name"))
        assert a is b
        assert len(engine.elements) == 1

    def test_host_is_first_reference(self, engine, field):
        """The Element keeps the host it was created with."""
        first = field("name")
        engine.resolve(first)
        assert engine.resolve(field("name")).host is first

    def test_different_keys_different_elements(self, engine, field):
        """Distinct keys should produce distinct Elements."""
        a = engine.resolve(field("a"))
        b = engine.resolve(field("b"))
        assert a is not b
        assert a.handle != b.handle

    def test_handle(self, engine, field):
        """Handles carry the key and the arena index."""
        engine.resolve(field("a"))
        element = engine.resolve(field("b"))
        assert element.handle == ElementHandle("b", 1)
        assert engine.elements.get(element.handle) is element
        assert str(element.handle) == "b"

    def test_lookup_does_not_create(self, engine, field):
        """element() should not create Elements."""
        assert engine.element(field("ghost")) is None
        assert len(engine.elements) == 0

    def test_engines_are_independent(self, field):
        """Two engines should not share Elements."""
        f = field("shared")
        one = FieldDependencies()
        two = FieldDependencies()
        assert one.resolve(f) is not two.resolve(f)


class TestKeyResolver:
    """Key resolver configuration."""

    def test_missing_key_raises(self, engine, host):
        """A host without an id should raise MissingKey."""
        with pytest.raises(MissingKey):
            engine.resolve(host(None))

    def test_empty_key_raises(self, engine, host):
        """An empty id should raise MissingKey."""
        with pytest.raises(MissingKey):
            engine.resolve(host(""))

    def test_missing_key_is_value_error(self, engine):
        """MissingKey should be catchable as ValueError."""
        with pytest.raises(ValueError):
            engine.resolve(object())

    def test_mapping_host(self):
        """attribute_key should fall back to item access for mappings."""
        resolver = attribute_key("id")
        assert resolver({"id": "from-dict"}) == "from-dict"

    def test_custom_resolver(self, host):
        """A replaced resolver should be used for new resolutions."""
        engine = FieldDependencies(change_notifier=manual_notifier)
        engine.set_element_key_resolver(lambda h: h.name)
        a = engine.resolve(host("1", name="same"))
        b = engine.resolve(host("2", name="same"))
        assert a is b
        assert a.key == "same"

    def test_resolver_swap_keeps_existing_keys(self, host):
        """Elements resolved before a swap keep their original key."""
        engine = FieldDependencies(change_notifier=manual_notifier)
        first = engine.resolve(host("x", name="y"))
        engine.set_element_key_resolver(lambda h: h.name)
        assert first.key == "x"
        assert engine.resolve(host("x", name="y")) is not first

    def test_key_attribute_setting(self, host):
        """settings.key_attribute should drive the default resolver."""
        from field_deps import EngineSettings

        engine = FieldDependencies(
            settings=EngineSettings(key_attribute="name"),
            change_notifier=manual_notifier,
        )
        assert engine.resolve(host("1", name="by-name")).key == "by-name"


class TestChangeNotifier:
    """Hooking host change events."""

    def test_field_is_hooked_once(self, engine, field):
        """Resolving a Field should register exactly one change hook."""
        f = field("a")
        engine.resolve(f)
        engine.resolve(f)
        assert f.listener_count == 1
        assert engine.subscriptions.count("a") == 1

    def test_unsupported_host(self, engine, host):
        """The default notifier should reject hosts without on_change."""
        with pytest.raises(UnsupportedHost):
            engine.resolve(host("plain"))
        assert len(engine.elements) == 0

    def test_custom_notifier_receives_callback(self, host):
        """A custom notifier should receive a callback that fans out the element."""
        hooks = {}

        def notifier(h, callback):
            hooks[h.id] = callback

        fanned = []
        registry = ElementRegistry(on_change=fanned.append, change_notifier=notifier)
        element = registry.resolve(host("a"))
        hooks["a"]()
        assert fanned == [element.index]

    def test_dispose_unhooks(self, engine, field):
        """dispose() should remove every change hook."""
        a = field("a")
        b = field("b")
        engine.resolve(a)
        engine.resolve(b)
        assert engine.dispose() == 2
        assert a.listener_count == 0
        assert b.listener_count == 0
        assert engine.subscriptions.count() == 0

    def test_notifier_swap_applies_to_new_elements(self, engine, field, host):
        """set_change_notifier should only affect elements created later."""
        a = field("a")
        engine.resolve(a)
        engine.set_change_notifier(manual_notifier)
        engine.resolve(host("plain"))
        assert a.listener_count == 1
        assert len(engine.elements) == 2
