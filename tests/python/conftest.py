# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Shared fixtures for field_deps tests."""

import pytest

from field_deps import FieldDependencies, Field


class Host:
    """Bare host element without a change hook, driven through trigger()."""

    def __init__(self, id, **attrs):
        self.id = id
        for name, value in attrs.items():
            setattr(self, name, value)

    def __repr__(self):
        return f"<Host {self.id}>"


@pytest.fixture(autouse=True)
def reset_default_engine():
    """Give every test a fresh default engine."""
    FieldDependencies.reset_instance()
    yield
    FieldDependencies.reset_instance()


@pytest.fixture
def engine():
    """Engine with two test templates registered."""
    e = FieldDependencies()
    e.add_state("checked", lambda host: host.checked)
    e.add_modifier("show", lambda host: setattr(host, "visible", True))
    return e


@pytest.fixture
def calls():
    """List collecting (modifier, host id) pairs in execution order."""
    return []


@pytest.fixture
def recording(calls):
    """Build a mutation callback that records its invocations in ``calls``."""

    def make(label, effect=None):
        def mutate(host):
            calls.append((label, host.id))
            if effect is not None:
                effect(host)

        return mutate

    return make


@pytest.fixture
def field():
    """Factory for Field hosts."""

    def make(id, **kwargs):
        return Field(id, **kwargs)

    return make


@pytest.fixture
def host():
    """Factory for bare Host objects."""
    return Host
