# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Element key resolvers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from ..errors import MissingKey


def attribute_key(name: str) -> Callable[[Any], Any]:
    """Build a resolver that reads ``name`` off a host element.

    Attribute access is tried first, then item access for mapping hosts.
    A missing or empty value resolves to None, which the element registry
    rejects with MissingKey.
    """

    def resolve(host: Any) -> Any:
        value = getattr(host, name, None)
        if value is None and isinstance(host, Mapping):
            value = host.get(name)
        return value

    resolve.__name__ = f"attribute_key_{name}"
    resolve.__qualname__ = resolve.__name__
    return resolve


default_element_key = attribute_key("id")


def require_key(resolver: Callable[[Any], Any], host: Any) -> Any:
    """Run ``resolver`` and reject empty keys."""
    key = resolver(host)
    if key is None or key == "":
        raise MissingKey(host)
    return key
