# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Exceptions raised by the dependency engine.

All errors are programming or configuration mistakes surfaced to the caller
of the setup API. Exceptions raised by user callbacks during a cascade are
never wrapped; they propagate unchanged.
"""

from __future__ import annotations


class FieldDependencyError(Exception):
    """Base class for all field dependency errors."""


class UnknownTemplate(FieldDependencyError, LookupError):
    """A State or Modifier template was requested by a name never registered.

    Attributes:
        kind: "state" or "modifier".
        name: The requested template name.
    """

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"No {kind} template registered under '{name}'")


class MissingKey(FieldDependencyError, ValueError):
    """The element key resolver returned an empty key for a host element."""

    def __init__(self, host: object) -> None:
        self.host = host
        super().__init__(f"Element key resolver returned no key for {host!r}")


class CycleDetected(FieldDependencyError, RuntimeError):
    """A cascade re-entered an element that is already propagating.

    Attributes:
        path: Element keys on the cascade path, outermost first, ending with
            the element that was re-entered.
    """

    def __init__(self, path: tuple, message: str = "") -> None:
        self.path = tuple(path)
        if not message:
            message = "Dependency cycle detected: " + " -> ".join(str(k) for k in self.path)
        super().__init__(message)


class CascadeDepthExceeded(CycleDetected):
    """A cascade grew deeper than the configured maximum depth."""

    def __init__(self, path: tuple, limit: int) -> None:
        self.limit = limit
        super().__init__(path, f"Cascade exceeded maximum depth of {limit} elements")


class UnsupportedHost(FieldDependencyError, TypeError):
    """The change notifier cannot hook into the given host element."""
