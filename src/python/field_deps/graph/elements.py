# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Element registry.

The ElementRegistry maps host elements to singleton Element records. Two
references to the same logical field, from any number of call sites, resolve
to the identical Element, which is what lets relationships share States
(fan-out) and Modifiers (fan-in).

Example:
    registry = ElementRegistry(on_change=cascade.fan_out)
    a = registry.resolve(checkbox)
    b = registry.resolve(same_checkbox_from_elsewhere)
    assert a is b
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Iterator, Optional

from ..host.keys import default_element_key, require_key
from ..host.notifiers import on_change_notifier
from ..host.subscription_registry import SubscriptionRegistry
from .nodes import Element, ElementHandle

_log = logging.getLogger(__name__)


class ElementRegistry:
    """Registry of Element records, one per resolved key.

    Args:
        on_change: Called with the Element's index whenever the host's change
            notifier fires.
        key_resolver: Produces the identity key of a host element.
        change_notifier: Hooks a callback into the host's change events.
        subscriptions: Where notifier unsubscribe handles are filed, by key.
    """

    def __init__(
        self,
        on_change: Callable[[int], None],
        key_resolver: Callable[[Any], Hashable] = default_element_key,
        change_notifier: Callable[[Any, Callable[[], None]], Optional[Callable[[], None]]] = on_change_notifier,
        subscriptions: SubscriptionRegistry | None = None,
    ) -> None:
        self._on_change = on_change
        self._key_resolver = key_resolver
        self._change_notifier = change_notifier
        self._subscriptions = subscriptions if subscriptions is not None else SubscriptionRegistry()
        self._elements: list[Element] = []
        self._by_key: dict[Hashable, int] = {}

    @property
    def key_resolver(self) -> Callable[[Any], Hashable]:
        return self._key_resolver

    def set_key_resolver(self, resolver: Callable[[Any], Hashable]) -> None:
        """Replace the key resolver for future resolutions.

        Elements already resolved keep the key they were created with.
        """
        self._key_resolver = resolver

    def set_change_notifier(
        self, notifier: Callable[[Any, Callable[[], None]], Optional[Callable[[], None]]]
    ) -> None:
        """Replace the change notifier used for elements created from now on."""
        self._change_notifier = notifier

    def key_of(self, host: Any) -> Hashable:
        """Resolve the key of ``host``.

        Raises:
            MissingKey: If the resolver returns None or an empty string.
        """
        return require_key(self._key_resolver, host)

    def resolve(self, host: Any) -> Element:
        """Get or create the singleton Element for ``host``."""
        key = self.key_of(host)
        index = self._by_key.get(key)
        if index is not None:
            return self._elements[index]

        element = Element(ElementHandle(key, len(self._elements)), host)
        self._hook(element)
        self._elements.append(element)
        self._by_key[key] = element.index
        _log.debug("Created element '%s' #%d", key, element.index)
        return element

    def _hook(self, element: Element) -> None:
        index = element.index

        def changed() -> None:
            self._on_change(index)

        unsubscribe = self._change_notifier(element.host, changed)
        if unsubscribe is not None:
            self._subscriptions.register(element.key, unsubscribe)

    def lookup(self, host: Any) -> Element | None:
        """Get the Element for ``host`` without creating it."""
        index = self._by_key.get(self.key_of(host))
        if index is None:
            return None
        return self._elements[index]

    def get(self, handle: ElementHandle | int) -> Element:
        """Get an Element by handle or index."""
        index = handle.index if isinstance(handle, ElementHandle) else handle
        return self._elements[index]

    def discard(self, element: Element) -> None:
        """Forget the most recently created Element and unhook its notifier.

        Used to roll back a relationship whose setup failed after this
        element was created. Only the last Element can be discarded, so the
        indices of all others stay valid.
        """
        if not self._elements or self._elements[-1] is not element:
            raise RuntimeError(f"Element '{element.key}' is not the most recently created one")
        self._elements.pop()
        del self._by_key[element.key]
        self._subscriptions.unsubscribe_all(element.key)
        _log.debug("Discarded element '%s' #%d", element.key, element.index)

    def release(self) -> int:
        """Unhook every change notifier. Returns the number released."""
        return self._subscriptions.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return len(self._elements)
