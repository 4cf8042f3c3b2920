# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""In-memory host element.

Field is a minimal stand-in for a form control. It satisfies the
HostElement protocol, so it works with the default key resolver and change
notifier, and exposes the attributes the builtin templates read and write.

Inputs (``value``, ``checked``) are backed by signals. Every input change
also bumps one revision signal, which is what ``on_change`` listens to, so a
Batch that changes several inputs of one field raises a single notification. Presentation attributes (``visible``,
``enabled``, ``required``) are plain attributes and never notify, so
modifiers can set them without re-entering the cascade.

Example:
    agree = Field("agree")
    details = Field("details", visible=False)
    engine.create_relationship(agree, "checked", details, "show")
    agree.checked = True
    assert details.visible
"""

from __future__ import annotations

from typing import Any, Callable

from .host.signals import Signal


class Field:
    """A form field with observable inputs."""

    def __init__(
        self,
        id: str,
        value: Any = None,
        checked: bool = False,
        visible: bool = True,
        enabled: bool = True,
        required: bool = False,
    ) -> None:
        self.id = id
        self._value = Signal(value, f"{id}.value")
        self._checked = Signal(checked, f"{id}.checked")
        self._revision = Signal(0, f"{id}.revision")
        self.visible = visible
        self.enabled = enabled
        self.required = required

    def _set_input(self, signal: Signal, new_value: Any) -> None:
        if signal.value == new_value:
            return
        signal.value = new_value
        self._revision.value += 1

    @property
    def value(self) -> Any:
        return self._value.value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._set_input(self._value, new_value)

    @property
    def checked(self) -> bool:
        return self._checked.value

    @checked.setter
    def checked(self, new_value: bool) -> None:
        self._set_input(self._checked, bool(new_value))

    def on_change(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call ``callback`` whenever an input changes or ``touch()`` is called.

        Inside a Batch the callback runs once for the whole field, however
        many inputs changed.

        Returns:
            Unsubscribe function.
        """

        def forward(_: object) -> None:
            callback()

        return self._revision.subscribe(forward)

    def touch(self) -> None:
        """Raise a change notification without changing any input."""
        self._revision.value += 1

    @property
    def listener_count(self) -> int:
        """Number of on_change callbacks currently hooked."""
        return self._revision.subscriber_count

    def __repr__(self) -> str:
        return (
            f"<Field '{self.id}': value={self.value!r} checked={self.checked} "
            f"visible={self.visible} enabled={self.enabled} required={self.required}>"
        )
