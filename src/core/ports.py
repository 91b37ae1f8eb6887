"""Ports (interfaces) used by the core dirty tracking.

Ports define the minimal contracts the renderer has to satisfy so that the
core can drive any widget toolkit without importing it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from core.field_state import FieldState


class DependentControl(Protocol):
    """A control (usually a save button) enabled only while a group is dirty."""

    disabled: bool


class FieldObserver(Protocol):
    """Callback notified after a field state recomputes its scrubbed value."""

    def __call__(self, state: FieldState) -> None:
        ...
