"""Field groups and the dirty aggregate that drives a form's save control."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional

from core.field_state import FieldState
from core.ports import DependentControl

LOGGER = logging.getLogger(__name__)


class FieldGroup:
    """Ordered set of field states that belong to one form.

    The group only enumerates its members; the renderer owns them.
    """

    def __init__(self, fields: Optional[Iterable[FieldState]] = None) -> None:
        self._fields: dict[str, FieldState] = {}
        for state in fields or []:
            self.add(state)

    def add(self, state: FieldState) -> FieldState:
        key = state.name or state.id
        if key in self._fields:
            raise ValueError(f"Duplicate field in group: {key}")
        self._fields[key] = state
        return state

    def get(self, key: str) -> FieldState:
        return self._fields[key]

    def __iter__(self) -> Iterator[FieldState]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def dirty_fields(self) -> list[FieldState]:
        return [state for state in self if state.is_dirty()]

    def payload(self) -> dict[str, str]:
        """Form post body: one scrubbed string per field, keyed by field name."""

        return {key: state.scrubbed_value for key, state in self._fields.items()}


def any_dirty(fields: Iterable[FieldState]) -> bool:
    return any(state.is_dirty() for state in fields)


def refresh_dependent_control(fields: Iterable[FieldState], control: DependentControl) -> bool:
    """Enable control iff any field is dirty. Returns the enabled state."""

    enabled = any_dirty(fields)
    control.disabled = not enabled
    return enabled


def bind_dependent_control(group: FieldGroup, control: DependentControl) -> Callable[[], None]:
    """Refresh control now and after every edit of any member.

    Returns a function that removes the registrations again.
    """

    def _on_edit(_state: FieldState) -> None:
        refresh_dependent_control(group, control)

    unsubscribers = [state.subscribe(_on_edit) for state in group]
    refresh_dependent_control(group, control)
    LOGGER.debug("Bound dependent control to %s fields", len(unsubscribers))

    def unbind() -> None:
        for unsubscribe in unsubscribers:
            unsubscribe()

    return unbind
