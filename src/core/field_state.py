"""Per-field state: display, original and scrubbed values plus dirty tracking."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any, Callable, Optional

from core.config import RenderConfig
from core.formatting import display_text, month_year_display
from core.models import CanonicalValue, FieldKind, from_server_value, parse_canonical, to_canonical
from core.month_year import apply_month, apply_year, month_year_parts
from core.ports import FieldObserver
from core.scrubbing import kind_to_tag, scrub

LOGGER = logging.getLogger(__name__)


class FieldState:
    """State of one rendered rich field.

    original_value is the canonical string loaded from the server and never
    changes. scrubbed_value is recomputed on every edit and is what gets
    submitted. The field is dirty while the two strings differ.
    """

    def __init__(
        self,
        kind: FieldKind,
        original_value: str,
        display_value: str,
        field_id: Optional[str] = None,
        name: str = "",
    ) -> None:
        self.kind = FieldKind(kind)
        self.id = field_id or f"ID-{str(uuid.uuid4()).upper()}"
        self.name = name
        self._original = original_value
        self._initial_display = display_value
        self.display_value = display_value
        self.scrubbed_value = original_value
        self.month_value, self.year_value = self._initial_parts()
        self._observers: list[FieldObserver] = []

    @classmethod
    def create(
        cls,
        kind: FieldKind,
        original: Any,
        field_id: Optional[str] = None,
        name: str = "",
        config: Optional[RenderConfig] = None,
    ) -> FieldState:
        """Build a clean state from a server value (Decimal, int, date, str or None)."""

        config = config or RenderConfig()
        kind = FieldKind(kind)
        canonical = to_canonical(kind, original)
        typed = from_server_value(kind, original)
        display = display_text(typed, config.money_decimals) if typed is not None else canonical
        return cls(kind, canonical, display, field_id=field_id, name=name)

    @property
    def original_value(self) -> str:
        return self._original

    @property
    def orig_id(self) -> str:
        return f"{self.id}-ORIG"

    @property
    def scrub_id(self) -> str:
        return f"{self.id}-SCRUB"

    @property
    def month_id(self) -> str:
        return f"MONTH-{self.id}"

    @property
    def year_id(self) -> str:
        return f"YEAR-{self.id}"

    @property
    def scrub_tag(self) -> str:
        """Tag of the single visible input; "" for MonthYear, which has two."""

        if self.kind is FieldKind.MONTH_YEAR:
            return ""
        return kind_to_tag(self.kind)

    def is_dirty(self) -> bool:
        return self.scrubbed_value != self._original

    def value(self) -> Optional[CanonicalValue]:
        """Typed view of the current scrubbed value (None when blank or unreadable)."""

        return parse_canonical(self.kind, self.scrubbed_value)

    def on_edit(self, display_value: str) -> str:
        """Record new text from the visible input and rescrub it."""

        if self.kind is FieldKind.MONTH_YEAR:
            raise ValueError("monthyear fields are edited with on_month_edit/on_year_edit")
        self.display_value = display_value
        return self._set_scrubbed(scrub(kind_to_tag(self.kind), display_value))

    def on_month_edit(self, month: str, today: Optional[date] = None) -> str:
        self._require_month_year("on_month_edit")
        self.month_value = month
        self.display_value = month_year_display(self.month_value, self.year_value)
        return self._set_scrubbed(apply_month(month, self.scrubbed_value, today))

    def on_year_edit(self, year: str, today: Optional[date] = None) -> str:
        self._require_month_year("on_year_edit")
        self.year_value = year
        self.display_value = month_year_display(self.month_value, self.year_value)
        return self._set_scrubbed(apply_year(year, self.scrubbed_value, today))

    def revert(self) -> None:
        """Put the loaded value back; the field is clean afterwards."""

        self.display_value = self._initial_display
        self.month_value, self.year_value = self._initial_parts()
        self._set_scrubbed(self._original)

    def subscribe(self, observer: FieldObserver) -> Callable[[], None]:
        """Call observer after every edit. Returns a function that unsubscribes."""

        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _set_scrubbed(self, value: str) -> str:
        was_dirty = self.is_dirty()
        self.scrubbed_value = value
        if was_dirty != self.is_dirty():
            LOGGER.debug("Field %s (%s) dirty=%s", self.name or self.id, self.kind.value, not was_dirty)
        for observer in list(self._observers):
            observer(self)
        return value

    def _initial_parts(self) -> tuple[str, str]:
        if self.kind is not FieldKind.MONTH_YEAR:
            return "", ""
        return month_year_parts(self._original)

    def _require_month_year(self, operation: str) -> None:
        if self.kind is not FieldKind.MONTH_YEAR:
            raise ValueError(f"{operation} only applies to monthyear fields, not {self.kind.value}")

    def __repr__(self) -> str:
        return (
            f"FieldState(id={self.id!r}, kind={self.kind.value!r}, display={self.display_value!r}, "
            f"original={self._original!r}, scrubbed={self.scrubbed_value!r})"
        )
