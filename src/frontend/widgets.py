"""Textual widgets that render one rich field each.

Every widget holds a direct reference to its FieldState. Input events call
into the state, and the widget observes the state to keep the dirty class and
the visible value in sync.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from textual import on
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, Select, Static

from core.field_state import FieldState
from core.models import FieldKind

from .constants import DIRTY_CLASS, MONTH_OPTIONS


class RichFieldWidget(Vertical):
    """Label plus a single input, with an optional "$" prefix or "%" suffix."""

    PREFIXES = {FieldKind.MONEY: "$"}
    SUFFIXES = {FieldKind.PERCENT: "%"}
    PLACEHOLDERS = {FieldKind.DATE: "mm/dd/yy"}

    def __init__(self, state: FieldState, label: str, **kwargs: Any) -> None:
        super().__init__(classes="rich-field", **kwargs)
        self.state = state
        self._field_label = label
        self._unsubscribe: Optional[Callable[[], None]] = None

    def compose(self):
        yield Static(self._field_label, classes="form-label")
        with Horizontal(classes="input-group"):
            prefix = self.PREFIXES.get(self.state.kind)
            if prefix:
                yield Static(prefix, classes="input-group-text")
            yield Input(
                value=self.state.display_value,
                placeholder=self.PLACEHOLDERS.get(self.state.kind, ""),
                id=self.state.id,
                classes=f"rf-{self.state.kind.value}",
            )
            suffix = self.SUFFIXES.get(self.state.kind)
            if suffix:
                yield Static(suffix, classes="input-group-text")

    def on_mount(self) -> None:
        self._unsubscribe = self.state.subscribe(self._on_state_changed)
        self._sync_from_state()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()

    @on(Input.Changed)
    def _on_field_input_changed(self, event: Input.Changed) -> None:
        # Programmatic updates echo back as Changed with the current text.
        if event.value == self.state.display_value:
            return
        self.state.on_edit(event.value)

    def _on_state_changed(self, _state: FieldState) -> None:
        self._sync_from_state()

    def _sync_from_state(self) -> None:
        field_input = self.query_one(Input)
        if field_input.value != self.state.display_value:
            field_input.value = self.state.display_value
        field_input.set_class(self.state.is_dirty(), DIRTY_CLASS)


class MonthYearWidget(Vertical):
    """Label plus a month select and a year input feeding one scrubbed value."""

    def __init__(self, state: FieldState, label: str, **kwargs: Any) -> None:
        if state.kind is not FieldKind.MONTH_YEAR:
            raise ValueError(f"MonthYearWidget needs a monthyear field, got {state.kind.value}")
        super().__init__(classes="rich-field", **kwargs)
        self.state = state
        self._field_label = label
        self._unsubscribe: Optional[Callable[[], None]] = None

    def compose(self):
        yield Static(self._field_label, classes="form-label")
        with Horizontal(classes="input-group"):
            yield Select(
                MONTH_OPTIONS,
                value=self.state.month_value,
                allow_blank=False,
                id=self.state.month_id,
                classes="rf-month",
            )
            yield Input(
                value=self.state.year_value,
                placeholder="YYYY",
                type="integer",
                id=self.state.year_id,
                classes="rf-year",
            )

    def on_mount(self) -> None:
        self._unsubscribe = self.state.subscribe(self._on_state_changed)
        self._sync_from_state()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()

    @on(Select.Changed)
    def _on_month_changed(self, event: Select.Changed) -> None:
        if not isinstance(event.value, str) or event.value == self.state.month_value:
            return
        self.state.on_month_edit(event.value)

    @on(Input.Changed)
    def _on_year_changed(self, event: Input.Changed) -> None:
        if event.value == self.state.year_value:
            return
        self.state.on_year_edit(event.value)

    def _on_state_changed(self, _state: FieldState) -> None:
        self._sync_from_state()

    def _sync_from_state(self) -> None:
        month_select = self.query_one(Select)
        year_input = self.query_one(Input)
        if month_select.value != self.state.month_value:
            month_select.value = self.state.month_value
        if year_input.value != self.state.year_value:
            year_input.value = self.state.year_value
        dirty = self.state.is_dirty()
        month_select.set_class(dirty, DIRTY_CLASS)
        year_input.set_class(dirty, DIRTY_CLASS)


def build_field_widget(state: FieldState, label: str):
    if state.kind is FieldKind.MONTH_YEAR:
        return MonthYearWidget(state, label)
    return RichFieldWidget(state, label)
