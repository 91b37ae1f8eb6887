"""Form container that owns the field group and its save button."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from textual import on
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Button

from core.config import RenderConfig
from core.field_state import FieldState
from core.form import FieldGroup, bind_dependent_control

from .demo import FieldDefinition
from .widgets import build_field_widget


class RichForm(VerticalScroll):
    """Renders one widget per field and enables Save only while dirty."""

    class Submitted(Message):
        """Posted when Save is pressed; carries the scrubbed payload."""

        def __init__(self, payload: dict[str, str]) -> None:
            super().__init__()
            self.payload = payload

    def __init__(
        self,
        definitions: Iterable[FieldDefinition],
        values: Optional[dict[str, Any]] = None,
        config: Optional[RenderConfig] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._definitions = list(definitions)
        self._render_config = config or RenderConfig()
        self._unbind: Optional[Callable[[], None]] = None
        self.group = self._build_group(values or {})

    def compose(self):
        for definition in self._definitions:
            state = self.group.get(definition.name)
            yield build_field_widget(state, definition.label)
        with Horizontal(id="form-actions"):
            yield Button("Save", id="save-btn", variant="success", disabled=True)
            yield Button("Revert", id="revert-btn")

    def on_mount(self) -> None:
        self._bind_save_button()

    def payload(self) -> dict[str, str]:
        return self.group.payload()

    def is_dirty(self) -> bool:
        return bool(self.group.dirty_fields())

    def revert(self) -> None:
        for state in self.group.dirty_fields():
            state.revert()

    async def load(self, values: dict[str, Any]) -> None:
        """Replace every field with a fresh, clean state built from values."""

        if self._unbind:
            self._unbind()
        self.group = self._build_group(values)
        await self.recompose()
        self._bind_save_button()

    @on(Button.Pressed, "#save-btn")
    def _on_save_pressed(self) -> None:
        self.post_message(self.Submitted(self.payload()))

    @on(Button.Pressed, "#revert-btn")
    def _on_revert_pressed(self) -> None:
        self.revert()

    def _bind_save_button(self) -> None:
        self._unbind = bind_dependent_control(self.group, self.query_one("#save-btn", Button))

    def _build_group(self, values: dict[str, Any]) -> FieldGroup:
        group = FieldGroup()
        for definition in self._definitions:
            group.add(
                FieldState.create(
                    definition.kind,
                    values.get(definition.name),
                    name=definition.name,
                    config=self._render_config,
                )
            )
        return group
