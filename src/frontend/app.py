"""Main Textual app for the rich fields demo form."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Footer, Static

from core.config import RenderConfig

from .constants import ACCENT
from .demo import DEMO_FIELDS
from .form import RichForm
from .modals import UnsavedChangesScreen
from .state import FormState

LOGGER = logging.getLogger(__name__)


class RichFieldsDemoApp(App):
    """Demo form with one field of every kind and a save button."""

    BINDINGS = [
        ("ctrl+s", "save_form", "Save"),
        ("ctrl+r", "revert_form", "Revert"),
        ("q", "request_quit", "Quit"),
        ("ctrl+c", "request_quit", "Quit"),
    ]

    CSS_PATH = "app.tcss"

    def __init__(
        self,
        values: Optional[dict[str, Any]] = None,
        config: Optional[RenderConfig] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.form_state = FormState(values=dict(values or {}))
        self._render_config = config or RenderConfig()

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static("edit a field to enable Save", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-status")
                    yield Static("", id="header-payload", classes="subtle")
        yield RichForm(DEMO_FIELDS, self.form_state.values, self._render_config, id="rich-form")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_header()

    @property
    def form(self) -> RichForm:
        return self.query_one("#rich-form", RichForm)

    def on_input_changed(self) -> None:
        self._refresh_header()

    def on_select_changed(self) -> None:
        self._refresh_header()

    async def on_rich_form_submitted(self, message: RichForm.Submitted) -> None:
        await self._save(message.payload)

    async def action_save_form(self) -> None:
        await self._save(self.form.payload())

    def action_revert_form(self) -> None:
        self.form.revert()
        self._refresh_header()

    def action_request_quit(self) -> None:
        dirty = self.form.group.dirty_fields()
        if dirty:
            labels = [state.name or state.id for state in dirty]
            self.push_screen(UnsavedChangesScreen(labels), self._handle_exit_choice)
        else:
            self.exit()

    def _handle_exit_choice(self, choice: str | None) -> None:
        if choice == "save":
            self._record_save(self.form.payload())
            self.exit(self.form_state.last_payload)
        elif choice == "discard":
            self.exit()
        else:
            return

    async def _save(self, payload: dict[str, str]) -> None:
        if not self.form.is_dirty():
            self.form_state.error = "Nothing to save"
            self._refresh_header()
            return
        self._record_save(payload)
        # Saved values become the originals of a fresh set of field states.
        await self.form.load(self.form_state.values)
        self._refresh_header()

    def _record_save(self, payload: dict[str, str]) -> None:
        self.form_state.last_payload = dict(payload)
        self.form_state.values = dict(payload)
        self.form_state.error = None
        LOGGER.info("Saved %s fields", len(payload))

    def _refresh_header(self) -> None:
        status = self.query_one("#header-status", Static)
        payload = self.query_one("#header-payload", Static)

        status.remove_class("status-loaded", "status-modified", "status-error")
        if self.form_state.error:
            status.update(f"form: {self.form_state.error}")
            status.add_class("status-error")
            self.form_state.error = None
        elif self.form.is_dirty():
            status.update("form: modified *")
            status.add_class("status-modified")
        else:
            status.update("form: saved" if self.form_state.last_payload else "form: loaded")
            status.add_class("status-loaded")

        if self.form_state.last_payload is not None:
            posted = ", ".join(f"{key}={value!r}" for key, value in self.form_state.last_payload.items())
            payload.update(f"last post: {posted}")

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("RICH", ACCENT),
            ("FIELDS > Demo Form", "bold"),
        )
