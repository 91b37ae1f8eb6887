from __future__ import annotations

import asyncio
from pathlib import Path

from textual.widgets import Button, Input, Select

from frontend.app import RichFieldsDemoApp
from frontend.constants import DIRTY_CLASS

VALUES = {
    "ExampleMoney": "1500.00",
    "ExampleMonthYear": "6/1/2023",
    "ExampleText": "hi",
}


def test_save_button_follows_dirty_state() -> None:
    async def scenario() -> None:
        app = RichFieldsDemoApp(VALUES)
        async with app.run_test() as pilot:
            await pilot.pause()
            money = app.form.group.get("ExampleMoney")
            money_input = app.query_one(f"#{money.id}", Input)
            assert money_input.value == "1,500.00"
            assert app.query_one("#save-btn", Button).disabled

            money_input.value = "1,600.00"
            await pilot.pause()
            assert money.scrubbed_value == "1600.00"
            assert money_input.has_class(DIRTY_CLASS)
            assert not app.query_one("#save-btn", Button).disabled

            money_input.value = "$1,500.00"
            await pilot.pause()
            assert not money.is_dirty()
            assert not money_input.has_class(DIRTY_CLASS)
            assert app.query_one("#save-btn", Button).disabled

    asyncio.run(scenario())


def test_year_edit_keeps_month_and_save_resets_originals() -> None:
    async def scenario() -> None:
        app = RichFieldsDemoApp(VALUES)
        async with app.run_test() as pilot:
            await pilot.pause()
            month_year = app.form.group.get("ExampleMonthYear")
            app.query_one(f"#{month_year.year_id}", Input).value = "2024"
            await pilot.pause()
            assert month_year.scrubbed_value == "6/1/2024"
            assert not app.query_one("#save-btn", Button).disabled

            await app.action_save_form()
            await pilot.pause()

            assert app.form_state.last_payload is not None
            assert app.form_state.last_payload["ExampleMonthYear"] == "6/1/2024"
            assert app.form_state.last_payload["ExampleMoney"] == "1500.00"
            reloaded = app.form.group.get("ExampleMonthYear")
            assert reloaded is not month_year
            assert reloaded.original_value == "6/1/2024"
            assert not reloaded.is_dirty()
            assert app.query_one("#save-btn", Button).disabled

    asyncio.run(scenario())


def test_typing_year_key_by_key_keeps_month() -> None:
    async def scenario() -> None:
        app = RichFieldsDemoApp(VALUES)
        async with app.run_test() as pilot:
            await pilot.pause()
            month_year = app.form.group.get("ExampleMonthYear")
            year_input = app.query_one(f"#{month_year.year_id}", Input)
            month_select = app.query_one(f"#{month_year.month_id}", Select)
            year_input.focus()
            await pilot.pause()
            await pilot.press("end")

            # "2023" -> "202" -> "20" -> "2", then back up to "2024".
            for key in ["backspace", "backspace", "backspace", "0", "2", "4"]:
                await pilot.press(key)
                await pilot.pause()
                assert month_select.value == "6"
                assert month_year.scrubbed_value == f"6/1/{year_input.value}"

            assert year_input.value == "2024"
            assert month_year.scrubbed_value == "6/1/2024"

    asyncio.run(scenario())


def test_stylesheet_styles_the_dirty_class() -> None:
    stylesheet = Path(__file__).resolve().parents[1] / "src" / "frontend" / "app.tcss"
    assert f".{DIRTY_CLASS} {{" in stylesheet.read_text(encoding="utf-8")
