from __future__ import annotations

from app import main


def test_scrub_command_prints_scrubbed_value(capsys) -> None:
    main(["scrub", "number", "($1,250.00)"])
    assert capsys.readouterr().out.strip() == "-1250.00"


def test_scrub_command_merges_month_year(capsys) -> None:
    main(["scrub", "monthyear-year", "2024", "--previous", "6/1/2023"])
    assert capsys.readouterr().out.strip() == "6/1/2024"


def test_scrub_command_identity(capsys) -> None:
    main(["scrub", "none", "6/15/23"])
    assert capsys.readouterr().out.strip() == "6/15/23"


def test_settings_exposes_field_and_demo_constants() -> None:
    import settings

    assert settings.MONEY_DECIMALS == 2
    assert settings.DEMO_VALUES["ExampleMonthYear"] == "6/1/2023"
    assert not hasattr(settings, "CONFIG")
    assert not hasattr(settings, "DIRTY_CLASS")
