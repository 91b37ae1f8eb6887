"""Field definitions for the demo form."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import FieldKind


@dataclass(frozen=True)
class FieldDefinition:
    """One form field: posted name, visible label and kind."""

    name: str
    label: str
    kind: FieldKind


DEMO_FIELDS = [
    FieldDefinition("ExamplePercent", "Example Percent Field", FieldKind.PERCENT),
    FieldDefinition("ExampleMoney", "Example Money (2-digit cents)", FieldKind.MONEY),
    FieldDefinition("ExampleInt", "Example Int (16 bit)", FieldKind.INT),
    FieldDefinition("ExampleDate", "Example Date", FieldKind.DATE),
    FieldDefinition("ExampleMonthYear", "Example Month/Year", FieldKind.MONTH_YEAR),
    FieldDefinition("ExampleText", "Example Text", FieldKind.TEXT),
]
