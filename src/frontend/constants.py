"""Shared constants for the Textual UI."""

from __future__ import annotations

from core.month_year import MONTH_NAMES

ACCENT = "#2AABEE"
# Toggled on edited inputs; app.tcss styles it by this name.
DIRTY_CLASS = "rf-dirty"

# (prompt, value) pairs for the month select; " " is the blank choice.
MONTH_OPTIONS = [(" ", " ")] + [(name, value) for value, name in MONTH_NAMES.items()]
