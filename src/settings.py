"""Static configuration for richfields.

All user-editable settings (field display, demo values, logging) live in a
single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

# RICHFIELDS_CONFIG may point at another file, e.g. from a .env next to the app.
CONFIG_PATH = os.getenv("RICHFIELDS_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Field display settings shared by every rendered field.
# - MONEY_DECIMALS: fixed decimals for money display (4 for fractional cents)
_fields = _CONFIG.get("fields", {})
MONEY_DECIMALS = int(_fields.get("money_decimals", 2))

# Values the demo form loads as if they came from the server.
DEMO_VALUES = _CONFIG.get("demo", {})

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
