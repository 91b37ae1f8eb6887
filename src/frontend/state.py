"""State container for the demo form's saved values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FormState:
    values: dict[str, Any] = field(default_factory=dict)
    last_payload: dict[str, str] | None = None
    error: str | None = None
