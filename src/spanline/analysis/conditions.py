from __future__ import annotations

from enum import Enum
from typing import Any


class AnalysisCondition(str, Enum):
    """Support conditions the engine can analyze."""
    SIMPLY_SUPPORTED = "simply-supported"
    TWO_SPAN_UNEQUAL = "two-span-unequal"

    def __str__(self) -> str:
        return self.value


class InvalidConditionError(ValueError):
    """Raised when no analyzer is registered for the requested condition."""

    def __init__(self, condition: Any):
        self.condition = condition
        super().__init__(f"Invalid condition: {condition!r}")
