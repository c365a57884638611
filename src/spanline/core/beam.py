from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .material import Material


@dataclass(frozen=True)
class Beam:
    """
    Beam geometry along x in [0, primary_span + secondary_span].

    `secondary_span` is 0 for a single span, so `Beam(8.0, material=steel)`
    describes one 8 m span. Geometry is not validated here; zero or negative
    spans give non-finite results downstream.
    """
    primary_span: float
    secondary_span: float = 0.0
    material: Optional[Material] = None

    def __post_init__(self) -> None:
        if self.material is None:
            raise TypeError("Beam requires a material")
        object.__setattr__(self, "primary_span", float(self.primary_span))
        object.__setattr__(self, "secondary_span", float(self.secondary_span))

    @property
    def total_length(self) -> float:
        return self.primary_span + self.secondary_span
