from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .beam import Beam


def _frozen_array(values: Iterable[float]) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class ResponseCurve:
    """
    Ordered (x, y) samples of one response along the beam.

    `x` is non-decreasing from 0 to the total length. Two adjacent samples may
    share the same x where the response jumps (shear at an interior support).
    """
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = _frozen_array(self.x)
        y = _frozen_array(self.y)
        if x.shape != y.shape:
            raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_samples(cls, samples: Iterable[Tuple[float, float]]) -> ResponseCurve:
        pairs = list(samples)
        return cls([p[0] for p in pairs], [p[1] for p in pairs])

    def __len__(self) -> int:
        return int(self.x.size)

    def __iter__(self):
        return zip(self.x.tolist(), self.y.tolist())

    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return list(self)[idx]
        return (float(self.x[idx]), float(self.y[idx]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseCurve):
            return NotImplemented
        return (
            np.array_equal(self.x, other.x, equal_nan=True)
            and np.array_equal(self.y, other.y, equal_nan=True)
        )

    @property
    def max(self) -> float:
        return float(np.max(self.y))

    @property
    def min(self) -> float:
        return float(np.min(self.y))

    @property
    def abs_max(self) -> float:
        return float(np.max(np.abs(self.y)))

    def at(self, x_loc: float) -> float:
        """Interpolate the value at a specific position."""
        return float(np.interp(x_loc, self.x, self.y))

    def values_at(self, x_loc: float, tol: float = 1e-9) -> List[float]:
        """All sampled values at `x_loc` (two of them across a jump)."""
        mask = np.abs(self.x - x_loc) <= tol
        return self.y[mask].tolist()


@dataclass(frozen=True)
class AnalysisResult:
    """One response curve together with the beam and load that produced it."""
    beam: Beam
    load: float
    equation: ResponseCurve


@dataclass(frozen=True)
class BeamResponse:
    """Container for the deflection, bending moment and shear force results."""
    deflection: AnalysisResult
    bending_moment: AnalysisResult
    shear_force: AnalysisResult
