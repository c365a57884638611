"""
Continuous beam over two unequal spans under a UDL.

The beam has one redundant reaction. The hogging moment over the interior
support follows from the three-moment equation for two simply supported end
spans,

    M1 = -w (L1^3 + L2^3) / (8 (L1 + L2))

and the three support reactions follow from statics on each span. The
response curves are piecewise about the interior support at x = L1.

All arithmetic is done in float64 with floating point errors ignored, so a
zero load or a zero span gives nan/inf samples instead of an exception.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..core.beam import Beam
from ..core.results import ResponseCurve
from .sampling import Station, sample_stations
from .settings import AnalysisSettings


@dataclass(frozen=True)
class SupportReactions:
    """Interior support moment and the three support reactions (left to right)."""
    M1: float
    R1: float
    R2: float
    R3: float

    @property
    def total(self) -> float:
        return self.R1 + self.R2 + self.R3


class TwoSpanUnequalAnalyzer:
    """
    Piecewise response of a two-span continuous beam.

    Stations come from `sample_stations`: the interior support and both
    zero-shear points (x = R1/w and x = L1 + L2 - R3/w) are always sampled
    exactly. The shear curve carries two samples at the interior support,
    one from each side of the jump.
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings if settings is not None else AnalysisSettings()

    def reactions(self, beam: Beam, load: float) -> SupportReactions:
        reactions = self._solve_reactions(beam.primary_span, beam.secondary_span, load)
        if self.settings.check_equilibrium:
            self._check_equilibrium(reactions, load, beam.primary_span, beam.secondary_span)
        return reactions

    @staticmethod
    def _solve_reactions(primary_span: float, secondary_span: float, load: float) -> SupportReactions:
        L1 = np.float64(primary_span)
        L2 = np.float64(secondary_span)
        w = np.float64(load)

        with np.errstate(all="ignore"):
            M1 = -((w * L2**3) + (w * L1**3)) / (8.0 * (L1 + L2))
            R1 = (M1 / L1) + (w * L1 / 2.0)
            R3 = (M1 / L2) + (w * L2 / 2.0)
            R2 = (w * L1) + (w * L2) - R1 - R3

        return SupportReactions(M1=float(M1), R1=float(R1), R2=float(R2), R3=float(R3))

    def zero_shear_points(self, beam: Beam, load: float, reactions: Optional[SupportReactions] = None) -> Tuple[float, float]:
        """Positions of zero shear on the left and right spans."""
        r = reactions if reactions is not None else self.reactions(beam, load)
        w = np.float64(load)
        with np.errstate(all="ignore"):
            left = np.float64(r.R1) / w
            right = np.float64(beam.total_length) - np.float64(r.R3) / w
        return float(left), float(right)

    def stations(self, beam: Beam, load: float, split_boundary: bool = False,
                 reactions: Optional[SupportReactions] = None) -> List[Station]:
        r = reactions if reactions is not None else self.reactions(beam, load)
        return list(sample_stations(
            total_length=beam.total_length,
            boundary=beam.primary_span,
            extrema=self.zero_shear_points(beam, load, r),
            divisions=self.settings.divisions,
            tolerance=self.settings.tolerance,
            split_boundary=split_boundary,
        ))

    def deflection_curve(self, beam: Beam, load: float) -> ResponseCurve:
        r = self.reactions(beam, load)
        x, right = self._positions(self.stations(beam, load, reactions=r))
        L1 = beam.primary_span
        R1, R2 = r.R1, r.R2
        w = float(load)
        EI = beam.material.EI
        j2 = beam.material.j2

        with np.errstate(all="ignore"):
            scale = np.float64(self.settings.deflection_scale) / np.float64(EI) * 1000.0 * j2
            left = (x / 24.0) * (4.0 * R1 * x**2 - w * x**3 + w * L1**3 - 4.0 * R1 * L1**2)
            right_ = (
                (R1 * x / 6.0) * (x**2 - L1**2)
                + (R2 * x / 6.0) * (x**2 - 3.0 * L1 * x + 3.0 * L1**2)
                - R2 * L1**3 / 6.0
                - (w * x / 24.0) * (x**3 - L1**3)
            )
            y = np.where(right, right_, left) * scale
        return ResponseCurve(x, y)

    def bending_moment_curve(self, beam: Beam, load: float) -> ResponseCurve:
        r = self.reactions(beam, load)
        x, right = self._positions(self.stations(beam, load, reactions=r))
        L1 = beam.primary_span
        w = float(load)

        with np.errstate(all="ignore"):
            left = -(r.R1 * x - 0.5 * w * x**2)
            right_ = -((r.R1 * x + r.R2 * (x - L1)) - 0.5 * w * x**2)
            M = np.where(right, right_, left)
        # pinned ends
        M[0] = 0.0
        M[-1] = 0.0
        return ResponseCurve(x, M)

    def shear_force_curve(self, beam: Beam, load: float) -> ResponseCurve:
        r = self.reactions(beam, load)
        x, right = self._positions(self.stations(beam, load, split_boundary=True, reactions=r))
        w = float(load)

        with np.errstate(all="ignore"):
            V = np.where(right, (r.R1 + r.R2) - w * x, r.R1 - w * x)
        return ResponseCurve(x, V)

    @staticmethod
    def _positions(stations: List[Station]) -> Tuple[np.ndarray, np.ndarray]:
        x = np.array([s.x for s in stations], dtype=float)
        right = np.array([s.side == "right" for s in stations], dtype=bool)
        return x, right

    def _check_equilibrium(self, reactions: SupportReactions, load: float,
                           primary_span: float, secondary_span: float) -> None:
        # Sum of vertical forces, and sum of moments about the left end support
        T = primary_span + secondary_span
        w = float(load)
        with np.errstate(all="ignore"):
            force_residual = reactions.total - w * T
            moment_residual = reactions.R2 * primary_span + reactions.R3 * T - 0.5 * w * T**2
            scale = max(1.0, abs(w * T), abs(0.5 * w * T**2))
            resid = float(np.hypot(force_residual, moment_residual)) / scale
        if np.isfinite(resid) and resid > self.settings.equilibrium_tol:
            warnings.warn(
                f"Two-span reactions out of equilibrium: residual {resid:.2e} "
                f"(force {force_residual:.3g}, moment about left support {moment_residual:.3g}).",
                RuntimeWarning,
            )
