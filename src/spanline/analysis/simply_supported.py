from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ..core.beam import Beam
from ..core.results import ResponseCurve
from .settings import AnalysisSettings


class SimplySupportedAnalyzer:
    """
    Closed-form response of a single simply supported span under a UDL.

    Sign convention: sagging moment and downward deflection are negative.
    Values are rounded half-to-even to `settings.decimals` for display
    (np.round, not truncation); set `decimals=None` for raw values.
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings if settings is not None else AnalysisSettings()

    def stations(self, beam: Beam) -> np.ndarray:
        return np.linspace(0.0, beam.primary_span, self.settings.divisions + 1)

    def reactions(self, beam: Beam, load: float) -> Tuple[float, float]:
        R = float(load) * beam.primary_span / 2.0
        return R, R

    def deflection_curve(self, beam: Beam, load: float) -> ResponseCurve:
        L = beam.primary_span
        EI = beam.material.EI
        j2 = beam.material.j2
        w = float(load)
        x = self.stations(beam)

        with np.errstate(divide="ignore", invalid="ignore"):
            y = -(w * x) / (24.0 * EI) * (L**3 - 2.0 * L * x**2 + x**3) * j2 * 1000.0
            y = y * self.settings.deflection_scale
        return ResponseCurve(x, self._round(y))

    def bending_moment_curve(self, beam: Beam, load: float) -> ResponseCurve:
        L = beam.primary_span
        w = float(load)
        x = self.stations(beam)
        M = -(w * x / 2.0) * (L - x)
        return ResponseCurve(x, self._round(M))

    def shear_force_curve(self, beam: Beam, load: float) -> ResponseCurve:
        L = beam.primary_span
        w = float(load)
        x = self.stations(beam)
        V = w * (L / 2.0 - x)
        return ResponseCurve(x, self._round(V))

    def _round(self, values: np.ndarray) -> np.ndarray:
        if self.settings.decimals is None:
            return values
        return np.round(values, self.settings.decimals)
