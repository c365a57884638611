from __future__ import annotations

from typing import Dict, Optional, Union

from ..core.beam import Beam
from ..core.results import AnalysisResult, BeamResponse, ResponseCurve
from .conditions import AnalysisCondition, InvalidConditionError
from .settings import AnalysisSettings
from .simply_supported import SimplySupportedAnalyzer
from .two_span import TwoSpanUnequalAnalyzer

ConditionLike = Union[AnalysisCondition, str]


class AnalysisEngine:
    """
    Dispatch a (beam, load, condition) request to the matching analyzer.

    Each analyzer provides `deflection_curve`, `bending_moment_curve` and
    `shear_force_curve`. Calls are pure: the beam is never modified and
    every call builds a fresh curve.
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings if settings is not None else AnalysisSettings()
        self.settings.validate()
        self.analyzers: Dict[AnalysisCondition, object] = {
            AnalysisCondition.SIMPLY_SUPPORTED: SimplySupportedAnalyzer(self.settings),
            AnalysisCondition.TWO_SPAN_UNEQUAL: TwoSpanUnequalAnalyzer(self.settings),
        }

    def analyzer_for(self, condition: ConditionLike):
        try:
            key = AnalysisCondition(condition)
        except (ValueError, TypeError):
            raise InvalidConditionError(condition) from None
        if key not in self.analyzers:
            raise InvalidConditionError(condition)
        return self.analyzers[key]

    def deflection(self, beam: Beam, load: float, condition: ConditionLike) -> AnalysisResult:
        analyzer = self.analyzer_for(condition)
        return self._wrap(beam, load, analyzer.deflection_curve(beam, load))

    def bending_moment(self, beam: Beam, load: float, condition: ConditionLike) -> AnalysisResult:
        analyzer = self.analyzer_for(condition)
        return self._wrap(beam, load, analyzer.bending_moment_curve(beam, load))

    def shear_force(self, beam: Beam, load: float, condition: ConditionLike) -> AnalysisResult:
        analyzer = self.analyzer_for(condition)
        return self._wrap(beam, load, analyzer.shear_force_curve(beam, load))

    def analyze(self, beam: Beam, load: float, condition: ConditionLike) -> BeamResponse:
        """All three responses for one request."""
        return BeamResponse(
            deflection=self.deflection(beam, load, condition),
            bending_moment=self.bending_moment(beam, load, condition),
            shear_force=self.shear_force(beam, load, condition),
        )

    @staticmethod
    def _wrap(beam: Beam, load: float, curve: ResponseCurve) -> AnalysisResult:
        return AnalysisResult(beam=beam, load=load, equation=curve)
