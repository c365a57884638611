from __future__ import annotations

from spanline.analysis.conditions import AnalysisCondition, InvalidConditionError
from spanline.analysis.engine import AnalysisEngine
from spanline.analysis.sampling import Station, sample_stations
from spanline.analysis.settings import AnalysisSettings
from spanline.analysis.simply_supported import SimplySupportedAnalyzer
from spanline.analysis.two_span import SupportReactions, TwoSpanUnequalAnalyzer

__all__ = [
    "AnalysisCondition",
    "InvalidConditionError",
    "AnalysisEngine",
    "AnalysisSettings",
    "SimplySupportedAnalyzer",
    "TwoSpanUnequalAnalyzer",
    "SupportReactions",
    "Station",
    "sample_stations",
]
