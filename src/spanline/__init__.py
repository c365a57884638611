"""
spanline - Response curves for uniformly loaded beams.

Deflection, bending moment and shear force along:
- a single simply supported span
- a continuous beam over two unequal spans (one redundant reaction)

The interior support and the zero-shear points of the two-span beam are
always sampled exactly.
"""

from spanline.analysis import (
    AnalysisCondition,
    AnalysisEngine,
    AnalysisSettings,
    InvalidConditionError,
    SimplySupportedAnalyzer,
    SupportReactions,
    TwoSpanUnequalAnalyzer,
)
from spanline.core import AnalysisResult, Beam, BeamResponse, Material, ResponseCurve

__all__ = [
    "Material",
    "Beam",
    "ResponseCurve",
    "AnalysisResult",
    "BeamResponse",
    "AnalysisCondition",
    "AnalysisEngine",
    "AnalysisSettings",
    "InvalidConditionError",
    "SimplySupportedAnalyzer",
    "TwoSpanUnequalAnalyzer",
    "SupportReactions",
]
