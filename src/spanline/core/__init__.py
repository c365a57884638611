from .material import Material
from .beam import Beam
from .results import ResponseCurve, AnalysisResult, BeamResponse

__all__ = [
    "Material", "Beam",
    "ResponseCurve", "AnalysisResult", "BeamResponse",
]
