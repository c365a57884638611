from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AnalysisSettings:
    divisions: int = 10
    decimals: Optional[int] = 1
    deflection_scale: float = 1e9
    tolerance: float = 1e-6
    check_equilibrium: bool = True
    equilibrium_tol: float = 1e-9

    def validate(self) -> None:
        if self.divisions <= 0:
            raise ValueError("divisions must be positive")
        if self.decimals is not None and self.decimals < 0:
            raise ValueError("decimals must be non-negative or None")
        if self.deflection_scale <= 0.0:
            raise ValueError("deflection_scale must be positive")
        if self.tolerance <= 0.0 or self.tolerance >= 0.5:
            raise ValueError("tolerance must be in (0, 0.5)")
        if self.equilibrium_tol <= 0.0:
            raise ValueError("equilibrium_tol must be positive")
