from __future__ import annotations

import csv
from pathlib import Path

from spanline.core.results import AnalysisResult, BeamResponse


def export_response_curve(result: AnalysisResult, path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["x", "y"])
        for x, y in result.equation:
            writer.writerow([x, y])


def export_beam_response(response: BeamResponse, directory: str) -> None:
    """Write one CSV per response; the curves do not share stations."""
    out = Path(directory)
    export_response_curve(response.deflection, str(out / "deflection.csv"))
    export_response_curve(response.bending_moment, str(out / "bending_moment.csv"))
    export_response_curve(response.shear_force, str(out / "shear_force.csv"))
