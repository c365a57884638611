"""
Two-Span Continuous Beam Example

6 m + 4 m continuous beam under 10 kN/m. Shows the support reactions, the
exact breakpoints picked by the sampler and the shear jump at the interior
support.
"""

from __future__ import annotations

from pathlib import Path

from sectiony.library import i as i_section

from spanline import AnalysisCondition, AnalysisEngine, Beam, Material
from spanline.io import export_beam_response, save_beam
from spanline.viz import plot_beam_response

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def main() -> None:
    section = i_section(d=0.3, b=0.15, tf=0.012, tw=0.008, r=0.0)
    steel = Material.from_section("Steel", E=200e9, section=section, G=80e9)

    beam = Beam(primary_span=6.0, secondary_span=4.0, material=steel)
    load = 10.0
    condition = AnalysisCondition.TWO_SPAN_UNEQUAL

    engine = AnalysisEngine()
    r = engine.analyzer_for(condition).reactions(beam, load)
    print(f"M1 = {r.M1:.3f}  R1 = {r.R1:.3f}  R2 = {r.R2:.3f}  R3 = {r.R3:.3f}")

    response = engine.analyze(beam, load, condition)

    print("\nShear force:")
    for x, v in response.shear_force.equation:
        print(f"  x = {x:6.3f}   V = {v:9.3f}")

    left, right = response.shear_force.equation.values_at(beam.primary_span)
    print(f"\nJump at interior support: {right - left:.3f} (R2 = {r.R2:.3f})")

    out_dir = PROJECT_ROOT / "gallery" / "two_span"
    save_beam(beam, str(out_dir / "beam.json"))
    export_beam_response(response, str(out_dir))
    plot_beam_response(response, save_path=str(out_dir / "two_span.svg"), show=False)
    print(f"\nResults written to: {out_dir}")


if __name__ == "__main__":
    main()
