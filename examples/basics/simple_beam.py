"""
Simple Simply Supported Beam Example

A single 8 m span under a 5 kN/m uniformly distributed load.
Prints the response curves and saves the three diagrams.
"""

from pathlib import Path
from spanline import AnalysisEngine, Beam, Material
from spanline.viz import plot_beam_response

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Create gallery directory for this category
gallery_dir = PROJECT_ROOT / "gallery" / "basics"
gallery_dir.mkdir(parents=True, exist_ok=True)

# 1. Define Properties
steel = Material(name="Steel", properties={"EI": 2.0e13, "GA": 1.0e9, "j2": 1.0})

# 2. Geometry (single span: no secondary span)
beam = Beam(primary_span=8.0, secondary_span=0.0, material=steel)

# 3. Solve
engine = AnalysisEngine()
response = engine.analyze(beam, load=5.0, condition="simply-supported")

# 4. Get Results
print(f"Max Deflection: {response.deflection.equation.abs_max:.1f}")
print(f"Max Bending Moment: {response.bending_moment.equation.abs_max:.1f} kNm")
print(f"Max Shear Force: {response.shear_force.equation.abs_max:.1f} kN")

# 5. Visualize
plot_beam_response(response, save_path=str(gallery_dir / "simple_beam.svg"), show=False)

print(f"\nPlot saved to: {gallery_dir / 'simple_beam.svg'}")
