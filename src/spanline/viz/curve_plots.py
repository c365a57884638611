from __future__ import annotations

from typing import Literal, Optional

import matplotlib.pyplot as plt

from ..core.results import AnalysisResult, BeamResponse

CurveKind = Literal["deflection", "bending_moment", "shear_force"]

_LABELS = {
    "deflection": ("Deflection", "Deflection"),
    "bending_moment": ("Bending Moment", "Bending Moment (kNm)"),
    "shear_force": ("Shear Force", "Shear Force (kN)"),
}


def plot_curve(
    result: AnalysisResult,
    kind: CurveKind,
    ax: Optional[plt.Axes] = None,
    save_path: Optional[str] = None,
    show: bool = True,
) -> plt.Axes:
    """
    Plot one response curve against position along the beam.

    Duplicate stations are plotted as they are, so the shear jump at an
    interior support shows as a vertical segment.
    """
    if kind not in _LABELS:
        raise ValueError(f"kind must be one of {sorted(_LABELS)}, got '{kind}'")
    title, ylabel = _LABELS[kind]

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    curve = result.equation
    ax.plot(curve.x, curve.y, color="red", linewidth=1)
    ax.fill_between(curve.x, curve.y, 0.0, color="red", alpha=0.15)

    ax.set_title(title)
    ax.set_xlabel("Span (m)")
    ax.set_ylabel(ylabel)
    ax.grid(True, linestyle=':', alpha=0.6)
    ax.axhline(0, color='black', linewidth=0.5)

    if save_path:
        ax.figure.savefig(save_path, bbox_inches='tight', dpi=300)
    if show:
        plt.show()
    return ax


def plot_beam_response(response: BeamResponse, save_path: Optional[str] = None, show: bool = True):
    """Shear force, bending moment and deflection stacked on a shared span axis."""
    fig, (ax1, ax2, ax3) = plt.subplots(3, 1, figsize=(10, 10), sharex=True)

    plot_curve(response.shear_force, "shear_force", ax=ax1, show=False)
    plot_curve(response.bending_moment, "bending_moment", ax=ax2, show=False)
    plot_curve(response.deflection, "deflection", ax=ax3, show=False)

    # shared axis: only the bottom plot keeps its label
    ax1.set_xlabel("")
    ax2.set_xlabel("")

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, bbox_inches='tight', dpi=300)

    if show:
        plt.show()
    return fig
