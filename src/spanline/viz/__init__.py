"""
viz - Matplotlib visualization (read-only)

Plots response curves produced by the analysis engine. Nothing here
modifies beams or results.
"""

from .curve_plots import plot_curve, plot_beam_response

__all__ = ["plot_curve", "plot_beam_response"]
