"""
Station generation for piecewise response curves.

Uniform stepping alone can step over the features of a two-span beam: the
shear jump at the interior support and the moment/deflection extrema at the
zero-shear points. `sample_stations` walks the beam in uniform steps and
emits those positions exactly:

    start (x = 0)
      -> uniform steps on the left segment, with extrema inserted in order
      -> interior support (twice when the curve jumps there)
      -> uniform steps restarted from the support, with extrema inserted
      -> end (x = total length)

Two positions are treated as the same station when they are within
`tolerance * step` of each other. A uniform step that falls that close to an
extremum is replaced by the extremum.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Literal, NamedTuple

import numpy as np

Side = Literal["left", "right"]


class Station(NamedTuple):
    """Sample position and the segment whose formula applies there."""
    x: float
    side: Side


def sample_stations(
    total_length: float,
    boundary: float,
    extrema: Iterable[float] = (),
    divisions: int = 10,
    tolerance: float = 1e-6,
    split_boundary: bool = False,
) -> Iterator[Station]:
    """
    Yield the ordered stations along [0, total_length].

    Args:
        total_length: Length of the whole beam.
        boundary: Position of the interior support.
        extrema: Positions that must appear exactly (zero-shear points).
            Non-finite values and values not strictly inside a segment are
            ignored.
        divisions: Number of uniform steps over the total length.
        tolerance: Coincidence tolerance as a fraction of the step.
        split_boundary: Emit the boundary twice, once per side.
    """
    step = total_length / divisions
    eps = tolerance * step
    points = [float(e) for e in extrema if np.isfinite(e)]

    yield Station(0.0, "left")
    yield from _segment(0.0, boundary, step, eps, divisions, points, "left")

    yield Station(float(boundary), "left")
    if split_boundary:
        yield Station(float(boundary), "right")

    yield from _segment(boundary, total_length, step, eps, divisions, points, "right")
    yield Station(float(total_length), "right")


def _segment(
    start: float,
    stop: float,
    step: float,
    eps: float,
    divisions: int,
    extrema: List[float],
    side: Side,
) -> Iterator[Station]:
    inner = [e for e in extrema if start + eps < e < stop - eps]

    grid = []
    # a segment never exceeds the total length, so divisions bounds the walk
    for k in range(1, divisions + 1):
        x = start + k * step
        if not x < stop - eps:
            break
        if any(abs(x - e) <= eps for e in inner):
            continue
        grid.append(float(x))

    for x in sorted(grid + inner):
        yield Station(x, side)
