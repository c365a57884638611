from __future__ import annotations

import math

from spanline.analysis.sampling import Station, sample_stations


def _xs(stations):
    return [s.x for s in stations]


def test_uniform_walk_with_boundary_on_grid() -> None:
    stations = list(sample_stations(10.0, 6.0))
    assert _xs(stations) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    assert [s.side for s in stations] == ["left"] * 7 + ["right"] * 4


def test_walk_restarts_from_boundary() -> None:
    xs = _xs(sample_stations(10.0, 6.5))
    assert xs == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 6.5, 7.5, 8.5, 9.5, 10.0]


def test_split_boundary_emits_both_sides() -> None:
    stations = list(sample_stations(10.0, 6.0, split_boundary=True))
    at_boundary = [s for s in stations if s.x == 6.0]
    assert at_boundary == [Station(6.0, "left"), Station(6.0, "right")]
    assert len(stations) == 12


def test_extrema_are_inserted_in_order() -> None:
    xs = _xs(sample_stations(10.0, 6.0, extrema=[2.4, 8.875]))
    assert xs == [0.0, 1.0, 2.0, 2.4, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 8.875, 9.0, 10.0]


def test_extremum_replaces_coincident_grid_point() -> None:
    nearly_three = 3.0 + 1e-9
    xs = _xs(sample_stations(10.0, 6.0, extrema=[nearly_three, 7.0]))
    assert nearly_three in xs
    assert 3.0 not in xs
    assert xs.count(7.0) == 1
    assert len(xs) == 11


def test_extremum_at_support_or_end_is_not_repeated() -> None:
    xs = _xs(sample_stations(10.0, 6.0, extrema=[0.0, 6.0, 10.0]))
    assert xs == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]


def test_extrema_outside_the_beam_are_ignored() -> None:
    xs = _xs(sample_stations(10.0, 6.0, extrema=[-1.4, 12.0, math.nan, math.inf]))
    assert len(xs) == 11


def test_accumulated_rounding_does_not_duplicate_boundary() -> None:
    # 0.1 * 3 != 0.3 in floating point
    xs = _xs(sample_stations(1.0, 0.3))
    assert xs.count(0.3) == 1
    assert min(b - a for a, b in zip(xs, xs[1:])) > 0.05
    assert xs[-1] == 1.0


def test_divisions_setting() -> None:
    xs = _xs(sample_stations(8.0, 4.0, divisions=4))
    assert xs == [0.0, 2.0, 4.0, 6.0, 8.0]


def test_nan_geometry_terminates() -> None:
    stations = list(sample_stations(math.nan, math.nan, extrema=[1.0]))
    assert len(stations) == 3
    assert stations[0] == Station(0.0, "left")


def test_generator_is_lazy() -> None:
    gen = sample_stations(10.0, 6.0)
    assert next(gen) == Station(0.0, "left")
    assert next(gen) == Station(1.0, "left")
