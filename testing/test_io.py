from __future__ import annotations

import csv
import json

import pytest

from spanline import AnalysisEngine, Beam, Material
from spanline.io import export_beam_response, export_response_curve, load_beam, save_beam


@pytest.fixture
def beam() -> Beam:
    return Beam(6.0, 4.0, Material("Steel", {"EI": 2.0e13, "j2": 1.0}))


def test_beam_json_round_trip(tmp_path, beam) -> None:
    path = tmp_path / "defs" / "beam.json"
    save_beam(beam, str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["schema"] == "0.1.0"
    assert data["material"]["properties"] == {"EI": 2.0e13, "j2": 1.0}

    loaded = load_beam(str(path))
    assert loaded == beam


def test_load_beam_defaults_secondary_span(tmp_path) -> None:
    path = tmp_path / "single.json"
    path.write_text(json.dumps({"primary_span": 8, "material": {"name": "Timber", "properties": {"EI": 5.0, "j2": 1.0}}}))

    beam = load_beam(str(path))
    assert beam.secondary_span == 0.0
    assert beam.material.EI == 5.0


@pytest.mark.parametrize(
    "document",
    [
        {"material": {"name": "Steel"}},
        {"primary_span": 6.0},
        {"primary_span": 6.0, "material": {"properties": {"EI": 1.0}}},
    ],
)
def test_load_beam_rejects_incomplete_documents(tmp_path, document) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(document))
    with pytest.raises(ValueError):
        load_beam(str(path))


def test_export_response_curve(tmp_path, beam) -> None:
    result = AnalysisEngine().shear_force(beam, 10.0, "two-span-unequal")
    path = tmp_path / "out" / "shear.csv"
    export_response_curve(result, str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["x", "y"]
    assert len(rows) == len(result.equation) + 1
    assert [float(v) for v in rows[1]] == [0.0, result.equation.y[0]]


def test_export_beam_response(tmp_path, beam) -> None:
    response = AnalysisEngine().analyze(beam, 10.0, "two-span-unequal")
    export_beam_response(response, str(tmp_path / "curves"))

    for name in ("deflection.csv", "bending_moment.csv", "shear_force.csv"):
        assert (tmp_path / "curves" / name).exists()
