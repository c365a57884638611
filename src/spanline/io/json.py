from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from spanline.core.beam import Beam
from spanline.core.material import Material

SCHEMA_VERSION = "0.1.0"


def save_beam(beam: Beam, path: str) -> None:
    _write_json(path, _beam_to_dict(beam))


def load_beam(path: str) -> Beam:
    return _beam_from_dict(_read_json(path))


def _beam_to_dict(beam: Beam) -> Dict[str, Any]:
    return {
        "schema": SCHEMA_VERSION,
        "primary_span": beam.primary_span,
        "secondary_span": beam.secondary_span,
        "material": {
            "name": beam.material.name,
            "properties": dict(beam.material.properties),
        },
    }


def _beam_from_dict(data: Dict[str, Any]) -> Beam:
    if "primary_span" not in data or "material" not in data:
        raise ValueError("invalid beam json: missing primary_span or material")
    material_data = data["material"]
    if "name" not in material_data:
        raise ValueError("invalid beam json: material missing name")
    properties = material_data["properties"] if "properties" in material_data else {}
    secondary_span = data["secondary_span"] if "secondary_span" in data else 0.0
    return Beam(
        primary_span=data["primary_span"],
        secondary_span=secondary_span,
        material=Material(name=material_data["name"], properties=properties),
    )


def _write_json(path: str, data: Dict[str, Any]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
