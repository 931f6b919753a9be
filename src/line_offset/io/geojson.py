# io/geojson.py
"""
GeoJSON boundary: pulls the vertex sequence out of whatever the caller hands
in, and packages offset coordinates back into a Feature.
"""

import json
import sys
from collections.abc import Mapping, Sequence

from pydantic import TypeAdapter, ValidationError

from line_offset.config.models import (
    FeatureCollectionModel,
    LineStringModel,
    Position,
    geometry_adapter,
)
from line_offset.domain.entities.geography import Line, Point
from line_offset.errors import InvalidGeometryError, MissingLineError

_positions = TypeAdapter(list[Position])


def _validate(adapter: TypeAdapter, obj):
    try:
        return adapter.validate_python(obj)
    except ValidationError as e:
        raise InvalidGeometryError(f"not a 2D LineString: {e.errors()[0]['msg']}") from e


def _points(coords) -> tuple[Point, ...]:
    return tuple(Point(x, y) for x, y in coords)


def to_line(obj) -> Line:
    """
    Accepts a Line, a LineString geometry, a Feature wrapping one, or a bare
    sequence of [x, y] positions.

    A Feature's properties dict is carried by reference.
    """
    if obj is None:
        raise MissingLineError("line is required")
    if isinstance(obj, Line):
        return obj
    if isinstance(obj, Mapping):
        model = _validate(geometry_adapter, obj)
        if isinstance(model, FeatureCollectionModel):
            raise InvalidGeometryError("expected a LineString, got a FeatureCollection")
        if isinstance(model, LineStringModel):
            return Line(_points(model.coordinates))
        props = obj.get("properties")
        return Line(_points(model.geometry.coordinates), props if isinstance(props, dict) else None)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        if obj and all(isinstance(p, Point) for p in obj):
            return Line(tuple(obj))
        return Line(_points(_validate(_positions, obj)))
    raise InvalidGeometryError(f"cannot read a line from {type(obj).__name__}")


def to_feature(line: Line) -> dict:
    return {
        "type": "Feature",
        "properties": line.properties if line.properties is not None else {},
        "geometry": {"type": "LineString", "coordinates": line.coordinates()},
    }


def feature_collection(features: list[dict]) -> dict:
    return {"type": "FeatureCollection", "features": features}


def split_collection(obj: Mapping) -> list[Mapping]:
    """The raw feature mappings of a FeatureCollection, after validating all of them."""
    model = _validate(geometry_adapter, obj)
    if not isinstance(model, FeatureCollectionModel):
        raise InvalidGeometryError(f"expected a FeatureCollection, got {obj.get('type')}")
    return list(obj["features"])


def is_collection(obj) -> bool:
    return isinstance(obj, Mapping) and obj.get("type") == "FeatureCollection"


# ----------------- FILES ---------------------


def read_geojson(path: str):
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path, encoding="utf-8") as fp:
            return json.load(fp)
    except json.JSONDecodeError as e:
        raise InvalidGeometryError(f"{path}: invalid JSON ({e.msg})") from e


def write_geojson(obj, path: str, indent: int | None = None) -> None:
    if path == "-":
        json.dump(obj, sys.stdout, indent=indent)
        sys.stdout.write("\n")
        return
    with open(path, "w", encoding="utf-8") as fp:
        json.dump(obj, fp, indent=indent)
        fp.write("\n")

