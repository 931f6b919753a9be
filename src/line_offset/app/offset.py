# line_offset/app/offset.py
import math
import time
from collections.abc import Mapping
from numbers import Real

from line_offset.app.protocols import DistanceNormalizer, Intersector
from line_offset.domain.entities.geography import Line
from line_offset.domain.intersection import intersect_segments
from line_offset.domain.offset.joins import stitch
from line_offset.domain.offset.segments import offset_segments
from line_offset.domain.units import DEFAULT_UNITS, Units, distance_to_degrees
from line_offset.errors import InvalidOffsetError, LineOffsetError, MissingLineError
from line_offset.io.geojson import feature_collection, split_collection, to_feature, to_line
from line_offset.runtime.hooks import NoopHooks, OffsetHooks


def _check_offset(offset) -> float:
    if offset is None or isinstance(offset, bool) or not isinstance(offset, Real):
        raise InvalidOffsetError("offset is required")
    if math.isnan(offset):
        raise InvalidOffsetError("offset is required")
    if math.isinf(offset):
        raise InvalidOffsetError(f"offset must be finite, got {offset}")
    return float(offset)


def offset_line(
    line: Line,
    offset_deg: float,
    *,
    hooks: OffsetHooks | None = None,
    intersect: Intersector = intersect_segments,
) -> Line:
    """
    Offset `line` by `offset_deg` coordinate units (already normalized).
    Positive offsets move to the right of the direction of travel.
    """
    hooks = hooks or NoopHooks()
    t1 = time.perf_counter()
    hooks.offset_start(vertices=len(line), offset_deg=offset_deg)

    segments = offset_segments(line.points, offset_deg)
    for i, seg in enumerate(segments):
        hooks.segment_offset(index=i, segment=seg)
    res = stitch(segments, intersect=intersect, hooks=hooks)

    hooks.offset_end(
        points=len(res.points),
        joined=res.joined,
        seams=res.seams,
        wall_ms=(time.perf_counter() - t1) * 1000,
    )
    return Line(tuple(res.points), line.properties)


def line_offset(
    line,
    offset: float,
    units: Units | None = DEFAULT_UNITS,
    *,
    hooks: OffsetHooks | None = None,
    normalize: DistanceNormalizer = distance_to_degrees,
) -> dict:
    """
    Takes a LineString (geometry, Feature, Line or bare positions) and returns a
    LineString Feature offset by `offset` `units`; negative offsets go left.

    The returned Feature shares the input's properties dict.
    """
    hooks = hooks or NoopHooks()
    try:
        if line is None:
            raise MissingLineError("line is required")
        offset = _check_offset(offset)
        offset_deg = normalize(offset, units)
        return to_feature(offset_line(to_line(line), offset_deg, hooks=hooks))
    except LineOffsetError as e:
        hooks.error(reason=type(e).__name__, detail=str(e))
        raise


def offset_feature_collection(
    collection: Mapping,
    offset: float,
    units: Units | None = DEFAULT_UNITS,
    *,
    hooks: OffsetHooks | None = None,
) -> dict:
    features = split_collection(collection)
    return feature_collection([line_offset(f, offset, units, hooks=hooks) for f in features])
