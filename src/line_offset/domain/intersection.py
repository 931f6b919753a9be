# line_offset/domain/intersection.py
import math
from dataclasses import dataclass
from typing import Literal

from line_offset.domain.entities.geography import Point, Segment

_EPS = 1e-12

NoIntersectionReason = Literal["parallel", "out_of_bounds"]


@dataclass(frozen=True)
class Intersected:
    point: Point


@dataclass(frozen=True)
class NoIntersection:
    reason: NoIntersectionReason


IntersectionResult = Intersected | NoIntersection


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - bx * ay


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=_EPS)


def _continues(a: Segment, b: Segment) -> bool:
    # a picks up exactly where b ends
    return _close(b.end.x, a.start.x) and _close(b.end.y, a.start.y)


def intersect_segments(a: Segment, b: Segment) -> IntersectionResult:
    """
    Intersection of two finite segments, `a` following `b` along the line.

    Solves a.start + t * ra == b.start + u * rb and accepts the point only if
    both t and u fall within [0, 1]. Parallel segments never cross; the one
    exception is `a` starting where `b` ends, which resolves to a.start.
    """
    rx, ry = a.end.x - a.start.x, a.end.y - a.start.y
    sx, sy = b.end.x - b.start.x, b.end.y - b.start.y
    denom = _cross(rx, ry, sx, sy)
    if abs(denom) <= _EPS * math.hypot(rx, ry) * math.hypot(sx, sy):
        if _continues(a, b):
            return Intersected(a.start)
        return NoIntersection("parallel")

    qx, qy = b.start.x - a.start.x, b.start.y - a.start.y
    t = _cross(qx, qy, sx, sy) / denom
    u = _cross(qx, qy, rx, ry) / denom
    if not (-_EPS <= t <= 1 + _EPS and -_EPS <= u <= 1 + _EPS):
        return NoIntersection("out_of_bounds")
    return Intersected(Point(a.start.x + t * rx, a.start.y + t * ry))
