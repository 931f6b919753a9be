# line_offset/domain/offset/segments.py
import math
from collections.abc import Sequence

import numpy as np

from line_offset.domain.entities.geography import Point, Segment
from line_offset.errors import DegenerateSegmentError, InvalidGeometryError


def offset_segment(p1: Point, p2: Point, d: float, *, index: int = 0) -> Segment:
    """
    Parallel copy of the edge p1 -> p2 shifted by d.

    (p2.y - p1.y, p1.x - p2.x) is the edge direction turned clockwise, so a
    positive d moves the copy to the right of the direction of travel. `index`
    only labels the edge in a DegenerateSegmentError.
    """
    L = math.hypot(p1.x - p2.x, p1.y - p2.y)
    if L == 0:
        raise DegenerateSegmentError(index, p1)
    nx = d * (p2.y - p1.y) / L
    ny = d * (p1.x - p2.x) / L
    return Segment(Point(p1.x + nx, p1.y + ny), Point(p2.x + nx, p2.y + ny))


def offset_segments(points: Sequence[Point], d: float) -> list[Segment]:
    """One offset Segment per edge, in edge order (len(points) - 1 of them)."""
    if len(points) < 2:
        raise InvalidGeometryError(f"a line needs at least 2 vertices, got {len(points)}")

    xy = np.array([(p.x, p.y) for p in points], dtype=float)
    delta = np.diff(xy, axis=0)
    L = np.hypot(delta[:, 0], delta[:, 1])
    zero = np.flatnonzero(L == 0)
    if zero.size:
        i = int(zero[0])
        raise DegenerateSegmentError(i, points[i])

    normal = np.column_stack((delta[:, 1], -delta[:, 0])) * (d / L)[:, None]
    starts = xy[:-1] + normal
    ends = xy[1:] + normal
    return [
        Segment(Point(float(sx), float(sy)), Point(float(ex), float(ey)))
        for (sx, sy), (ex, ey) in zip(starts, ends)
    ]
