# line_offset/domain/offset/joins.py
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from line_offset.domain.entities.geography import Point, Segment
from line_offset.domain.intersection import IntersectionResult, Intersected, intersect_segments
from line_offset.runtime.hooks import NoopHooks, OffsetHooks

IntersectFn = Callable[[Segment, Segment], IntersectionResult]


@dataclass(frozen=True)
class JoinStep:
    emit: tuple[Point, ...]  # finalized points of the previous segment
    carry: Segment  # current segment, trimmed to the join point if one was found
    result: IntersectionResult


@dataclass(frozen=True)
class StitchResult:
    points: list[Point]
    joined: int
    seams: int


def join(prev: Segment, cur: Segment, intersect: IntersectFn = intersect_segments) -> JoinStep:
    """
    Reconcile the facing ends of two consecutive offset segments.

    A miter join replaces prev.end and cur.start with their intersection, so
    only prev.start is emitted and cur starts at the corner. Without an
    intersection both ends stay and are emitted as a seam.
    """
    res = intersect(cur, prev)
    if isinstance(res, Intersected):
        return JoinStep(emit=(prev.start,), carry=cur.with_start(res.point), result=res)
    return JoinStep(emit=(prev.start, prev.end), carry=cur, result=res)


def stitch(
    segments: Sequence[Segment],
    *,
    intersect: IntersectFn = intersect_segments,
    hooks: OffsetHooks | None = None,
) -> StitchResult:
    """
    Single left-to-right sweep joining every interior corner.

    The only state carried between steps is the previous segment as returned
    by the last join; resolved corners are never revisited.
    """
    if not segments:
        raise ValueError("stitch needs at least one segment")
    hooks = hooks or NoopHooks()

    out: list[Point] = []
    joined = seams = 0
    prev = segments[0]
    for i, cur in enumerate(segments[1:], start=1):
        step = join(prev, cur, intersect)
        out.extend(step.emit)
        if isinstance(step.result, Intersected):
            joined += 1
            hooks.join_resolved(index=i, point=step.result.point)
        else:
            seams += 1
            hooks.join_seam(
                index=i, prev_end=prev.end, cur_start=cur.start, reason=step.result.reason
            )
        prev = step.carry

    out.extend((prev.start, prev.end))
    return StitchResult(points=out, joined=joined, seams=seams)
