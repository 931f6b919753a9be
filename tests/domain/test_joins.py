import pytest

from line_offset.domain.entities.geography import Point, Segment
from line_offset.domain.intersection import Intersected, NoIntersection
from line_offset.domain.offset.joins import join, stitch
from line_offset.domain.offset.segments import offset_segments
from line_offset.runtime.hooks import NoopHooks


def seg(x1, y1, x2, y2) -> Segment:
    return Segment(Point(x1, y1), Point(x2, y2))


def coords(points):
    return [[p.x, p.y] for p in points]


def flat(points):
    return [c for p in points for c in (p.x, p.y)]


# --- test hook that records corner decisions ---
class CornerHooks(NoopHooks):
    def __init__(self):
        self.trace = []

    def join_resolved(self, *, index, point):
        self.trace.append(("joined", index))

    def join_seam(self, *, index, prev_end, cur_start, reason):
        self.trace.append(("seam", index, reason))


def test_single_segment_passes_through():
    res = stitch([seg(1, 0, 1, 10)])
    assert coords(res.points) == [[1, 0], [1, 10]]
    assert (res.joined, res.seams) == (0, 0)


def test_inner_corner_is_mitered_to_one_point():
    # east then north, offset to the left (inside of the turn)
    segs = [seg(0, 1, 10, 1), seg(9, 0, 9, 10)]
    res = stitch(segs)
    assert flat(res.points) == pytest.approx([0, 1, 9, 1, 9, 10])
    assert (res.joined, res.seams) == (1, 0)


def test_outer_corner_keeps_both_ends_as_a_seam():
    segs = [seg(0, -1, 10, -1), seg(11, 0, 11, 10)]
    res = stitch(segs)
    assert coords(res.points) == [[0, -1], [10, -1], [11, 0], [11, 10]]
    assert (res.joined, res.seams) == (0, 1)


def test_collinear_segments_share_their_vertex():
    res = stitch([seg(0, 1, 5, 1), seg(5, 1, 10, 1)])
    assert coords(res.points) == [[0, 1], [5, 1], [10, 1]]


def test_join_step_trims_the_carried_segment():
    step = join(seg(0, 1, 10, 1), seg(9, 0, 9, 10))
    assert isinstance(step.result, Intersected)
    assert coords(step.emit) == [[0, 1]]
    assert [step.carry.start.x, step.carry.start.y] == pytest.approx([9, 1])
    assert step.carry.end == Point(9, 10)


def test_resolved_corner_feeds_the_next_join():
    # zig-zag with inner corners only: each carried start is the previous miter
    pts = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    res = stitch(offset_segments(pts, -1.0))
    assert flat(res.points) == pytest.approx([0, 1, 9, 1, 9, 9, 0, 9])
    assert res.joined == 2


def test_output_length_is_twice_segments_minus_joins():
    pts = [Point(0, 0), Point(4, 1), Point(5, 5), Point(9, 4), Point(10, 9), Point(14, 7)]
    for d in (0.4, -0.4):
        segs = offset_segments(pts, d)
        res = stitch(segs)
        assert res.joined + res.seams == len(segs) - 1
        assert len(res.points) == 2 * len(segs) - res.joined


def test_fallback_when_intersector_never_finds_a_point():
    segs = [seg(0, 1, 10, 1), seg(9, 0, 9, 10), seg(10, 9, 0, 9)]
    res = stitch(segs, intersect=lambda a, b: NoIntersection("parallel"))
    assert len(res.points) == 6
    assert res.points[1] == Point(10, 1)
    assert res.points[2] == Point(9, 0)


def test_hooks_see_every_corner():
    hooks = CornerHooks()
    segs = [seg(0, 1, 10, 1), seg(9, 0, 9, 10), seg(10, 11, 0, 11)]
    stitch(segs, hooks=hooks)
    assert hooks.trace == [("joined", 1), ("seam", 2, "out_of_bounds")]


def test_no_segments_is_an_error():
    with pytest.raises(ValueError):
        stitch([])
