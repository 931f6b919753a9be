# runtime/hooks.py
from typing import Protocol

from line_offset.domain.entities.geography import Point, Segment


class OffsetHooks(Protocol):
    def offset_start(self, *, vertices: int, offset_deg: float): ...
    def segment_offset(self, *, index: int, segment: Segment): ...
    def join_resolved(self, *, index: int, point: Point): ...
    def join_seam(self, *, index: int, prev_end: Point, cur_start: Point, reason: str): ...
    def offset_end(self, *, points: int, joined: int, seams: int, wall_ms: float): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def offset_start(self, **_):
        pass

    def segment_offset(self, **_):
        pass

    def join_resolved(self, **_):
        pass

    def join_seam(self, **_):
        pass

    def offset_end(self, **_):
        pass

    def error(self, **_):
        pass
