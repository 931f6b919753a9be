from collections.abc import Iterator
from dataclasses import dataclass, field, replace


# Core geometry types used by the offset pipeline
@dataclass(frozen=True)
class Point:
    x: float  # longitude, or planar x
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y)[i]

    def to_list(self) -> list[float]:
        return [self.x, self.y]


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    def with_start(self, p: Point) -> "Segment":
        return replace(self, start=p)

    def midpoint(self) -> Point:
        return Point((self.start.x + self.end.x) / 2.0, (self.start.y + self.end.y) / 2.0)


Pt = Point | tuple[float, float] | list[float]


def _to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


@dataclass
class Line:
    points: tuple[Point, ...]
    properties: dict | None = field(default=None)

    def __post_init__(self):
        self.points = tuple(_to_point(p) for p in self.points)

    def __len__(self) -> int:
        return len(self.points)

    def coordinates(self) -> list[list[float]]:
        return [p.to_list() for p in self.points]
