from typing import Protocol, runtime_checkable

from line_offset.domain.entities.geography import Segment
from line_offset.domain.intersection import IntersectionResult


@runtime_checkable
class DistanceNormalizer(Protocol):
    """
    Linear distance + unit name -> angular distance in degrees.
    Raises UnknownUnitError for a unit it does not recognize.
    """

    def __call__(self, distance: float, units: str | None = ...) -> float: ...


@runtime_checkable
class Intersector(Protocol):
    """
    Intersection of two finite segments: Intersected(point) or NoIntersection(reason).
    """

    def __call__(self, a: Segment, b: Segment) -> IntersectionResult: ...
