# line_offset/errors.py


class LineOffsetError(ValueError):
    """Base error for every failure raised while offsetting a line."""


class MissingLineError(LineOffsetError):
    pass


class InvalidOffsetError(LineOffsetError):
    pass


class UnknownUnitError(LineOffsetError):
    def __init__(self, units, valid):
        self.units, self.valid = units, tuple(valid)
        super().__init__(f"{units!r} units is invalid; expected one of {', '.join(self.valid)}")


class InvalidGeometryError(LineOffsetError):
    """Input is not a usable 2D LineString (wrong type, bad positions, < 2 vertices)."""


class DegenerateSegmentError(InvalidGeometryError):
    """Two consecutive vertices coincide, so the edge has no direction to offset from."""

    def __init__(self, index: int, point):
        self.index, self.point = index, point
        super().__init__(f"zero-length segment at vertex {index} ({point[0]}, {point[1]})")
