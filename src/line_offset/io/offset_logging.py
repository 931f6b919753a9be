# io/offset_logging.py
import json
import logging
import sys

from line_offset.domain.entities.geography import Point, Segment
from line_offset.runtime.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="line_offset", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout carries GeoJSON output, logs go to stderr
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _xy(p: Point) -> list[float]:
    return [p.x, p.y]


class OffsetLogging(NoopHooks):
    """
    Structured JSON logs for one offset run: start/end at INFO, per-segment and
    per-corner detail at DEBUG when `debug` is on, failures at ERROR.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def offset_start(self, *, vertices: int, offset_deg: float):
        self._emit("INFO", "offset_start", vertices=vertices, offset_deg=offset_deg)

    def segment_offset(self, *, index: int, segment: Segment):
        if self.debug:
            self._emit(
                "DEBUG",
                "segment_offset",
                index=index,
                start=_xy(segment.start),
                end=_xy(segment.end),
            )

    def join_resolved(self, *, index: int, point: Point):
        if self.debug:
            self._emit("DEBUG", "join_resolved", index=index, point=_xy(point))

    def join_seam(self, *, index: int, prev_end: Point, cur_start: Point, reason: str):
        if self.debug:
            self._emit(
                "DEBUG",
                "join_seam",
                index=index,
                prev_end=_xy(prev_end),
                cur_start=_xy(cur_start),
                reason=reason,
            )

    def offset_end(self, *, points: int, joined: int, seams: int, wall_ms: float):
        self._emit(
            "INFO",
            "offset_end",
            points=points,
            joined=joined,
            seams=seams,
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "offset_error", reason=reason, **kw)
