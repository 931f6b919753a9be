# line_offset/cli.py
"""
line-offset: offset GeoJSON LineStrings from the command line.

    line-offset route.geojson 2 --units miles -o route_offset.geojson
    line-offset - -0.5 < route.geojson
    line-offset --config job.json
"""

import argparse
import json
import sys
from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from line_offset.app.offset import line_offset, offset_feature_collection
from line_offset.config.models import JobModel
from line_offset.domain.units import DEFAULT_UNITS, FACTORS
from line_offset.errors import LineOffsetError
from line_offset.io.geojson import is_collection, read_geojson, write_geojson
from line_offset.io.offset_logging import OffsetLogging
from line_offset.runtime.hooks import NoopHooks

EXIT_OK = 0
EXIT_USAGE = 2


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-offset",
        description="Offset a GeoJSON LineString parallel to itself.",
        epilog="Positive offsets move right of the direction of travel, negative ones left.",
    )
    parser.add_argument("input", nargs="?", help="GeoJSON file, or - for stdin")
    parser.add_argument("offset", nargs="?", type=float, help="signed offset distance")
    parser.add_argument(
        "-u",
        "--units",
        choices=sorted(FACTORS),
        default=DEFAULT_UNITS,
        help=f"distance units (default: {DEFAULT_UNITS})",
    )
    parser.add_argument("-o", "--output", default="-", help="output file (default: stdout)")
    parser.add_argument("--indent", type=int, default=None, help="pretty-print JSON output")
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    parser.add_argument("--debug", action="store_true", help="log every segment and corner")
    parser.add_argument("--run-id", default="local")
    parser.add_argument("-c", "--config", help="JSON job file; replaces the arguments above")
    return parser


def load_job(path: str) -> JobModel:
    try:
        with open(path, encoding="utf-8") as fp:
            data = json.load(fp)
    except json.JSONDecodeError as e:
        raise LineOffsetError(f"{path}: invalid JSON ({e.msg})") from e
    return JobModel.model_validate(data)


def job_from_args(args: argparse.Namespace) -> JobModel:
    if args.config:
        return load_job(args.config)
    if args.input is None or args.offset is None:
        raise LineOffsetError("input and offset are required (or pass --config)")
    return JobModel.model_validate(
        {
            "run_id": args.run_id,
            "input": args.input,
            "output": args.output,
            "indent": args.indent,
            "offset": {"offset": args.offset, "units": args.units},
            "log": {"level": "DEBUG" if args.debug else args.log_level, "debug": args.debug},
        }
    )


def run(job: JobModel | Mapping, *, use_logging: bool = True) -> dict:
    # 0) Validate config
    model = job if isinstance(job, JobModel) else JobModel.model_validate(job)

    hooks = (
        OffsetLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    src = read_geojson(model.input)
    if is_collection(src):
        out = offset_feature_collection(src, model.offset.offset, model.offset.units, hooks=hooks)
    else:
        out = line_offset(src, model.offset.offset, model.offset.units, hooks=hooks)
    write_geojson(out, model.output, indent=model.indent)
    return out


def main(argv: Sequence[str] | None = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    try:
        run(job_from_args(args))
    except (LineOffsetError, ValidationError, OSError) as e:
        print(f"line-offset: error: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
