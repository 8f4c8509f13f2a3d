"""Find and print the point at which two segments in 3D space intersect."""

import argparse
import logging
import sys
from typing import Mapping, Optional

from expression import result
from gertils import ExtantFile

from intersect3d import NoIntersectionError, unsafe_extract_result
from intersect3d.configuration import get_precision, read_configuration_file, validate_precision
from intersect3d.geometry import Point3D, Segment3D
from intersect3d.intersection import try_intersect


# Start then end point, each as (x, y, z)
DEFAULT_FIRST_SEGMENT = (3.0, 0.0, 1e-7, 1.0, 0.0, 0.0)
DEFAULT_SECOND_SEGMENT = (0.0, 1.0, 0.0, 0.0, 4.0, 0.0)

COORDINATE_NAMES = ("X1", "Y1", "Z1", "X2", "Y2", "Z2")


def parse_precision(text: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Precision isn't a number: {text}") from e
    match validate_precision(value):
        case result.Result(tag="ok", ok=precision):
            return precision
        case result.Result(tag="error", error=err_msg):
            raise argparse.ArgumentTypeError(err_msg)


def parse_cmdl(cmdl: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find and print the point at which two segments in 3D space intersect.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--first", nargs=6, type=float, metavar=COORDINATE_NAMES, default=list(DEFAULT_FIRST_SEGMENT), help="Start and end point of the first segment")
    parser.add_argument("--second", nargs=6, type=float, metavar=COORDINATE_NAMES, default=list(DEFAULT_SECOND_SEGMENT), help="Start and end point of the second segment")
    parser.add_argument("--config", type=ExtantFile.from_string, help="Path to YAML configuration file, from which to read precision")
    parser.add_argument("--precision", type=parse_precision, help="Maximum per-axis deviation for a point to count as on both segments; overrides config file")
    return parser.parse_args(cmdl)


def build_segment(coordinates: list[float]) -> Segment3D:
    return Segment3D(
        Point3D.unsafe_from_sequence(coordinates[:3]),
        Point3D.unsafe_from_sequence(coordinates[3:]),
    )


def determine_precision(*, precision: Optional[float], config_file: Optional[ExtantFile]) -> float:
    if precision is not None:
        return precision
    conf_data: Mapping[str, object] = {} if config_file is None else read_configuration_file(config_file)
    return unsafe_extract_result(get_precision(conf_data))


def format_point(point: Point3D) -> str:
    return " ".join(f"{v:g}" for v in point.to_tuple)


def main(cmdl: list[str]) -> None:
    logging.basicConfig(level=logging.INFO)
    opts = parse_cmdl(cmdl)
    precision = determine_precision(precision=opts.precision, config_file=opts.config)
    logging.info("Using precision: %s", precision)
    match try_intersect(build_segment(opts.first), build_segment(opts.second), precision):
        case result.Result(tag="ok", ok=point):
            print(format_point(point))
        case result.Result(tag="error", error=NoIntersectionError() as err):
            logging.error("%s", err)
            sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
