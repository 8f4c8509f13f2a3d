"""Intersection of line segments in 3D space, by parametric solve and per-axis tolerance check"""

from typing import *

from expression import Result, result

from .exceptions import (
    ConfigurationValueError,
    DegenerateSegmentError,
    Intersect3dException,
    NoIntersectionError,
    ParallelSegmentsError,
)

__all__ = [
    "DEFAULT_PRECISION",
    "ConfigurationValueError",
    "DegenerateSegmentError",
    "Intersect3dException",
    "NoIntersectionError",
    "ParallelSegmentsError",
    "unsafe_extract_result",
    ]


# Maximum absolute per-axis deviation for a candidate point to count as on both segments
DEFAULT_PRECISION = 1e-6

_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")
