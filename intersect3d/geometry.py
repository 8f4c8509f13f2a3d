"""Various geometry abstractions and functions"""

from typing import Any, Sequence

import attrs
import numpy as np

from .exceptions import DegenerateSegmentError
from .numeric_types import NumberLike, is_real_number

__all__ = ["Point3D", "Segment3D"]


def _is_real_number(_, attribute: attrs.Attribute, value: Any) -> None:
    if not is_real_number(value):
        raise TypeError(f"Value for {attribute.name} isn't a real number, but {type(value).__name__}")


@attrs.define(frozen=True)
class Point3D:
    """General abstraction of a point in 3D (assumed Euclidean) space; equality is exact, with no tolerance"""
    x = attrs.field(validator=_is_real_number) # type: NumberLike
    y = attrs.field(validator=_is_real_number) # type: NumberLike
    z = attrs.field(validator=_is_real_number) # type: NumberLike

    @classmethod
    def unsafe_from_sequence(cls, values: Sequence[NumberLike]) -> "Point3D":
        if len(values) != 3:
            raise ValueError(f"Need exactly 3 coordinates for a point, but got {len(values)}: {values}")
        return cls(*values)

    @property
    def to_tuple(self) -> tuple[NumberLike, NumberLike, NumberLike]:
        return attrs.astuple(self)


def _differs_from_start(instance: "Segment3D", _, value: Point3D) -> None:
    if value == instance.start:
        raise DegenerateSegmentError(f"Start and end points are the same: {value}")


@attrs.define(frozen=True)
class Segment3D:
    """
    Line segment in 3D space, between two distinct points

    The segment is directed, from start to end. Points are compared exactly, so any nonzero
    difference in any coordinate suffices for the segment to be valid, however short it is.
    """
    start = attrs.field(validator=attrs.validators.instance_of(Point3D)) # type: Point3D
    end = attrs.field(validator=[attrs.validators.instance_of(Point3D), _differs_from_start]) # type: Point3D

    @property
    def direction(self) -> tuple[np.float64, np.float64, np.float64]:
        """Componentwise difference of end and start, i.e. the displacement along the segment, in double precision"""
        with np.errstate(all="ignore"):
            return tuple(
                np.float64(e) - np.float64(s) for s, e in zip(self.start.to_tuple, self.end.to_tuple, strict=True)
            )
