"""Finding the point at which two segments in 3D space meet

For each segment, each axis gets a parametric line, value = direction * parameter + offset.
With (a, b) the X direction and offset, (c, d) those for Y, and (e, f) those for Z, the segments
meet where the following system holds, for t the first segment's parameter and s the second's:

    a1 * t + b1 = a2 * s + b2
    c1 * t + d1 = c2 * s + d2
    e1 * t + f1 = e2 * s + f2

The first two equations (X and Y) are solved for t and s, and the third (Z) only serves to check
that the solution really is a point on both segments. This asymmetry is deliberate; Z never takes
part in the solve.
"""

import logging
from math import isfinite

import attrs
from expression import Result
import numpy as np
from numpydoc_decorator import doc

from . import DEFAULT_PRECISION
from .exceptions import NoIntersectionError, ParallelSegmentsError
from .geometry import Point3D, Segment3D
from .numeric_types import NumberLike, is_real_number

__all__ = ["ParametricLine", "intersect", "solve_parameters", "try_intersect"]

Triple = tuple[np.float64, np.float64, np.float64]


@attrs.define(frozen=True, kw_only=True)
class ParametricLine:
    """Per-axis direction and offset of the (unclamped) line through a segment"""
    dx = attrs.field(converter=np.float64) # type: np.float64
    x0 = attrs.field(converter=np.float64) # type: np.float64
    dy = attrs.field(converter=np.float64) # type: np.float64
    y0 = attrs.field(converter=np.float64) # type: np.float64
    dz = attrs.field(converter=np.float64) # type: np.float64
    z0 = attrs.field(converter=np.float64) # type: np.float64

    @classmethod
    def from_segment(cls, segment: Segment3D) -> "ParametricLine":
        dx, dy, dz = segment.direction
        start = segment.start
        return cls(dx=dx, x0=start.x, dy=dy, y0=start.y, dz=dz, z0=start.z)

    @property
    def coefficients(self) -> tuple[np.float64, ...]:
        """The (a, b, c, d, e, f) of the parametric system: X direction and offset, then Y, then Z"""
        return (self.dx, self.x0, self.dy, self.y0, self.dz, self.z0)

    def at(self, parameter: np.float64) -> Triple:
        with np.errstate(all="ignore"):
            return (
                self.dx * parameter + self.x0,
                self.dy * parameter + self.y0,
                self.dz * parameter + self.z0,
            )


@doc(
    summary="Solve the X and Y equations of the parametric system for the parameter of each line.",
    extended_summary="""
        All arithmetic is IEEE double precision, and division by zero isn't an error, but rather
        yields infinity or NaN. This happens when the first line has no X extent, in which
        case the first line's parameter is never finite.
    """,
    parameters=dict(
        line1="The first line, whose parameter is t",
        line2="The second line, whose parameter is s",
    ),
    returns="Pair of t and s, the parameters at which the lines' X and Y values agree",
    raises=dict(ParallelSegmentsError="If the lines' directions projected onto the XY plane are collinear"),
)
def solve_parameters(line1: ParametricLine, line2: ParametricLine) -> tuple[np.float64, np.float64]:
    a1, b1, c1, d1, _, _ = line1.coefficients
    a2, b2, c2, d2, _, _ = line2.coefficients
    with np.errstate(all="ignore"):
        denominator = c1 * a2 - c2 * a1
        if denominator == 0:
            raise ParallelSegmentsError(
                f"Segments' directions are parallel in the XY plane: ({a1}, {c1}) and ({a2}, {c2})"
            )
        s = (d2 * a1 - c1 * b2 + c1 * b1 - d1 * a1) / denominator
        t = (a2 * s + b2 - b1) / a1
    return t, s


@doc(
    summary="Find the point at which two segments in 3D space intersect.",
    extended_summary="""
        The parameters of the segments' lines are solved from the X and Y equations, and the
        candidate point is the second segment evaluated at its solved parameter. The candidate is
        accepted iff, on each axis, it's within the given precision of the first segment evaluated
        at its solved parameter. On X and Y this holds by construction (up to rounding), so in
        practice it's the Z axis which decides. Parameters aren't restricted to [0, 1], so the
        check is really about the lines through the segments.
    """,
    parameters=dict(
        segment1="The first segment",
        segment2="The second segment",
        precision="Maximum absolute deviation, per axis, between the two segments at their solved parameters",
    ),
    returns="The intersection point, i.e. the second segment's line at the solved parameter",
    raises=dict(
        TypeError="If precision isn't a real number",
        ValueError="If precision isn't finite and positive",
        NoIntersectionError="If the candidate point fails the tolerance check on any axis, or isn't finite",
        ParallelSegmentsError="If the segments' directions are parallel in the XY plane",
    ),
)
def intersect(segment1: Segment3D, segment2: Segment3D, precision: NumberLike = DEFAULT_PRECISION) -> Point3D:
    _check_precision(precision)
    line1 = ParametricLine.from_segment(segment1)
    line2 = ParametricLine.from_segment(segment2)
    t, s = solve_parameters(line1, line2)
    logging.debug("Solved segment parameters: t=%s, s=%s", t, s)
    reference: Triple = line1.at(t)
    candidate: Triple = line2.at(s)
    for axis, ref, obs in zip("xyz", reference, candidate, strict=True):
        # NB: any comparison with NaN is False, so a NaN on either side fails the check.
        if not (ref - precision <= obs <= ref + precision):
            logging.debug("Axis %s fails tolerance check: %s vs. %s (precision=%s)", axis, obs, ref, precision)
            raise NoIntersectionError(
                f"Segments do not intersect; on axis {axis}, {obs} isn't within {precision} of {ref}"
            )
    if not all(isfinite(v) for v in candidate):
        raise NoIntersectionError(f"Segments do not intersect; candidate point isn't finite: {candidate}")
    return Point3D(*(float(v) for v in candidate))


def try_intersect(
    segment1: Segment3D,
    segment2: Segment3D,
    precision: NumberLike = DEFAULT_PRECISION,
) -> Result[Point3D, NoIntersectionError]:
    """Find the point at which the given segments intersect, wrapping absence of such a point as an error value."""
    try:
        return Result.Ok(intersect(segment1, segment2, precision))
    except NoIntersectionError as e:
        return Result.Error(e)


def _check_precision(precision: NumberLike) -> None:
    if not is_real_number(precision):
        raise TypeError(f"Precision ({precision}) (type={type(precision).__name__}) is not a real number!")
    if not isfinite(precision) or precision <= 0:
        raise ValueError(f"Precision must be finite and positive: {precision}")
