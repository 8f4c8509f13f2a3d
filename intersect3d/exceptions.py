"""Custom exception types to more accurately represent difficulties"""

__all__ = [
    "ConfigurationValueError",
    "DegenerateSegmentError",
    "Intersect3dException",
    "NoIntersectionError",
    "ParallelSegmentsError",
    ]


class Intersect3dException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DegenerateSegmentError(Intersect3dException, ValueError):
    """Error subtype for when a segment would have identical start and end points"""


class NoIntersectionError(Intersect3dException, ValueError):
    """Error subtype for when two segments don't meet within the requested precision"""


class ParallelSegmentsError(NoIntersectionError):
    """Error subtype for when segments' directions, projected onto the XY plane, are collinear"""


class ConfigurationValueError(Intersect3dException):
    "Exception subtype for when something's wrong with a config file value"
    pass
