"""Planar nearest-boundary geometry.

Every function in this package is pure: no shared state, no I/O, no exceptions for
the expected "nothing to measure" cases, which are reported as NO_RESULT instead.
"""

from polydist.geometry.common import (
    NO_RESULT,
    NearestResult,
    Point2d,
    Polygon,
)
from polydist.geometry.segment import (
    DEGENERATE_TOLERANCE,
    is_degenerate,
    project_onto_segment,
)
from polydist.geometry.polygon import (
    closest_of,
    nearest_on_group,
    nearest_on_polygon,
)

__all__ = [
    "DEGENERATE_TOLERANCE",
    "NO_RESULT",
    "NearestResult",
    "Point2d",
    "Polygon",
    "closest_of",
    "is_degenerate",
    "nearest_on_group",
    "nearest_on_polygon",
    "project_onto_segment",
]
