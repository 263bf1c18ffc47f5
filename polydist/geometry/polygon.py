from typing import Iterable, Sequence

from polydist.geometry.common import NO_RESULT, NearestResult, Point2d, Polygon
from polydist.geometry.segment import DEGENERATE_TOLERANCE, project_onto_segment


def closest_of(results: Iterable[NearestResult]) -> NearestResult:
    """ Reduce candidates to the one with the smallest distance.

    Uses a strict `<`, so on equal distances the first candidate in iteration order
    is kept. Candidates without a point never win; nan distances never win either.
    """
    best = NO_RESULT
    for result in results:
        if result.found and result.distance < best.distance:
            best = result
    return best


def nearest_on_polygon(point: Point2d, polygon: Polygon,
                       tolerance: float = DEGENERATE_TOLERANCE) -> NearestResult:
    return closest_of(
        project_onto_segment(point, a, b, tolerance) for a, b in polygon.segments()
    )


def nearest_on_group(point: Point2d, polygons: Sequence[Polygon],
                     tolerance: float = DEGENERATE_TOLERANCE) -> NearestResult:
    return closest_of(nearest_on_polygon(point, polygon, tolerance) for polygon in polygons)
