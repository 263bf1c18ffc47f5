import math

from polydist.geometry.common import NO_RESULT, NearestResult, Point2d

# Segments shorter than this along both axes are treated as points and skipped.
DEGENERATE_TOLERANCE = 1e-10


def is_degenerate(a: Point2d, b: Point2d, tolerance: float = DEGENERATE_TOLERANCE) -> bool:
    return abs(b.x - a.x) < tolerance and abs(b.y - a.y) < tolerance


def project_onto_segment(point: Point2d, a: Point2d, b: Point2d,
                         tolerance: float = DEGENERATE_TOLERANCE) -> NearestResult:
    """ Find the point on segment a-b closest to `point`.

    The projection parameter is clamped to [0, 1] so the result always lies on the
    segment. A degenerate segment yields NO_RESULT, whose infinite distance never
    wins against a real candidate.
    """
    if is_degenerate(a, b, tolerance):
        return NO_RESULT

    dx_point = point.x - a.x
    dy_point = point.y - a.y
    dx_segment = b.x - a.x
    dy_segment = b.y - a.y

    dot = dx_point * dx_segment + dy_point * dy_segment
    len_sq = dx_segment * dx_segment + dy_segment * dy_segment

    param = dot / len_sq if len_sq > tolerance else 0.0

    if param < 0:
        closest = a
    elif param > 1:
        closest = b
    else:
        closest = Point2d(x=a.x + param * dx_segment, y=a.y + param * dy_segment)

    distance = math.hypot(point.x - closest.x, point.y - closest.y)
    return NearestResult(closest=closest, distance=distance)
