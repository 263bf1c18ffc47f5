import math

import pytest

from polydist.geometry import (
    NO_RESULT,
    NearestResult,
    Point2d,
    Polygon,
    closest_of,
    nearest_on_group,
    nearest_on_polygon,
)


def p(x, y):
    return Point2d(x=x, y=y)


class TestNearestOnPolygon:
    def test_degenerate_segment_is_skipped(self):
        """It skips the zero length segment and matches the polygon without it."""
        with_duplicate = Polygon.from_xy([(0, 0), (0, 0), (5, 0)])
        without_duplicate = Polygon.from_xy([(0, 0), (5, 0)])

        result = nearest_on_polygon(p(0, 5), with_duplicate)

        assert result == nearest_on_polygon(p(0, 5), without_duplicate)
        assert result.closest == p(0, 0)
        assert result.distance == 5.0

    def test_closing_edge_is_not_measured(self):
        """It treats the vertices as an open polyline, last vertex not joined to the first."""
        polygon = Polygon.from_xy([(0, 0), (10, 0), (10, 10)])

        result = nearest_on_polygon(p(0, 10), polygon)

        # the closing edge (10,10)-(0,0) would be at sqrt(50)
        assert result.distance == 10.0
        assert result.closest in (p(0, 0), p(10, 10))
        assert result.distance > math.sqrt(50)

    def test_first_segment_wins_ties(self):
        """It keeps the lowest segment index when two segments are equally close."""
        polygon = Polygon.from_xy([(0, 0), (2, 0), (2, 2)])

        result = nearest_on_polygon(p(1, 1), polygon)

        assert result.distance == 1.0
        assert result.closest == p(1, 0)

    def test_picks_closest_segment(self):
        polygon = Polygon.from_xy([(0, 0), (10, 0), (10, 10), (0, 10)])

        result = nearest_on_polygon(p(9, 5), polygon)

        assert result.closest == p(10, 5)
        assert result.distance == 1.0

    @pytest.mark.parametrize("coordinates", [
        [],
        [(1, 1)],
        [(1, 1), (1, 1)],
        [(2, 3), (2, 3), (2, 3)],
    ])
    def test_polygon_without_valid_segment_gives_no_result(self, coordinates):
        result = nearest_on_polygon(p(0, 0), Polygon.from_xy(coordinates))

        assert not result.found
        assert result.distance == math.inf

    def test_distance_is_non_negative(self):
        polygon = Polygon.from_xy([(0, 0), (4, 1), (3, 5), (-1, 3)])
        for query in [p(0, 0), p(2, 2), p(-5, 7), p(100, -100)]:
            assert nearest_on_polygon(query, polygon).distance >= 0

    def test_nan_query_gives_non_finite_distance(self):
        result = nearest_on_polygon(p(math.nan, math.nan), Polygon.from_xy([(0, 0), (1, 0)]))

        assert not math.isfinite(result.distance)


class TestNearestOnGroup:
    def test_picks_globally_closest_polygon(self):
        near = Polygon.from_xy([(0, 2), (10, 2)], id="near")
        far = Polygon.from_xy([(0, 8), (10, 8)], id="far")

        forward = nearest_on_group(p(5, 0), [far, near])
        backward = nearest_on_group(p(5, 0), [near, far])

        assert forward == backward
        assert forward.closest == p(5, 2)
        assert forward.distance == 2.0

    def test_first_polygon_wins_ties(self):
        below = Polygon.from_xy([(0, 0), (10, 0)])
        above = Polygon.from_xy([(0, 2), (10, 2)])

        assert nearest_on_group(p(5, 1), [below, above]).closest == p(5, 0)
        assert nearest_on_group(p(5, 1), [above, below]).closest == p(5, 2)

    def test_empty_group_gives_no_result(self):
        result = nearest_on_group(p(5, 1), [])

        assert result is NO_RESULT
        assert result.distance != 0

    def test_degenerate_polygons_do_not_win(self):
        degenerate = Polygon.from_xy([(5, 1), (5, 1)])
        valid = Polygon.from_xy([(0, 10), (10, 10)])

        result = nearest_on_group(p(5, 1), [degenerate, valid])

        assert result.closest == p(5, 10)
        assert result.distance == 9.0

    def test_all_degenerate_group_gives_no_result(self):
        group = [Polygon.from_xy([(1, 1), (1, 1)]), Polygon.from_xy([(3, 3)])]

        assert not nearest_on_group(p(0, 0), group).found


def test_closest_of_ignores_missing_and_nan_candidates():
    candidates = [
        NO_RESULT,
        NearestResult(closest=p(0, 0), distance=math.nan),
        NearestResult(closest=p(1, 1), distance=3.0),
        NearestResult(closest=p(2, 2), distance=3.0),
    ]

    assert closest_of(candidates).closest == p(1, 1)
    assert closest_of([]) is NO_RESULT


def test_polygon_segments_are_open():
    polygon = Polygon.from_xy([(0, 0), (1, 0), (1, 1)])

    assert polygon.segments() == [(p(0, 0), p(1, 0)), (p(1, 0), p(1, 1))]
