"""Common geometry types shared by the projector, the aggregators and the measurement layer."""

import math
from typing import Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict


class Point2d(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Polygon(BaseModel):
    """Ordered vertex list; measured as an open polyline, the last vertex is not joined back to the first."""
    model_config = ConfigDict(frozen=True)

    points: Tuple[Point2d, ...]
    id: str | None = None

    @classmethod
    def from_xy(cls, coordinates: Iterable[Tuple[float, float]], id: str | None = None) -> "Polygon":
        return cls(points=tuple(Point2d(x=x, y=y) for x, y in coordinates), id=id)

    def segments(self) -> List[Tuple[Point2d, Point2d]]:
        return [(self.points[i], self.points[i + 1]) for i in range(len(self.points) - 1)]


class NearestResult(BaseModel):
    """Closest boundary point and its distance; `closest` is None when nothing qualified."""
    model_config = ConfigDict(frozen=True)

    closest: Point2d | None = None
    distance: float = math.inf

    @property
    def found(self) -> bool:
        return self.closest is not None


NO_RESULT = NearestResult()
