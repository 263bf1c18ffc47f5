from typing import Dict, List

from pydantic import BaseModel, Field

from polydist.data.types.enums import AREA_ROI_TYPES, RoiType
from polydist.geometry import Point2d, Polygon


class Roi(BaseModel):
    """Region of interest in image pixel coordinates.

    Point ROIs may hold several points. A rectangle is given by its four corners.
    """

    type: RoiType
    points: List[Point2d] = Field(min_length=1)

    def centroid(self) -> Point2d:
        """ Area centroid for polygons and rectangles, mean of the points otherwise.

        Area ROIs that enclose no area fall back to the mean of their vertices.
        """
        if self.type in AREA_ROI_TYPES and len(self.points) >= 3:
            area2 = 0.0
            cx = 0.0
            cy = 0.0
            n = len(self.points)
            for i in range(n):
                p = self.points[i]
                q = self.points[(i + 1) % n]
                cross = p.x * q.y - q.x * p.y
                area2 += cross
                cx += (p.x + q.x) * cross
                cy += (p.y + q.y) * cross
            if area2 != 0.0:
                return Point2d(x=cx / (3.0 * area2), y=cy / (3.0 * area2))
        n = len(self.points)
        return Point2d(x=sum(p.x for p in self.points) / n, y=sum(p.y for p in self.points) / n)

    def to_polygon(self, id: str | None = None) -> Polygon:
        return Polygon(points=tuple(self.points), id=id)


class Annotation(BaseModel):
    id: str | None = None
    classLabel: str | None = None
    name: str | None = None
    roi: Roi
    measurements: Dict[str, float] = Field(default_factory=dict)


class AnnotationSet(BaseModel):
    """All annotations of one image."""

    pixelSizeMicrons: float | None = Field(
        default=None,
        description="Averaged pixel size in microns, used to convert pixel distances."
    )
    annotations: List[Annotation] = Field(default_factory=list)
