from typing import Dict, Mapping, Sequence, Tuple

import matplotlib.patches as patches
import matplotlib.patheffects as path_effects
from matplotlib.axes import Axes
from pydantic import BaseModel, Field

from polydist.geometry import Polygon
from polydist.measure import DistanceRecord
from polydist.settings import settings

Color = Tuple[float, float, float, float]


class OverlayStyle(BaseModel):
    """Colors per boundary label; labels without an entry use the fallback colors."""

    line_colors: Dict[str, Color] = Field(default_factory=lambda: {
        "endo": (1.0, 1.0, 0.0, 1.0),
        "epi": (0.0, 1.0, 1.0, 1.0),
    })
    point_colors: Dict[str, Color] = Field(default_factory=lambda: {
        "endo": (1.0, 0.0, 0.0, 1.0),
        "epi": (0.0, 0.0, 1.0, 1.0),
    })
    polygon_color: Color = (47 / 255, 167 / 255, 215 / 255, .6)
    query_color: Color = (148 / 255, 224 / 255, 255 / 255, 1)
    text_color: Color = (1, 1, 1, 1)
    fallback_line_color: Color = (1.0, 1.0, 1.0, 1.0)
    fallback_point_color: Color = (1.0, 0.0, 1.0, 1.0)
    point_radius: float = Field(default_factory=lambda: settings.point_radius)

    def line_color(self, label: str) -> Color:
        return self.line_colors.get(label, self.fallback_line_color)

    def point_color(self, label: str) -> Color:
        return self.point_colors.get(label, self.fallback_point_color)


class DistancePlot:
    def __init__(self, axes: Axes, style: OverlayStyle | None = None, unit: str | None = None):
        self.axes = axes
        self.style = style if style is not None else OverlayStyle()
        self.unit = unit

    def polygons(self, groups: Mapping[str, Sequence[Polygon]]):
        for polygons in groups.values():
            for polygon in polygons:
                self.polygon(polygon)

    def polygon(self, polygon: Polygon):
        if len(polygon.points) < 2:
            return
        points = [(p.x, p.y) for p in polygon.points]
        # drawn open, the way distances are measured
        patch = patches.Polygon(points, linewidth=1, edgecolor=self.style.polygon_color,
                                facecolor='none', closed=False)
        self.axes.add_patch(patch)

    def records(self, records: Sequence[DistanceRecord]):
        for record in records:
            self.record(record)

    def record(self, record: DistanceRecord):
        query = record.query
        closest = record.closest
        line_color = self.style.line_color(record.label)
        point_color = self.style.point_color(record.label)

        self.axes.plot([query.x, closest.x], [query.y, closest.y], color=line_color, linewidth=1)
        self.axes.plot([query.x], [query.y], marker='o', markersize=self.style.point_radius,
                       color=self.style.query_color, linestyle='none')
        self.axes.plot([closest.x], [closest.y], marker='o', markersize=self.style.point_radius / 2,
                       color=point_color, linestyle='none')

        text = self.axes.text(closest.x, closest.y, record.caption(self.unit), fontsize=8,
                              color=self.style.text_color, horizontalalignment='left',
                              verticalalignment='bottom')
        text.set_path_effects([path_effects.Stroke(linewidth=1, foreground=(0, 0, 0, .7)),
                               path_effects.Normal()])
