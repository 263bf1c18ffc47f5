"""Apply the nearest-boundary search to many query points and polygon groups.

Groups are plain mappings from a class label to its polygons, passed in by the caller,
so the same code serves any number of boundary classes. Records come back in a stable
order: by query point first, then by the iteration order of the group mapping.
"""
import logging
import math
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from polydist.exceptions import InvalidUnitScaleException
from polydist.geometry import DEGENERATE_TOLERANCE, Point2d, Polygon, nearest_on_group
from polydist.settings import settings

log = logging.getLogger('polydist.measure')


class QueryPoint(BaseModel):
    """A location to measure from, with an opaque reference back to whatever it represents."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    ref: Any = None
    index: int | None = None

    @property
    def point(self) -> Point2d:
        return Point2d(x=self.x, y=self.y)


class DistanceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: QueryPoint
    label: str
    closest: Point2d
    distance: float
    scaled_distance: float

    def measurements(self, unit: str | None = None) -> Dict[str, float]:
        unit = unit if unit is not None else settings.unit
        return {
            f"Closest {self.label} point X": self.closest.x,
            f"Closest {self.label} point Y": self.closest.y,
            f"Distance to {self.label} ({unit})": self.scaled_distance,
        }

    def caption(self, unit: str | None = None, n_digits: int | None = None) -> str:
        unit = unit if unit is not None else settings.unit
        n_digits = n_digits if n_digits is not None else settings.distance_n_digits
        return f"{self.label.capitalize()}: {self.scaled_distance:.{n_digits}f} {unit}"


def check_groups(points: Sequence[QueryPoint], groups: Mapping[str, Sequence[Polygon]]) -> bool:
    """Log what will and will not be measured; False when there is nothing to do at all."""
    if len(points) == 0:
        log.warning("No query points found, nothing to measure")
        return False
    present = [label for label, polygons in groups.items() if polygons]
    if not present:
        labels = ", ".join(f"'{label}'" for label in groups)
        log.warning("No %s polygons found, at least one polygon annotation is required", labels)
        return False
    for label, polygons in groups.items():
        if not polygons:
            log.warning("No '%s' polygons found, only measuring distance to %s",
                        label, ", ".join(f"'{p}'" for p in present))
        elif len(polygons) > 1:
            log.warning("Multiple '%s' polygons found (%d), will measure to the closest one",
                        label, len(polygons))
    return True


def measure_all_groups(
        points: Sequence[QueryPoint],
        groups: Mapping[str, Sequence[Polygon]],
        unit_scale: float,
        tolerance: float = DEGENERATE_TOLERANCE,
) -> List[DistanceRecord]:
    """ Nearest boundary point of every non-empty group, for every query point.

    Emits at most one record per (point, group). No record is emitted for a group
    without polygons, for a group whose polygons have no measurable segment, or for
    a query point with non-finite coordinates; the latter is dropped with a warning
    since it has no closest point to report.

    Raises InvalidUnitScaleException when `unit_scale` is negative or not finite.
    """
    if not math.isfinite(unit_scale) or unit_scale < 0:
        raise InvalidUnitScaleException(unit_scale)

    records = []
    for query in points:
        if not (math.isfinite(query.x) and math.isfinite(query.y)):
            log.warning("Skipping query point with non-finite coordinates (%s, %s)", query.x, query.y)
            continue
        point = query.point
        for label, polygons in groups.items():
            if not polygons:
                continue
            result = nearest_on_group(point, polygons, tolerance)
            if not result.found:
                log.debug("no measurable segment in '%s' for point (%s, %s)", label, query.x, query.y)
                continue
            records.append(DistanceRecord(
                query=query,
                label=label,
                closest=result.closest,
                distance=result.distance,
                scaled_distance=result.distance * unit_scale,
            ))
    log.debug("measured %d distances for %d points", len(records), len(points))
    return records


def apply_measurements(records: Sequence[DistanceRecord],
                       unit: str | None = None) -> List[Tuple[QueryPoint, Dict[str, float]]]:
    """Merge each query point's records into one measurement dict, in first-seen order."""
    merged: Dict[int, Tuple[QueryPoint, Dict[str, float]]] = {}
    for record in records:
        key = id(record.query)
        if key not in merged:
            merged[key] = (record.query, {})
        merged[key][1].update(record.measurements(unit))
    return list(merged.values())
