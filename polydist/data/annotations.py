import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from pydantic import ValidationError

from polydist.data.types import Annotation, AnnotationSet, RoiType
from polydist.exceptions import AnnotationFormatException
from polydist.geometry import Polygon
from polydist.measure import DistanceRecord, QueryPoint
from polydist.settings import settings

log = logging.getLogger('polydist.data')


def query_points_from_annotations(annotations: Iterable[Annotation], class_label: str) -> List[QueryPoint]:
    """ One query point per point of a point ROI, one at the centroid for any other ROI. """
    query_points = []
    for annotation in annotations:
        if annotation.classLabel != class_label:
            continue
        roi = annotation.roi
        if roi.type == RoiType.point:
            for i, p in enumerate(roi.points):
                query_points.append(QueryPoint(x=p.x, y=p.y, ref=annotation, index=i))
        else:
            c = roi.centroid()
            query_points.append(QueryPoint(x=c.x, y=c.y, ref=annotation))
    return query_points


def polygon_groups_from_annotations(annotations: Iterable[Annotation],
                                    labels: Sequence[str]) -> Dict[str, List[Polygon]]:
    """ Polygons per requested label, in label order; labels without polygons map to []. """
    groups: Dict[str, List[Polygon]] = {label: [] for label in labels}
    for annotation in annotations:
        if annotation.classLabel not in groups or annotation.roi.type == RoiType.point:
            continue
        groups[annotation.classLabel].append(annotation.roi.to_polygon(id=annotation.id))
    return groups


def load_annotation_set(path: str | Path) -> AnnotationSet:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            annotation_set = AnnotationSet(**json.load(f))
    except (OSError, json.JSONDecodeError, TypeError) as e:
        raise AnnotationFormatException(str(path), str(e)) from e
    except ValidationError as e:
        raise AnnotationFormatException(str(path), f"{e.error_count()} validation error(s)") from e
    log.debug("loaded %d annotations from %s", len(annotation_set.annotations), path)
    return annotation_set


def record_to_dict(record: DistanceRecord, unit: str | None = None) -> dict:
    unit = unit if unit is not None else settings.unit
    ref = record.query.ref
    return {
        "annotation_id": ref.id if isinstance(ref, Annotation) else None,
        "index": record.query.index,
        "x": record.query.x,
        "y": record.query.y,
        "label": record.label,
        "closest_x": record.closest.x,
        "closest_y": record.closest.y,
        "distance": record.distance,
        "scaled_distance": record.scaled_distance,
        "unit": unit,
        "caption": record.caption(unit),
    }


def dump_records(records: Sequence[DistanceRecord], path: str | Path, unit: str | None = None) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump([record_to_dict(r, unit) for r in records], f, indent=2, ensure_ascii=False)
    log.info("wrote %d records to %s", len(records), path)
