import json
import sys

import matplotlib.pyplot as plt

from polydist.data.annotations import (
    load_annotation_set,
    polygon_groups_from_annotations,
    query_points_from_annotations,
    record_to_dict,
)
from polydist.logging import configure_logging
from polydist.measure import check_groups, measure_all_groups
from polydist.visualize import DistancePlot

configure_logging()

annotations_path = sys.argv[1]
image_path = sys.argv[2] if len(sys.argv) > 2 else None

annotation_set = load_annotation_set(annotations_path)
points = query_points_from_annotations(annotation_set.annotations, "fibre")
groups = polygon_groups_from_annotations(annotation_set.annotations, ["endo", "epi"])

if check_groups(points, groups):
    records = measure_all_groups(points, groups, annotation_set.pixelSizeMicrons or 1.0)
    print(json.dumps([record_to_dict(r) for r in records], indent=2, ensure_ascii=False))
    if image_path is not None:
        plt.imshow(plt.imread(image_path))
    plot = DistancePlot(plt.gca())
    plot.polygons(groups)
    plot.records(records)
    plt.show()
