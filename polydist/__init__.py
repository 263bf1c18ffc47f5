__version__ = "1.0.0"

import polydist.logging
from polydist import geometry
from polydist import measure

Point2d = geometry.Point2d
Polygon = geometry.Polygon
NearestResult = geometry.NearestResult
QueryPoint = measure.QueryPoint
DistanceRecord = measure.DistanceRecord
measure_all_groups = measure.measure_all_groups
