import enum


class RoiType(enum.StrEnum):
    point = enum.auto()
    line = enum.auto()
    polyline = enum.auto()
    polygon = enum.auto()
    rectangle = enum.auto()


AREA_ROI_TYPES = frozenset({RoiType.polygon, RoiType.rectangle})
