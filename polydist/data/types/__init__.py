"""Annotation document types.

Pydantic models for the JSON documents polydist reads: one image's annotations,
each with a class label and a region of interest.
"""

from polydist.data.types.enums import (
    AREA_ROI_TYPES,
    RoiType,
)

from polydist.data.types.annotation import (
    Annotation,
    AnnotationSet,
    Roi,
)

__all__ = [
    # Enums
    "AREA_ROI_TYPES",
    "RoiType",
    # Annotations
    "Annotation",
    "AnnotationSet",
    "Roi",
]
