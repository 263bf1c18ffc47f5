class AnnotationFormatException(Exception):
    """Thrown when an annotation document cannot be read or does not validate."""
    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f'Cannot read annotations from {source}: {reason}')


class InvalidUnitScaleException(Exception):
    """Thrown when the pixel to physical unit scale is negative or not finite."""
    def __init__(self, unit_scale: float):
        self.unit_scale = unit_scale
        super().__init__(f'Unit scale must be a finite, non-negative number, got {unit_scale}')
