from enum import Enum

class QualityPreset(Enum):
    DRAFT = "Draft"
    STANDARD = "Standard"
    FINE = "Fine"

class ExportFormat(Enum):
    JPEG = "JPEG"
    PNG = "PNG"

class Orientation(Enum):
    NORMAL = "Normal"    # photo width along paper width
    ROTATED = "Rotated"  # photo turned 90 degrees
