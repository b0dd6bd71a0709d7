from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from .enums import ExportFormat
from .photo import PhotoAdjustments

DEFAULT_PRINT_DPI = 300
DEFAULT_LAYOUT_ID = "4x6"

@dataclass(frozen=True)
class SheetSettings:
    size_id: str
    output_dir: Path
    layout_id: str = DEFAULT_LAYOUT_ID
    dpi: int = DEFAULT_PRINT_DPI
    export_format: ExportFormat = ExportFormat.JPEG
    jpeg_quality: int = 95
    cut_marks: bool = True
    guides: bool = True
    auto_enhance: bool = False
    adjustments: PhotoAdjustments = field(default_factory=PhotoAdjustments)
    stop_on_first_error: bool = False
