from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True)
class PhotoSize:
    id: str
    name: str
    country: str
    width_mm: float
    height_mm: float
    width_px: int
    height_px: int
    dpi: int
    bg_color: str
    notes: Optional[str] = None

    @property
    def dimensions(self) -> str:
        return f"{self.width_mm:g} x {self.height_mm:g} mm"

@dataclass(frozen=True)
class PrintLayout:
    id: str
    name: str
    paper_width_inch: float
    paper_height_inch: float
    margin_mm: float
    gap_mm: float
    auto_fit: bool = True
    # fixed grid, only honoured when auto_fit is off
    columns: Optional[int] = None
    rows: Optional[int] = None

@dataclass
class PhotoAdjustments:
    brightness: float = 100
    contrast: float = 100
    saturation: float = 100
    rotation: float = 0
    scale: float = 1
    offset_x: float = 0
    offset_y: float = 0

    @property
    def is_neutral(self) -> bool:
        return self == PhotoAdjustments()

    def reset(self) -> None:
        for name, value in vars(PhotoAdjustments()).items():
            setattr(self, name, value)

@dataclass(frozen=True)
class LayoutResult:
    columns: int
    rows: int
    rotated: bool
    photo_count: int

DEFAULT_ADJUSTMENTS = PhotoAdjustments()

def default_adjustments() -> PhotoAdjustments:
    """Fresh neutral adjustments for a new editing session."""
    return replace(DEFAULT_ADJUSTMENTS)
