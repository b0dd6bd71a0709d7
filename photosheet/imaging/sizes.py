from __future__ import annotations
from typing import Tuple

MM_PER_INCH = 25.4

def to_inches(mm: float) -> float:
    return mm / MM_PER_INCH

def to_mm(inches: float) -> float:
    return inches * MM_PER_INCH

def mm_to_pixels(mm: float, dpi: int) -> float:
    return to_inches(mm) * dpi

def target_pixels(width_mm: float, height_mm: float, dpi: int) -> Tuple[int, int]:
    w = max(1, round(mm_to_pixels(width_mm, dpi)))
    h = max(1, round(mm_to_pixels(height_mm, dpi)))
    return (w, h)

def paper_pixels(width_inch: float, height_inch: float, dpi: int) -> Tuple[int, int]:
    return (max(1, round(width_inch * dpi)), max(1, round(height_inch * dpi)))
