# photosheet/imaging/layout.py
# Purpose: work out how many copies of one photo fit on a sheet of paper.
#
# Everything here is a pure function of its inputs. Callers guarantee
# positive photo/paper dimensions and non-negative margin/gap; the catalogue
# layer is where bad values get rejected. Non-positive inputs give
# meaningless (negative or infinite) results rather than an exception.

from __future__ import annotations

import math
from typing import List, Tuple

from photosheet.imaging.sizes import to_mm
from photosheet.models.enums import Orientation
from photosheet.models.photo import LayoutResult, PhotoSize, PrintLayout

Cell = Tuple[float, float, float, float]  # x, y, width, height in mm


def fit_count(length: float, item: float, gap: float) -> int:
    """Items of size `item` that fit in `length` with `gap` between them.

    The last item needs no trailing gap, hence the `length + gap`.
    """
    return max(0, math.floor((length + gap) / (item + gap)))


def usable_area_mm(layout: PrintLayout) -> Tuple[float, float]:
    return (
        to_mm(layout.paper_width_inch) - 2 * layout.margin_mm,
        to_mm(layout.paper_height_inch) - 2 * layout.margin_mm,
    )


def _tile_mm(photo_size: PhotoSize, orientation: Orientation) -> Tuple[float, float]:
    if orientation is Orientation.ROTATED:
        return photo_size.height_mm, photo_size.width_mm
    return photo_size.width_mm, photo_size.height_mm


def evaluate_orientation(photo_size: PhotoSize, layout: PrintLayout,
                         orientation: Orientation) -> LayoutResult:
    usable_w, usable_h = usable_area_mm(layout)
    tile_w, tile_h = _tile_mm(photo_size, orientation)
    columns = fit_count(usable_w, tile_w, layout.gap_mm)
    rows = fit_count(usable_h, tile_h, layout.gap_mm)
    return LayoutResult(
        columns=columns,
        rows=rows,
        rotated=orientation is Orientation.ROTATED,
        photo_count=columns * rows,
    )


def calculate_optimal_layout(photo_size: PhotoSize, layout: PrintLayout) -> LayoutResult:
    """
    Grid arrangement giving the most whole photos per sheet.

    Candidates are tried in `Orientation` order and a later one only
    replaces the current best when its count is strictly higher, so a tie
    keeps the photo upright. A photo that fits nowhere yields a
    non-rotated 0 x 0 result.
    """
    best = None
    for orientation in Orientation:
        candidate = evaluate_orientation(photo_size, layout, orientation)
        if best is None or candidate.photo_count > best.photo_count:
            best = candidate
    return best


def resolve_grid(photo_size: PhotoSize, layout: PrintLayout) -> LayoutResult:
    """Fixed grid for non auto-fit layouts, otherwise the optimal one."""
    if not layout.auto_fit and layout.columns and layout.rows:
        return LayoutResult(layout.columns, layout.rows, False, layout.columns * layout.rows)
    return calculate_optimal_layout(photo_size, layout)


def grid_cells_mm(photo_size: PhotoSize, layout: PrintLayout, result: LayoutResult) -> List[Cell]:
    """Tile rectangles for `result`, row by row, with the grid centred on the paper."""
    if result.photo_count == 0:
        return []
    orientation = Orientation.ROTATED if result.rotated else Orientation.NORMAL
    tile_w, tile_h = _tile_mm(photo_size, orientation)
    gap = layout.gap_mm

    grid_w = result.columns * tile_w + (result.columns - 1) * gap
    grid_h = result.rows * tile_h + (result.rows - 1) * gap
    start_x = (to_mm(layout.paper_width_inch) - grid_w) / 2
    start_y = (to_mm(layout.paper_height_inch) - grid_h) / 2

    return [
        (start_x + col * (tile_w + gap), start_y + row * (tile_h + gap), tile_w, tile_h)
        for row in range(result.rows)
        for col in range(result.columns)
    ]


def sheets_needed(copies: int, result: LayoutResult) -> int:
    if copies <= 0:
        return 0
    if result.photo_count == 0:
        raise ValueError("Photo does not fit on this paper; no sheets can be printed")
    return -(-copies // result.photo_count)
