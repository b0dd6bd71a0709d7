# photosheet/imaging/pipeline.py
# Purpose: print-ready passport photo sheets.
# - Adjusted photo tile rendered at the template's exact size
# - Optional auto-enhance of brightness, contrast and saturation
# - Auto-fit grid (normal or 90 degree rotated) centred on the paper
# - Grey guide borders around each tile, corner cut marks at the margin
# - DPI tagged JPEG/PNG output with progress callbacks for the GUI worker

from __future__ import annotations

import sys
import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from PIL import Image, ImageDraw

from photosheet.imaging.adjust import RESAMPLE_LANCZOS, apply_adjustments
from photosheet.imaging.catalog import PHOTO_SIZES, PRINT_LAYOUTS, get_photo_size, get_print_layout
from photosheet.imaging.dpi_presets import SUPPORTED_DPI, default_dpi_for
from photosheet.imaging.enhance import suggest_adjustments
from photosheet.imaging.layout import grid_cells_mm, resolve_grid, sheets_needed
from photosheet.imaging.sizes import mm_to_pixels, paper_pixels, target_pixels
from photosheet.models.enums import ExportFormat, QualityPreset
from photosheet.models.photo import LayoutResult, PhotoAdjustments, PhotoSize, PrintLayout
from photosheet.models.settings import DEFAULT_LAYOUT_ID, DEFAULT_PRINT_DPI, SheetSettings

log = logging.getLogger("photosheet.pipeline")

GUIDE_COLOR = "#CCCCCC"
CUT_MARK_COLOR = "#999999"
# cut mark arm length at 300 DPI; scaled for other resolutions
CUT_MARK_PX_AT_300 = 20


def banner(msg: str) -> None:
    line = "=" * 72
    log.info("\n%s\n%s\n%s", line, msg, line)


def _emit_progress(cb: Optional[Callable[[int], None]], value: int) -> None:
    if cb is None:
        return
    try:
        cb(max(0, min(100, int(value))))
    except Exception as e:
        log.warning(f"Failed to emit progress {value}: {e}")


# ---------------------------- drawing ----------------------------
def _draw_cut_marks(draw: ImageDraw.ImageDraw, width: int, height: int, margin_px: int, dpi: int) -> None:
    mark = max(1, round(CUT_MARK_PX_AT_300 * dpi / DEFAULT_PRINT_DPI))
    left, top = margin_px, margin_px
    right, bottom = width - 1 - margin_px, height - 1 - margin_px
    for x, y, sx, sy in (
        (left, top, 1, 1),
        (right, top, -1, 1),
        (left, bottom, 1, -1),
        (right, bottom, -1, -1),
    ):
        draw.line([(x, y), (x + sx * mark, y)], fill=CUT_MARK_COLOR, width=1)
        draw.line([(x, y), (x, y + sy * mark)], fill=CUT_MARK_COLOR, width=1)


def render_sheet(
    photo: Image.Image,
    photo_size: PhotoSize,
    layout: PrintLayout,
    dpi: int = DEFAULT_PRINT_DPI,
    result: Optional[LayoutResult] = None,
    cut_marks: bool = True,
    guides: bool = True,
) -> Image.Image:
    """
    Tile `photo` over a white sheet of `layout` paper at `dpi`.

    `photo` is normally the output of `apply_adjustments`; it is resampled to
    the template's millimetre size at the sheet DPI. When `result` is not
    given the grid comes from `resolve_grid`.
    """
    result = result or resolve_grid(photo_size, layout)
    sheet_w, sheet_h = paper_pixels(layout.paper_width_inch, layout.paper_height_inch, dpi)
    sheet = Image.new("RGB", (sheet_w, sheet_h), "#FFFFFF")
    draw = ImageDraw.Draw(sheet)

    tile = photo.convert("RGB").resize(
        target_pixels(photo_size.width_mm, photo_size.height_mm, dpi), resample=RESAMPLE_LANCZOS
    )
    if result.rotated:
        tile = tile.transpose(Image.Transpose.ROTATE_90)

    for x_mm, y_mm, _, _ in grid_cells_mm(photo_size, layout, result):
        x, y = round(mm_to_pixels(x_mm, dpi)), round(mm_to_pixels(y_mm, dpi))
        sheet.paste(tile, (x, y))
        if guides:
            draw.rectangle([x, y, x + tile.width - 1, y + tile.height - 1], outline=GUIDE_COLOR, width=1)

    if cut_marks:
        _draw_cut_marks(draw, sheet_w, sheet_h, round(mm_to_pixels(layout.margin_mm, dpi)), dpi)

    log.info(
        "Sheet %s: %d x %d grid (%d photos%s) at %dx%d px",
        layout.id, result.columns, result.rows, result.photo_count,
        ", rotated" if result.rotated else "", sheet_w, sheet_h,
    )
    return sheet


# ---------------------------- public API ----------------------------
def _render_to(
    src: Path,
    out_path: Path,
    size: PhotoSize,
    layout: PrintLayout,
    dpi: int,
    adjustments: Optional[PhotoAdjustments],
    export_format: ExportFormat,
    jpeg_quality: int,
    cut_marks: bool,
    guides: bool,
    progress_cb: Optional[Callable[[int], None]],
    auto_enhance: bool = False,
) -> Path:
    if dpi not in SUPPORTED_DPI:
        raise ValueError(f"Unsupported print DPI: {dpi} (choose from {sorted(SUPPORTED_DPI)})")
    if not src.exists():
        raise FileNotFoundError(f"Input photo not found: {src}")

    result = resolve_grid(size, layout)
    if result.photo_count == 0:
        raise ValueError(f"{size.name} ({size.dimensions}) does not fit on {layout.name}")

    _emit_progress(progress_cb, 0)
    banner(f"{size.name.upper()} ON {layout.name.upper()}")
    log.info(f"Source: {src}")

    with Image.open(src) as im_src:
        if auto_enhance:
            adjustments = suggest_adjustments(im_src, adjustments)
        tile = apply_adjustments(im_src, size, adjustments)
    _emit_progress(progress_cb, 30)

    sheet = render_sheet(tile, size, layout, dpi=dpi, result=result, cut_marks=cut_marks, guides=guides)
    _emit_progress(progress_cb, 80)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    if export_format is ExportFormat.JPEG:
        sheet.save(out_path, format="JPEG", quality=jpeg_quality, dpi=(dpi, dpi))
    else:
        sheet.save(out_path, format="PNG", dpi=(dpi, dpi))
    _emit_progress(progress_cb, 100)

    log.info(f"Output: {out_path}")
    return out_path


def process_sheet(
    input_path: str | Path,
    output_dir: str | Path,
    size_id: str,
    layout_id: str = DEFAULT_LAYOUT_ID,
    dpi: int = DEFAULT_PRINT_DPI,
    adjustments: Optional[PhotoAdjustments] = None,
    export_format: ExportFormat = ExportFormat.JPEG,
    jpeg_quality: int = 95,
    cut_marks: bool = True,
    guides: bool = True,
    progress_cb: Optional[Callable[[int], None]] = None,
    auto_enhance: bool = False,
) -> Path:
    """Render one print sheet for `input_path` into `output_dir` and return its path."""
    src = Path(input_path)
    size = get_photo_size(size_id)
    layout = get_print_layout(layout_id)
    ext = export_format.value.lower()
    out_path = Path(output_dir) / f"{src.stem}__{size.id}_{layout.id}_{dpi}dpi.{ext}"
    return _render_to(
        src, out_path, size, layout, dpi, adjustments,
        export_format, jpeg_quality, cut_marks, guides, progress_cb,
        auto_enhance=auto_enhance,
    )


def process_and_save(
    input_path: str | Path,
    output_path: str | Path,
    settings: SheetSettings,
    progress_cb: Optional[Callable[[int], None]] = None,
) -> Path:
    """Settings-driven variant used by the batch worker; writes exactly `output_path`."""
    return _render_to(
        Path(input_path),
        Path(output_path),
        get_photo_size(settings.size_id),
        get_print_layout(settings.layout_id),
        settings.dpi,
        settings.adjustments,
        settings.export_format,
        settings.jpeg_quality,
        settings.cut_marks,
        settings.guides,
        progress_cb,
        auto_enhance=settings.auto_enhance,
    )


# ---------------------------- CLI helper ----------------------------
def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    from photosheet.utils.logging_utils import build_logger

    ap = argparse.ArgumentParser(description="Passport photo print sheets.")
    ap.add_argument("-i", "--input", required=True, help="Path to source photo")
    ap.add_argument("-o", "--outdir", required=True, help="Output directory")
    ap.add_argument("--size", choices=[s.id for s in PHOTO_SIZES], default=PHOTO_SIZES[0].id)
    ap.add_argument("--layout", choices=[l.id for l in PRINT_LAYOUTS], default=DEFAULT_LAYOUT_ID)
    ap.add_argument("--quality", choices=[q.name.lower() for q in QualityPreset], default="standard")
    ap.add_argument("--dpi", type=int, help="Overrides the DPI implied by --quality")
    ap.add_argument("--png", action="store_true", help="Write PNG instead of JPEG")
    ap.add_argument("--brightness", type=float, default=100)
    ap.add_argument("--contrast", type=float, default=100)
    ap.add_argument("--saturation", type=float, default=100)
    ap.add_argument("--auto-enhance", action="store_true",
                    help="Replace brightness/contrast/saturation with suggested values")
    ap.add_argument("--copies", type=int, default=0, help="Report how many sheets an order needs")
    ap.add_argument("--no-cut-marks", action="store_true")
    ap.add_argument("--no-guides", action="store_true")

    args = ap.parse_args(argv)
    logger = build_logger()
    dpi = args.dpi or default_dpi_for(QualityPreset[args.quality.upper()])

    try:
        out = process_sheet(
            input_path=args.input,
            output_dir=args.outdir,
            size_id=args.size,
            layout_id=args.layout,
            dpi=dpi,
            adjustments=PhotoAdjustments(
                brightness=args.brightness, contrast=args.contrast, saturation=args.saturation
            ),
            export_format=ExportFormat.PNG if args.png else ExportFormat.JPEG,
            cut_marks=not args.no_cut_marks,
            guides=not args.no_guides,
            auto_enhance=args.auto_enhance,
        )
        if args.copies:
            result = resolve_grid(get_photo_size(args.size), get_print_layout(args.layout))
            logger.info("%d copies need %d sheet(s) of %s", args.copies,
                        sheets_needed(args.copies, result), out.name)
    except Exception as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
