"""Photo size and paper catalogues.

Both tables are built once at import and never mutated afterwards.
"""
from __future__ import annotations
from typing import Dict, Tuple

from photosheet.data.templates import COUNTRY_TEMPLATES, CountryTemplate
from photosheet.models.photo import PhotoSize, PrintLayout


def photo_size_from_template(template: CountryTemplate) -> PhotoSize:
    return PhotoSize(
        id=template.id,
        name=f"{template.country} {template.document_type}",
        country=template.country,
        width_mm=template.width_mm,
        height_mm=template.height_mm,
        width_px=template.width_px,
        height_px=template.height_px,
        dpi=template.dpi,
        bg_color=template.bg_color,
        notes=template.notes,
    )


PHOTO_SIZES: Tuple[PhotoSize, ...] = tuple(photo_size_from_template(t) for t in COUNTRY_TEMPLATES)

PRINT_LAYOUTS: Tuple[PrintLayout, ...] = (
    PrintLayout("4x6", "4x6 inch (auto-fit)", 4, 6, margin_mm=3, gap_mm=2),
    PrintLayout("a4", "A4 sheet (auto-fit)", 8.27, 11.69, margin_mm=5, gap_mm=3),
    PrintLayout("5x7", "5x7 Maxi (auto-fit)", 5, 7, margin_mm=4, gap_mm=2),
)

DEFAULT_PHOTO_SIZE = PHOTO_SIZES[0]

_SIZES_BY_ID = {s.id: s for s in PHOTO_SIZES}
_LAYOUTS_BY_ID = {l.id: l for l in PRINT_LAYOUTS}


def normalize_id(catalog_id: str) -> str:
    """Catalogue ids are lower case; lookups accept any case and stray spaces."""
    return catalog_id.strip().lower()


def get_photo_size(size_id: str) -> PhotoSize:
    key = normalize_id(size_id)
    if key not in _SIZES_BY_ID:
        raise ValueError(f"Unsupported photo size: {size_id}")
    return _SIZES_BY_ID[key]


def get_print_layout(layout_id: str) -> PrintLayout:
    key = normalize_id(layout_id)
    if key not in _LAYOUTS_BY_ID:
        raise ValueError(f"Unsupported paper layout: {layout_id}")
    return _LAYOUTS_BY_ID[key]


def sizes_by_country() -> Dict[str, Tuple[PhotoSize, ...]]:
    groups: Dict[str, list] = {}
    for size in PHOTO_SIZES:
        groups.setdefault(size.country, []).append(size)
    return {country: tuple(sizes) for country, sizes in groups.items()}
