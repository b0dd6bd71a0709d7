"""Country passport / visa / ID photo specifications.

Reference data shared by the catalogue and the template picker. Every
entry is at 300 DPI so the pixel sizes print at the stated millimetres.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class CountryTemplate:
    id: str
    country: str
    document_type: str
    width_mm: float
    height_mm: float
    width_px: int
    height_px: int
    dpi: int = 300
    bg_color: str = "#FFFFFF"
    notes: Optional[str] = None
    popular: bool = False

COUNTRY_TEMPLATES: Tuple[CountryTemplate, ...] = (
    CountryTemplate("india_passport", "India", "Passport", 35, 45, 413, 531,
                    notes="80% face coverage, white background", popular=True),
    CountryTemplate("india_visa", "India", "Visa", 51, 51, 602, 602,
                    notes="Square format, white background"),
    CountryTemplate("india_aadhaar", "India", "Aadhaar Card", 35, 45, 413, 531),
    CountryTemplate("india_pan", "India", "PAN Card", 25, 35, 295, 413),
    CountryTemplate("stamp_size", "India", "Stamp Size", 20, 25, 236, 295),
    CountryTemplate("us_passport", "USA", "Passport", 51, 51, 600, 600,
                    notes="2x2 inches, white/off-white background", popular=True),
    CountryTemplate("us_visa", "USA", "Visa", 51, 51, 600, 600),
    CountryTemplate("uk_passport", "UK", "Passport", 35, 45, 413, 531, bg_color="#F5F5F5",
                    notes="Light grey or cream background", popular=True),
    CountryTemplate("schengen_visa", "Europe", "Schengen Visa", 35, 45, 413, 531, bg_color="#E8E8E8",
                    notes="Light grey background", popular=True),
    CountryTemplate("canada_passport", "Canada", "Passport", 50, 70, 590, 826),
    CountryTemplate("australia_passport", "Australia", "Passport", 35, 45, 413, 531),
    CountryTemplate("japan_passport", "Japan", "Passport", 35, 45, 413, 531),
    CountryTemplate("china_visa", "China", "Visa", 33, 48, 390, 567),
)

_BY_ID = {t.id: t for t in COUNTRY_TEMPLATES}

def get_template(template_id: str) -> CountryTemplate:
    try:
        return _BY_ID[template_id]
    except KeyError:
        raise ValueError(f"Unknown photo template: {template_id}") from None

def search_templates(query: str) -> Tuple[CountryTemplate, ...]:
    q = query.strip().lower()
    if not q:
        return COUNTRY_TEMPLATES
    return tuple(
        t for t in COUNTRY_TEMPLATES
        if q in t.country.lower() or q in t.document_type.lower() or q in t.id
    )

def popular_templates() -> Tuple[CountryTemplate, ...]:
    return tuple(t for t in COUNTRY_TEMPLATES if t.popular)
