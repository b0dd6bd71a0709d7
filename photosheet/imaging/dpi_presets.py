from __future__ import annotations
from typing import Dict, Tuple, List
from photosheet.models.enums import QualityPreset

QUALITY_TO_DPI: Dict[QualityPreset, int] = {
    QualityPreset.DRAFT: 150,
    QualityPreset.STANDARD: 300,
    QualityPreset.FINE: 600,
}

DPI_CHOICES: List[Tuple[int, str]] = [
    (150, "Proof prints, quick previews"),
    (300, "Photo lab standard for ID prints"),
    (600, "Fine inkjet output; large files"),
]

SUPPORTED_DPI = frozenset(dpi for dpi, _ in DPI_CHOICES)

def default_dpi_for(q: QualityPreset) -> int:
    return QUALITY_TO_DPI[q]
