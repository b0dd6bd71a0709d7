# photosheet/imaging/enhance.py
# Purpose: one-click tone suggestions for passport photos.
# - Mean luminance pulled towards a well-lit target
# - Luminance spread (std-dev) pulled towards a moderate contrast target
# - Saturation nudged up for washed-out shots, down for garish ones

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from PIL import Image, ImageStat

from photosheet.models.photo import PhotoAdjustments

log = logging.getLogger("photosheet.enhance")

# longest side of the thumbnail that gets measured
ANALYSIS_SIZE = 200

TARGET_BRIGHTNESS = 150
DARK_BELOW, BRIGHT_ABOVE = 100, 200
BRIGHTNESS_MIN, BRIGHTNESS_MAX = 70, 150

TARGET_STDDEV = 60
FLAT_BELOW, HARSH_ABOVE = 40, 80
CONTRAST_MIN, CONTRAST_MAX = 80, 140

# summed per-channel distance from the grey mean
DULL_BELOW, VIVID_ABOVE = 20, 50
DULL_SATURATION, VIVID_SATURATION = 115, 90


def _suggest_brightness(mean: float) -> float:
    if mean < DARK_BELOW:
        return min(BRIGHTNESS_MAX, 100 + (TARGET_BRIGHTNESS - mean) * 0.4)
    if mean > BRIGHT_ABOVE:
        return max(BRIGHTNESS_MIN, 100 - (mean - TARGET_BRIGHTNESS) * 0.3)
    return 100


def _suggest_contrast(stddev: float) -> float:
    if stddev < FLAT_BELOW:
        return min(CONTRAST_MAX, 100 + (TARGET_STDDEV - stddev) * 0.8)
    if stddev > HARSH_ABOVE:
        return max(CONTRAST_MIN, 100 - (stddev - TARGET_STDDEV) * 0.3)
    return 100


def _suggest_saturation(mean_r: float, mean_g: float, mean_b: float) -> float:
    grey = (mean_r + mean_g + mean_b) / 3
    cast = abs(mean_r - grey) + abs(mean_g - grey) + abs(mean_b - grey)
    if cast < DULL_BELOW:
        return DULL_SATURATION
    if cast > VIVID_ABOVE:
        return VIVID_SATURATION
    return 100


def suggest_adjustments(image: Image.Image, base: Optional[PhotoAdjustments] = None) -> PhotoAdjustments:
    """
    Brightness, contrast and saturation suggested for `image`.

    Geometry (rotation, scale, offsets) is copied from `base` untouched, so
    an operator's framing survives an auto-enhance.
    """
    sample = image.convert("RGB")
    sample.thumbnail((ANALYSIS_SIZE, ANALYSIS_SIZE))

    luma = ImageStat.Stat(sample.convert("L"))
    mean_r, mean_g, mean_b = ImageStat.Stat(sample).mean
    mean, stddev = luma.mean[0], luma.stddev[0]

    suggested = replace(
        base or PhotoAdjustments(),
        brightness=_suggest_brightness(mean),
        contrast=_suggest_contrast(stddev),
        saturation=_suggest_saturation(mean_r, mean_g, mean_b),
    )
    log.info(
        "Auto-enhance: luma %.1f, spread %.1f -> brightness %.0f, contrast %.0f, saturation %.0f",
        mean, stddev, suggested.brightness, suggested.contrast, suggested.saturation,
    )
    return suggested
