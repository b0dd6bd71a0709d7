# photosheet/imaging/adjust.py
# Purpose: turn a customer's source photo into a single ID-sized print tile.

from __future__ import annotations

import logging
import math
from typing import Optional

from PIL import Image, ImageColor, ImageEnhance, ImageOps

from photosheet.models.photo import PhotoAdjustments, PhotoSize

RESAMPLE_LANCZOS = Image.Resampling.LANCZOS
RESAMPLE_BICUBIC = Image.Resampling.BICUBIC

log = logging.getLogger("photosheet.adjust")


def _aspect_fill(img: Image.Image, width: int, height: int) -> Image.Image:
    img_aspect = img.width / img.height
    if img_aspect > width / height:
        # wider than the tile: match height, overflow sideways
        size = (max(1, round(height * img_aspect)), height)
    else:
        size = (width, max(1, round(width / img_aspect)))
    return img.resize(size, resample=RESAMPLE_LANCZOS)


def _enhance(img: Image.Image, adj: PhotoAdjustments) -> Image.Image:
    if adj.brightness != 100:
        img = ImageEnhance.Brightness(img).enhance(adj.brightness / 100.0)
    if adj.contrast != 100:
        img = ImageEnhance.Contrast(img).enhance(adj.contrast / 100.0)
    if adj.saturation != 100:
        img = ImageEnhance.Color(img).enhance(adj.saturation / 100.0)
    return img


def apply_adjustments(
    image: Image.Image,
    photo_size: PhotoSize,
    adjustments: Optional[PhotoAdjustments] = None,
) -> Image.Image:
    """
    Render `image` onto a `photo_size.width_px x photo_size.height_px` tile.

    The photo is first turned upright per its EXIF orientation, then
    aspect-filled over the template background colour, then
    scaled, rotated (positive degrees turn clockwise) and shifted about the
    tile centre. Brightness, contrast and saturation are percentages where
    100 leaves the photo untouched.
    """
    adj = adjustments or PhotoAdjustments()
    width, height = photo_size.width_px, photo_size.height_px
    bg = ImageColor.getrgb(photo_size.bg_color)[:3]
    # camera photos carry their rotation in EXIF; render them upright
    image = ImageOps.exif_transpose(image)

    canvas = Image.new("RGB", (width, height), bg)
    photo = _enhance(_aspect_fill(image.convert("RGB"), width, height), adj)

    if adj.scale != 1:
        photo = photo.resize(
            (max(1, round(photo.width * adj.scale)), max(1, round(photo.height * adj.scale))),
            resample=RESAMPLE_LANCZOS,
        )

    photo = photo.convert("RGBA")
    if adj.rotation % 360:
        photo = photo.rotate(-adj.rotation, resample=RESAMPLE_BICUBIC, expand=True)

    # offsets live in the scaled, rotated frame of the photo
    theta = math.radians(adj.rotation)
    dx = adj.scale * (adj.offset_x * math.cos(theta) - adj.offset_y * math.sin(theta))
    dy = adj.scale * (adj.offset_x * math.sin(theta) + adj.offset_y * math.cos(theta))
    x = round((width - photo.width) / 2 + dx)
    y = round((height - photo.height) / 2 + dy)

    canvas.paste(photo, (x, y), photo)
    if not adj.is_neutral:
        log.info("Applied adjustments %s to %s tile", adj, photo_size.id)
    return canvas
