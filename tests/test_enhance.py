import pytest
from PIL import Image
from photosheet.imaging.enhance import suggest_adjustments
from photosheet.models.photo import PhotoAdjustments


def test_dark_flat_grey_photo_is_lifted():
    adj = suggest_adjustments(Image.new("RGB", (300, 400), (40, 40, 40)))
    assert adj.brightness == pytest.approx(144)   # 100 + (150 - 40) * 0.4
    assert adj.contrast == 140                    # capped
    assert adj.saturation == 115                  # no colour at all


def test_flat_mid_grey_only_gets_contrast_and_colour():
    adj = suggest_adjustments(Image.new("RGB", (120, 120), (128, 128, 128)))
    assert adj.brightness == 100
    assert adj.contrast == 140
    assert adj.saturation == 115


def test_overexposed_photo_is_darkened():
    adj = suggest_adjustments(Image.new("RGB", (120, 120), (230, 230, 230)))
    assert adj.brightness == pytest.approx(76)    # 100 - (230 - 150) * 0.3


def test_very_bright_photo_hits_the_floor():
    # 100 - (255 - 150) * 0.3 = 68.5, clamped
    adj = suggest_adjustments(Image.new("RGB", (120, 120), (255, 255, 255)))
    assert adj.brightness == 70


def test_over_saturated_photo_is_toned_down():
    adj = suggest_adjustments(Image.new("RGB", (120, 120), (220, 30, 30)))
    assert adj.saturation == 90


def test_harsh_contrast_is_softened():
    img = Image.new("RGB", (100, 100), (0, 0, 0))
    img.paste((255, 255, 255), (50, 0, 100, 100))
    adj = suggest_adjustments(img)
    assert adj.brightness == 100
    assert adj.contrast == 80   # 100 - (127.5 - 60) * 0.3 is below the floor


def test_framing_survives_auto_enhance():
    base = PhotoAdjustments(rotation=4, scale=1.2, offset_x=-10, offset_y=6)
    adj = suggest_adjustments(Image.new("RGB", (64, 64), (40, 40, 40)), base)
    assert (adj.rotation, adj.scale, adj.offset_x, adj.offset_y) == (4, 1.2, -10, 6)
    assert base.brightness == 100
