from PIL import Image
from photosheet.imaging.adjust import apply_adjustments
from photosheet.imaging.catalog import get_photo_size
from photosheet.models.photo import PhotoAdjustments


def test_neutral_adjustments_fill_the_tile():
    size = get_photo_size("india_passport")
    src = Image.new("RGB", (200, 200), (128, 128, 128))
    tile = apply_adjustments(src, size)
    assert tile.size == (413, 531)
    # aspect-fill leaves no background showing
    assert tile.getpixel((0, 0)) == (128, 128, 128)
    assert tile.getpixel((412, 530)) == (128, 128, 128)


def test_scale_down_shows_template_background():
    size = get_photo_size("uk_passport")
    src = Image.new("RGB", (300, 200), (10, 120, 200))
    tile = apply_adjustments(src, size, PhotoAdjustments(scale=0.5))
    assert tile.getpixel((0, 0)) == (245, 245, 245)
    assert tile.getpixel((206, 265)) == (10, 120, 200)


def test_offset_moves_photo_off_centre():
    size = get_photo_size("india_passport")
    src = Image.new("RGB", (200, 200), (0, 0, 0))
    tile = apply_adjustments(src, size, PhotoAdjustments(scale=0.5, offset_x=200))
    # shifted right by 100 px: left edge is background, right side is photo
    assert tile.getpixel((80, 265)) == (255, 255, 255)
    assert tile.getpixel((350, 265)) == (0, 0, 0)


def test_brightness_and_saturation():
    size = get_photo_size("india_pan")
    grey = Image.new("RGB", (100, 100), (128, 128, 128))
    darker = apply_adjustments(grey, size, PhotoAdjustments(brightness=50))
    assert darker.getpixel((147, 206)) == (64, 64, 64)

    red = Image.new("RGB", (100, 100), (255, 0, 0))
    mono = apply_adjustments(red, size, PhotoAdjustments(saturation=0))
    r, g, b = mono.getpixel((147, 206))
    assert r == g == b


def test_rotation_keeps_tile_size():
    size = get_photo_size("china_visa")
    src = Image.new("RGB", (640, 480), (50, 90, 30))
    tile = apply_adjustments(src, size, PhotoAdjustments(rotation=15))
    assert tile.size == (390, 567)
    # centre is still covered by the photo
    r, g, b = tile.getpixel((195, 283))
    assert abs(r - 50) <= 2 and abs(g - 90) <= 2 and abs(b - 30) <= 2


def test_exif_orientation_is_honoured(tmp_path):
    # stored landscape, red left / blue right; orientation 6 shows it turned
    # clockwise, so upright it is red on top and blue underneath
    src = Image.new("RGB", (400, 300), (255, 0, 0))
    src.paste((0, 0, 255), (200, 0, 400, 300))
    exif = Image.Exif()
    exif[0x0112] = 6
    path = tmp_path / "phone.jpg"
    src.save(path, exif=exif)

    with Image.open(path) as im:
        tile = apply_adjustments(im, get_photo_size("india_passport"))
    top, bottom = tile.getpixel((206, 40)), tile.getpixel((206, 490))
    assert top[0] > 200 and top[2] < 60
    assert bottom[2] > 200 and bottom[0] < 60
