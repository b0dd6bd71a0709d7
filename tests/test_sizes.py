from photosheet.imaging.sizes import paper_pixels, target_pixels, to_mm

def test_target_pixels_basic():
    w, h = target_pixels(35, 45, 300)  # passport @ 300 DPI
    assert (w, h) == (413, 531)

def test_paper_pixels_4x6():
    assert paper_pixels(4, 6, 300) == (1200, 1800)

def test_inches_to_mm():
    assert to_mm(2) == 50.8
