from photosheet.models.photo import DEFAULT_ADJUSTMENTS, PhotoAdjustments, default_adjustments

def test_neutral_adjustments():
    adj = default_adjustments()
    assert (adj.brightness, adj.contrast, adj.saturation) == (100, 100, 100)
    assert (adj.rotation, adj.scale, adj.offset_x, adj.offset_y) == (0, 1, 0, 0)
    assert adj.is_neutral

def test_default_adjustments_are_independent_copies():
    adj = default_adjustments()
    adj.brightness = 120
    assert DEFAULT_ADJUSTMENTS.brightness == 100
    assert default_adjustments().is_neutral

def test_reset_restores_neutral():
    adj = PhotoAdjustments(brightness=80, rotation=5, scale=1.2, offset_x=-4)
    assert not adj.is_neutral
    adj.reset()
    assert adj == PhotoAdjustments()
