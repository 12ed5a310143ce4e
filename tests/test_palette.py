import pytest

from nestoolkit.palette import ntsc_color


def test_first_colour():
    assert ntsc_color(0x00) == (84, 84, 84)


def test_every_colour_is_rgb_bytes():
    for index in range(0x40):
        colour = ntsc_color(index)
        assert len(colour) == 3
        assert all(0 <= component <= 255 for component in colour)


@pytest.mark.parametrize("index", [0x0D, 0x0E, 0x0F, 0x1D, 0x1E, 0x1F, 0x2E, 0x2F, 0x3E, 0x3F])
def test_unused_entries_are_black(index):
    assert ntsc_color(index) == ntsc_color(0x0F)
    assert sum(ntsc_color(index)) == 0


def test_white_entries_agree():
    assert ntsc_color(0x20) == ntsc_color(0x30)


def test_brighter_rows_are_brighter():
    for column in range(0x0D):
        dark = sum(ntsc_color(column))
        light = sum(ntsc_color(0x20 + column))
        assert light > dark


@pytest.mark.parametrize("index", [-1, 0x40, 0xFF])
def test_out_of_range_raises(index):
    with pytest.raises(ValueError):
        ntsc_color(index)