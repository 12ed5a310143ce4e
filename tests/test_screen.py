import pytest

from nestoolkit.screen import ScreenBuffer, color


def test_color_pairs_share_colours():
    for low in range(2, 8):
        assert color(low) == color(low + 7)
    assert color(0) != color(1)
    assert len({color(v) for v in range(9)}) == 9


def test_color_black_and_default():
    assert color(0) == (0, 0, 0)
    assert color(15) == color(255) == color(8)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        ScreenBuffer(32, (0x200, 0x300))


def test_buffer_dimensions():
    screen = ScreenBuffer(4, (0, 16))
    assert len(screen.texture_data) == 4 * 4 * 3
    assert screen.texture_row_size == 4 * 3


def test_update_with_black_memory_is_clean():
    screen = ScreenBuffer()
    assert screen.update(lambda address: 0) is False
    assert not any(screen.texture_data)


def test_update_writes_pixel_and_then_stays_clean():
    memory = {0x10: 1, 0x1F: 3}
    screen = ScreenBuffer(4, (0x10, 0x20))
    read = lambda address: memory.get(address, 0)
    assert screen.update(read) is True
    assert bytes(screen.texture_data[0:3]) == bytes(color(1))
    assert bytes(screen.texture_data[-3:]) == bytes(color(3))
    assert bytes(screen.texture_data[3:6]) == bytes(color(0))
    assert screen.update(read) is False


def test_update_reads_only_mapped_region():
    seen = []
    screen = ScreenBuffer(2, (0x40, 0x44))

    def read(address):
        seen.append(address)
        return 0

    assert screen.update(read) is False
    assert seen == list(range(0x40, 0x44))