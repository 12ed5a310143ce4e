import re

import pytest

from nestoolkit.nametable_viewer import (
    format_attribute,
    format_byte,
    main,
    render_attributes,
    render_nametable,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip(text):
    return _ANSI.sub("", text)


def test_format_byte_text_is_hex():
    assert strip(format_byte(0xAB)) == "ab"
    assert strip(format_byte(0x05)) == "05"


def test_format_byte_style_depends_on_range():
    prefix = lambda b: format_byte(b)[: format_byte(b).index("m") + 1]
    assert prefix(0) == prefix(31)
    assert prefix(0) != prefix(32)
    assert prefix(224) == prefix(255)
    assert prefix(192) != prefix(224)


@pytest.mark.parametrize("value", [-1, 256])
def test_format_byte_out_of_range(value):
    with pytest.raises(ValueError):
        format_byte(value)


def test_format_attribute_values():
    for value in range(4):
        assert strip(format_attribute(value)) == str(value)
    assert len({format_attribute(v) for v in range(4)}) == 4


def test_format_attribute_rejects_large_value():
    with pytest.raises(ValueError):
        format_attribute(4)


def test_render_nametable_contains_every_row():
    data = bytes(i % 256 for i in range(960))
    text = strip(render_nametable(data))
    rows = [line for line in text.splitlines() if re.match(r"^[0-9a-f]{2} │ ", line)]
    assert len(rows) == 960 // 32
    for index, row in enumerate(rows):
        assert data[index * 32 : index * 32 + 32].hex() in row
    assert "Nametable" in text


def test_render_attributes_unpacks_quadrants():
    data = bytes([0b11100100] * 64)
    text = strip(render_attributes(data))
    assert "Unpacked Attribute View" in text
    assert "Byte View" in text
    assert "0 1 " * 8 in text
    assert "2 3 " * 8 in text
    assert data[:8].hex() in text


def test_main_renders_file(tmp_path, capsys):
    path = tmp_path / "map.nam"
    path.write_bytes(bytes(range(256)) * 4)
    assert main([str(path)]) == 0
    out = strip(capsys.readouterr().out)
    assert f"Loading file {path}" in out
    assert "Unpacked Attribute View" in out


def test_main_rejects_wrong_size(tmp_path, capsys):
    path = tmp_path / "short.nam"
    path.write_bytes(b"\x00" * 10)
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "Expected the nametable file to contain 1024 bytes" in err


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert ".nam" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.nam")]) == 1
    assert "Failed to read the file" in capsys.readouterr().err