import pytest

from raycube.colornames import lookup_color
from raycube.xpm import (
    XpmError,
    load_xpm,
    parse_color_spec,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *test[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1 ",
"  c None",
". c #0000FF",
"X c red",
/* pixels */
"X.",
" X"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tbc  d \t") == ["a", "bc", "d"]
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_quotes():
    text = '"a/*b" /* c */'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.startswith('"a/*b"')
    assert result[6:].strip() == ""


def test_strip_line_comment():
    result = strip_comments('"x" // note\n"y"')
    assert "note" not in result
    assert result.endswith('"y"')


def test_parse_color_spec_hex():
    assert parse_color_spec("#FF0000") == 0xFF0000


def test_parse_color_spec_names():
    assert parse_color_spec("Red") == lookup_color("red")
    assert parse_color_spec("None") == -1
    assert parse_color_spec("navy", "blue") == lookup_color("navy blue")


def test_parse_color_spec_unknown_is_zero():
    assert parse_color_spec("notacolour") == 0


def test_parse_xpm_text_pixels():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == lookup_color("red")
    assert image.get_pixel(1, 0) == 0x0000FF
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == lookup_color("red")


def test_parse_lines_multi_char_keys():
    lines = ["2 1 2 3", "aaa c #123456", "bbb c #654321", "bbbaaa"]
    image = parse_xpm_lines(lines)
    assert image.get_pixel(0, 0) == 0x654321
    assert image.get_pixel(1, 0) == 0x123456


def test_zero_width_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["0 1 1 1", "a c #000000", "a"])


def test_missing_rows_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 2 1 1", "a c #000000", "a"])


def test_missing_colour_value_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a c", "a"])


def test_short_row_rejected():
    with pytest.raises(XpmError):
        parse_xpm_lines(["3 1 1 1", "a c #000000", "aa"])


def test_load_xpm_matches_text(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    loaded = load_xpm(path)
    parsed = parse_xpm_text(SAMPLE)
    assert loaded.data == parsed.data
    assert (loaded.width, loaded.height) == (parsed.width, parsed.height)