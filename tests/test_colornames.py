import pytest

from raycube.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("blue", 0xFF),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("white", 0xFFFFFF),
        ("black", 0x0),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == 0xF8F8FF


def test_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_unknown_name_returns_none():
    assert lookup_color("no such colour") is None
    assert lookup_color("") is None


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    assert gray is not None and 0 <= gray <= 0xFFFFFF
    # Every grey level has equal red, green and blue channels.
    assert (gray >> 16) & 0xFF == (gray >> 8) & 0xFF == gray & 0xFF


def test_spaced_and_joined_names_agree():
    pairs = [
        ("alice blue", "aliceblue"),
        ("hot pink", "hotpink"),
        ("dark red", "darkred"),
        ("light green", "lightgreen"),
    ]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_gray_endpoints_match_black_and_white():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")