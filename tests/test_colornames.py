import pytest

from cubscene.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("thistle4", 0x8B7B8B),
        ("darkred", 0x8B0000),
        ("lightgreen", 0x90EE90),
    ],
)
def test_single_word_names(name, expected):
    assert lookup_color(name, None) == expected


def test_two_word_name_joined_with_end():
    assert lookup_color("ghost", "white") == 0xF8F8FF
    assert lookup_color("ghost", "white") == lookup_color("ghostwhite")


def test_lookup_is_case_insensitive():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("Ghost", "WHITE") == 0xF8F8FF


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("notacolour") == 0
    assert lookup_color("red", "herring") == 0


def test_first_duplicate_entry_wins():
    assert lookup_color("dark", "slate") == 0x2F4F4F
    assert lookup_color("light", "slate") == 0x778899
    assert lookup_color("light", "goldenrod") == 0xFAFAD2


def test_hex_spec():
    assert lookup_color("#FF00FF") == 0xFF00FF
    assert lookup_color("#ff00ff") == 0xFF00FF


def test_hex_spec_ignores_end_word():
    assert lookup_color("#00FF00", "ignored") == 0xFF00


def test_hex_spec_stops_at_invalid_digit():
    assert lookup_color("#zz") == 0
    assert lookup_color("#") == 0
    assert lookup_color("#ffzz") == lookup_color("#ff")


def test_hex_spec_wraps_to_signed_32_bits():
    assert lookup_color("#FFFFFFFF") == -1


@pytest.mark.parametrize("number", range(0, 101))
def test_gray_and_grey_agree(number):
    gray = lookup_color(f"gray{number}")
    assert gray == lookup_color(f"grey{number}")
    red, green, blue = (gray >> 16) & 0xFF, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_gray_levels_pinned():
    assert lookup_color("gray0") == 0x0
    assert lookup_color("gray50") == 0x7F7F7F
    assert lookup_color("gray100") == 0xFFFFFF
    assert lookup_color("grey41") == 0x696969


def test_gray_levels_increase():
    levels = [lookup_color(f"gray{n}") for n in range(101)]
    assert levels == sorted(levels)
    assert len(set(levels)) == 101


@pytest.mark.parametrize(
    "family", ["snow", "bisque", "blue", "green", "red", "magenta", "thistle"]
)
def test_numbered_shades_darken(family):
    shades = [lookup_color(f"{family}{n}") for n in range(1, 5)]
    assert shades == sorted(shades, reverse=True)
    assert all(shade > 0 for shade in shades)


def test_numbered_shade_values():
    assert lookup_color("snow2") == 0xEEE9E9
    assert lookup_color("blue4") == 0x8B
    assert lookup_color("seagreen4") == lookup_color("seagreen")


def test_long_joined_name_is_truncated_and_misses():
    assert lookup_color("a" * 40, "b" * 40) == 0