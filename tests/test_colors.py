import pytest

from favicon_studio import Color, InvalidParameterError, blend_colors, color_to_hex, parse_color


@pytest.mark.parametrize(
    "hex_color",
    ["#000000", "#ffffff", "#0ea5ff", "#22C55E", "#7f7f80", "#010203", "#A855F7"],
)
def test_six_digit_round_trip(hex_color):
    assert color_to_hex(parse_color(hex_color)) == hex_color.lower()


def test_parse_normalizes_channels():
    assert parse_color("#ff0000") == Color(1.0, 0.0, 0.0, 1.0)
    assert parse_color("00ff00").to_rgba8() == (0, 255, 0, 255)


def test_three_digit_form_expands():
    assert parse_color("#abc") == parse_color("#aabbcc")


def test_eight_digit_form_keeps_alpha():
    color = parse_color("#00000010")
    assert color.to_rgba8() == (0, 0, 0, 16)
    assert color_to_hex(color) == "#00000010"


def test_color_passes_through():
    color = Color(0.1, 0.2, 0.3, 0.4)
    assert parse_color(color) is color


@pytest.mark.parametrize(
    "bad", ["", "#", "#12", "#1234", "#12345", "#1234567", "#gggggg", "red", None, 0xFF0000]
)
def test_malformed_colors_fail_fast(bad):
    with pytest.raises(InvalidParameterError):
        parse_color(bad)


def test_invalid_parameter_is_a_value_error():
    with pytest.raises(ValueError):
        parse_color("#zz")


def test_blend_endpoints_and_midpoint():
    a, b = "#ff0000", "#0000ff"
    assert blend_colors(a, b, 0) == parse_color(a)
    assert blend_colors(a, b, 1) == parse_color(b)
    assert blend_colors(a, b, 0.5).to_rgba8() == (128, 0, 128, 255)


def test_blend_clamps_fraction():
    assert blend_colors("#000000", "#ffffff", 2.0) == parse_color("#ffffff")
    assert blend_colors("#000000", "#ffffff", -1.0) == parse_color("#000000")


def test_alpha_helpers():
    color = parse_color("#336699")
    assert color.with_alpha(0.0).a == 0.0
    assert color.scale_alpha(0.5).to_rgba8()[3] == 128
