"""Hex color parsing and RGB interpolation."""

from collections import namedtuple

from .errors import InvalidParameterError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Color(namedtuple("Color", "r g b a")):
    """RGBA color with channels normalized to 0..1."""

    __slots__ = ()

    def to_rgba8(self):
        """Return the color as a Pillow-friendly (r, g, b, a) tuple of ints."""
        return tuple(_to_u8(c) for c in self)

    def to_rgb8(self):
        return self.to_rgba8()[:3]

    def with_alpha(self, alpha):
        return self._replace(a=alpha)

    def scale_alpha(self, factor):
        return self._replace(a=self.a * factor)


def _to_u8(value):
    # Round half up, matching the browser canvas.
    return int(max(0.0, min(1.0, value)) * 255.0 + 0.5)


def parse_color(value):
    """Parse '#rgb', '#rrggbb' or '#rrggbbaa' (leading '#' optional).

    A Color passes through unchanged. Anything else raises
    InvalidParameterError: a bad color must never render as black.
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise InvalidParameterError(f"color must be a hex string, got {value!r}")

    h = value.strip()
    if h.startswith("#"):
        h = h[1:]
    if len(h) not in (3, 6, 8) or not set(h) <= HEX_DIGITS:
        raise InvalidParameterError(f"invalid hex color: {value!r}")
    if len(h) == 3:
        h = "".join(c + c for c in h)

    channels = [int(h[i:i + 2], 16) / 255.0 for i in range(0, len(h), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    return Color(*channels)


def color_to_hex(color):
    """Format a color as '#rrggbb', or '#rrggbbaa' when it is not opaque."""
    color = parse_color(color)
    r, g, b, a = color.to_rgba8()
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def blend_colors(c1, c2, t):
    """Blend two colors linearly in RGB space. t=0 returns c1, t=1 returns c2."""
    c1 = parse_color(c1)
    c2 = parse_color(c2)
    t = max(0.0, min(1.0, float(t)))
    return Color(*(a + (b - a) * t for a, b in zip(c1, c2)))
