"""Render parameters and export size presets."""

import dataclasses
import math
from enum import Enum

from .colors import Color, color_to_hex, parse_color
from .errors import InvalidParameterError

PADDING_RANGE = (0, 20)
STROKE_WIDTH_RANGE = (0, 20)
# strokeWidth is expressed on a canvas of this many units.
STROKE_REFERENCE = 1024

PRESET_SIZES = (16, 32, 48, 64, 128, 256, 512, 1024)
DEFAULT_SIZES = (16, 32, 48, 64, 128, 256)
# favicon + apple-touch + PWA
RECOMMENDED_PNG_SIZES = (16, 32, 48, 180, 192, 256, 512)
ICO_SIZES = (16, 32, 48, 64, 128, 256)


class GradientKind(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"


class ShapeKind(str, Enum):
    CIRCLE = "circle"
    ROUNDED_SQUARE = "rounded-square"
    SQUIRCLE = "squircle"


class BackgroundKind(str, Enum):
    TRANSPARENT = "transparent"
    SOLID = "solid"
    PAPER = "paper"


def _coerce_enum(enum_cls, value, field):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise InvalidParameterError(f"{field} must be one of {choices}, got {value!r}") from None


def _coerce_int(value, field, bounds=None):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidParameterError(f"{field} must be an integer, got {value!r}")
        value = int(value)
    if bounds is not None:
        low, high = bounds
        if not low <= value <= high:
            raise InvalidParameterError(f"{field} must be in [{low}, {high}], got {value}")
    return value


def _coerce_bool(value, field):
    if not isinstance(value, bool):
        raise InvalidParameterError(f"{field} must be true or false, got {value!r}")
    return value


def _coerce_opacity(value, field):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{field} must be a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise InvalidParameterError(f"{field} must be in [0, 1], got {value}")
    return float(value)


@dataclasses.dataclass(frozen=True)
class RenderParameters:
    """Immutable snapshot of everything the rasterizer needs.

    Colors may be given as hex strings; they are resolved to Color values
    here so a malformed color fails before any drawing happens.
    """

    gradient_kind: GradientKind = GradientKind.LINEAR
    color_a: Color = "#0ea5ff"
    color_b: Color = "#22c55e"
    angle_deg: int = 110
    shape: ShapeKind = ShapeKind.CIRCLE
    padding: int = 6
    stroke_width: int = 6
    stroke_color: Color = "#00000010"
    glow: bool = False
    bg_kind: BackgroundKind = BackgroundKind.TRANSPARENT
    bg_color: Color = "#ffffff"
    fill_opacity: float = 1.0
    stroke_opacity: float = 1.0
    bg_opacity: float = 1.0

    def __post_init__(self):
        resolved = {
            "gradient_kind": _coerce_enum(GradientKind, self.gradient_kind, "gradient_kind"),
            "shape": _coerce_enum(ShapeKind, self.shape, "shape"),
            "bg_kind": _coerce_enum(BackgroundKind, self.bg_kind, "bg_kind"),
            "angle_deg": _coerce_int(self.angle_deg, "angle_deg") % 360,
            "padding": _coerce_int(self.padding, "padding", PADDING_RANGE),
            "stroke_width": _coerce_int(self.stroke_width, "stroke_width", STROKE_WIDTH_RANGE),
            "glow": _coerce_bool(self.glow, "glow"),
        }
        for name in ("color_a", "color_b", "stroke_color", "bg_color"):
            resolved[name] = parse_color(getattr(self, name))
        for name in ("fill_opacity", "stroke_opacity", "bg_opacity"):
            resolved[name] = _coerce_opacity(getattr(self, name), name)
        for name, value in resolved.items():
            object.__setattr__(self, name, value)

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    def to_dict(self):
        """Serialize with the camelCase keys used by saved option files."""
        out = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, Color):
                value = color_to_hex(value)
            out[_CAMEL_KEYS[f.name]] = value
        return out

    @classmethod
    def from_dict(cls, data, base=None):
        """Build parameters from a mapping of camelCase or snake_case keys.

        Keys missing from data keep their value from base (DEFAULTS when
        base is None).
        """
        base = base if base is not None else DEFAULTS
        changes = {}
        for key, value in data.items():
            name = _FIELD_NAMES.get(key)
            if name is None:
                raise InvalidParameterError(f"unknown render parameter: {key!r}")
            changes[name] = value
        return base.replace(**changes)


def _camel(name):
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


_CAMEL_KEYS = {f.name: _camel(f.name) for f in dataclasses.fields(RenderParameters)}
_FIELD_NAMES = {**{v: k for k, v in _CAMEL_KEYS.items()}, **{k: k for k in _CAMEL_KEYS}}

DEFAULTS = RenderParameters()


def compute_padding(size, padding):
    """Return (pad, inner) for a size x size canvas.

    pad is padding percent of half the canvas, rounded half up; inner is
    the side of the drawable square and is always at least 1.
    """
    size = _coerce_int(size, "size")
    if size < 1:
        raise InvalidParameterError(f"size must be positive, got {size}")
    pad = math.floor((padding / 100.0) * (size / 2.0) + 0.5)
    pad = max(0, min(pad, (size - 1) // 2))
    return pad, size - 2 * pad
