"""Render gradient favicons and pack them into PNG sets and .ico files."""

from .colors import Color, blend_colors, color_to_hex, parse_color
from .errors import (
    EmptyExportError,
    IconStudioError,
    InvalidParameterError,
    RasterEncodingError,
)
from .export import (
    encode_png,
    export_ico,
    export_png_set,
    export_recommended,
    ico_filename,
    png_filename,
    render_pngs,
)
from .ico import IconImage, build_ico
from .params import (
    DEFAULT_SIZES,
    DEFAULTS,
    ICO_SIZES,
    PRESET_SIZES,
    RECOMMENDED_PNG_SIZES,
    BackgroundKind,
    GradientKind,
    RenderParameters,
    ShapeKind,
    compute_padding,
)
from .render import render, render_icon
from .shapes import ClosedPath, build_path

__version__ = "0.1.0"
