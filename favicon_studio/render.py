"""Rasterize an icon design onto a Pillow RGBA surface.

Layers are drawn in a fixed order: clear, background, glow, gradient fill
clipped to the shape, stroke. Everything after the background lives in the
padded inner square, so pixels in the padding only ever show the background.
"""

import math

from PIL import Image, ImageChops, ImageDraw

from .colors import blend_colors, parse_color
from .errors import InvalidParameterError
from .params import (
    STROKE_REFERENCE,
    BackgroundKind,
    GradientKind,
    RenderParameters,
    compute_padding,
)
from .shapes import build_path

TRANSPARENT = (0, 0, 0, 0)

# Shape masks and strokes are drawn this many times larger, then box-filtered.
SUPERSAMPLE = 4

PAPER_COLORS = ("#ffffff", "#f7f7f7")

GLOW_ALPHA = 0.35
GLOW_INNER_RADIUS = 0.2
GLOW_OUTER_RADIUS = 0.75

CONIC_WEDGES = 360
# Degrees each wedge reaches into its successor so seams leave no gaps.
WEDGE_OVERLAP = 0.5


def _u8(t):
    if t <= 0.0:
        return 0
    if t >= 1.0:
        return 255
    return int(t * 255.0 + 0.5)


def ramp_mask(side, t_at):
    """Build an 'L' image holding t_at(px, py) at every pixel center, scaled to 0..255."""
    mask = Image.new("L", (side, side))
    mask.putdata([_u8(t_at(x + 0.5, y + 0.5)) for y in range(side) for x in range(side)])
    return mask


def gradient_image(side, start, end, t_at):
    """RGBA image interpolating start -> end in RGB space along t_at."""
    start = parse_color(start)
    end = parse_color(end)
    return Image.composite(
        Image.new("RGBA", (side, side), end.to_rgba8()),
        Image.new("RGBA", (side, side), start.to_rgba8()),
        ramp_mask(side, t_at),
    )


def apply_mask(layer, mask, opacity=1.0):
    """Multiply the layer's alpha by mask (and opacity), in place."""
    if opacity < 1.0:
        mask = mask.point(lambda v: int(v * opacity + 0.5))
    layer.putalpha(ImageChops.multiply(layer.getchannel("A"), mask))
    return layer


def shape_mask(path, side, supersample=SUPERSAMPLE):
    """Coverage mask of the filled path."""
    big = Image.new("L", (side * supersample, side * supersample), 0)
    ImageDraw.Draw(big).polygon(path.scaled(supersample).outline(), fill=255)
    return big.resize((side, side), Image.Resampling.BOX)


def stroke_mask(path, side, width, supersample=SUPERSAMPLE):
    """Coverage mask of the path outline stroked at width pixels.

    Pillow only draws whole-pixel line widths, so the line is drawn at the
    next whole width and its intensity scaled down to keep the coverage
    proportional to width, even for hairlines on 16px icons.
    """
    big = Image.new("L", (side * supersample, side * supersample), 0)
    exact = width * supersample
    line_width = max(1, int(math.ceil(exact - 1e-9)))
    ink = _u8(exact / line_width)
    ImageDraw.Draw(big).line(
        path.scaled(supersample).outline(), fill=ink, width=line_width, joint="curve"
    )
    return big.resize((side, side), Image.Resampling.BOX)


def linear_gradient_points(inner, angle_deg):
    """Return ((x1, y1), (x2, y2)) of the gradient axis across the inner square.

    The half-extent vector (inner/2, -inner/2) is rotated by angle_deg, so the
    axis always spans the square's diagonal length about its center.
    """
    rad = math.radians(angle_deg)
    dx, dy = math.cos(rad), math.sin(rad)
    c = h = inner / 2.0
    ox = h * dx + h * dy
    oy = h * dy - h * dx
    return (c - ox, c - oy), (c + ox, c + oy)


def conic_wedge_colors(color_a, color_b, wedges=CONIC_WEDGES):
    """Colors of the conic wedges; the first is color_a and the last color_b."""
    return [blend_colors(color_a, color_b, i / (wedges - 1)) for i in range(wedges)]


def _linear_paint(inner, params):
    (x1, y1), (x2, y2) = linear_gradient_points(inner, params.angle_deg)
    vx, vy = x2 - x1, y2 - y1
    length2 = vx * vx + vy * vy
    return gradient_image(
        inner,
        params.color_a,
        params.color_b,
        lambda x, y: ((x - x1) * vx + (y - y1) * vy) / length2,
    )


def _radial_paint(inner, params):
    c = r = inner / 2.0
    return gradient_image(
        inner, params.color_a, params.color_b, lambda x, y: math.hypot(x - c, y - c) / r
    )


def _conic_paint(inner, params):
    # No native conic gradient in Pillow: sweep one pie slice per degree.
    layer = Image.new("RGBA", (inner, inner), TRANSPARENT)
    draw = ImageDraw.Draw(layer)
    # Same center and radius as the circle path.
    c = r = inner / 2.0
    bbox = [c - r, c - r, c + r, c + r]
    colors = conic_wedge_colors(params.color_a, params.color_b)
    last = len(colors) - 1
    step = 360.0 / len(colors)
    for i, color in enumerate(colors):
        start = params.angle_deg + i * step
        end = start + step
        if i < last:
            end += WEDGE_OVERLAP
        if i == 0:
            start -= WEDGE_OVERLAP
        draw.pieslice(bbox, start, end, fill=color.to_rgba8())
    return layer


FILL_STRATEGIES = {
    GradientKind.LINEAR: _linear_paint,
    GradientKind.RADIAL: _radial_paint,
    GradientKind.CONIC: _conic_paint,
}


def fill_shape(kind, inner, params, mask):
    """Paint the gradient of the given kind and keep only what lies inside mask.

    Linear and radial paint covers the whole inner square and is clipped;
    conic paint is a disk of wedges intersected with the shape.
    """
    paint = FILL_STRATEGIES[GradientKind(kind)](inner, params)
    return apply_mask(paint, mask, params.fill_opacity)


def _draw_background(surface, size, params):
    if params.bg_kind == BackgroundKind.SOLID:
        color = params.bg_color.scale_alpha(params.bg_opacity)
        surface.paste(color.to_rgba8(), (0, 0, size, size))
    elif params.bg_kind == BackgroundKind.PAPER:
        paper = gradient_image(size, *PAPER_COLORS, lambda x, y: (x + y) / (2.0 * size))
        if params.bg_opacity < 1.0:
            apply_mask(paper, Image.new("L", (size, size), 255), params.bg_opacity)
        surface.paste(paper, (0, 0))


def _draw_glow(surface, pad, inner, params):
    c = inner / 2.0
    r0 = inner * GLOW_INNER_RADIUS
    r1 = inner * GLOW_OUTER_RADIUS
    halo = gradient_image(
        inner,
        params.color_a.scale_alpha(GLOW_ALPHA),
        params.color_b.with_alpha(0.0),
        lambda x, y: (math.hypot(x - c, y - c) - r0) / (r1 - r0),
    )
    # Additive ("lighter") blending works on premultiplied pixels.
    box = (pad, pad, pad + inner, pad + inner)
    lit = ImageChops.add(surface.crop(box).convert("RGBa"), halo.convert("RGBa"))
    surface.paste(lit.convert("RGBA"), box)


def check_size(size):
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidParameterError(f"size must be a positive integer, got {size!r}")
    return size


def render(surface, size, params):
    """Draw the icon described by params onto a size x size RGBA surface.

    The surface is cleared first, so it can be reused between calls as long
    as no two calls share it at the same time.
    """
    if not isinstance(params, RenderParameters):
        raise InvalidParameterError(f"expected RenderParameters, got {type(params).__name__}")
    check_size(size)
    if surface.mode != "RGBA" or surface.size != (size, size):
        raise InvalidParameterError(
            f"surface must be a {size}x{size} RGBA image, got {surface.mode} {surface.size}"
        )

    surface.paste(TRANSPARENT, (0, 0, size, size))
    _draw_background(surface, size, params)

    pad, inner = compute_padding(size, params.padding)
    path = build_path(params.shape, inner)

    if params.glow:
        _draw_glow(surface, pad, inner, params)

    fill = fill_shape(params.gradient_kind, inner, params, shape_mask(path, inner))
    surface.alpha_composite(fill, dest=(pad, pad))

    if params.stroke_width > 0:
        width = (params.stroke_width / STROKE_REFERENCE) * inner
        color = params.stroke_color.scale_alpha(params.stroke_opacity)
        stroke = Image.new("RGBA", (inner, inner), color.to_rgba8())
        surface.alpha_composite(apply_mask(stroke, stroke_mask(path, inner, width)), dest=(pad, pad))


def render_icon(size, params):
    """Render params onto a fresh size x size RGBA image."""
    check_size(size)
    surface = Image.new("RGBA", (size, size), TRANSPARENT)
    render(surface, size, params)
    return surface
