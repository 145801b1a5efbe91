"""Closed outlines for the icon shapes, in local [0, edge] x [0, edge] coordinates."""

import math

from .errors import InvalidParameterError
from .params import ShapeKind

# Corner radius of the rounded square as a fraction of its edge.
CORNER_RADIUS = 0.2
SQUIRCLE_EXPONENT = 4.5
# Fewer segments visibly facets the squircle at 512px and up.
SQUIRCLE_SEGMENTS = 256
CIRCLE_SEGMENTS = 256
CORNER_SEGMENTS = 64


class ClosedPath:
    """A closed polyline shared by the fill clip and the stroke."""

    def __init__(self, points):
        self.points = tuple((float(x), float(y)) for x, y in points)
        if len(self.points) < 3:
            raise ValueError("a closed path needs at least three points")

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"ClosedPath({len(self.points)} points)"

    @property
    def start(self):
        return self.points[0]

    @property
    def end(self):
        return self.points[-1]

    def is_closed(self, tolerance=1e-3):
        (x0, y0), (x1, y1) = self.start, self.end
        return math.hypot(x1 - x0, y1 - y0) <= tolerance

    def outline(self):
        """Points of the path with the closing segment made explicit."""
        if self.start == self.end:
            return list(self.points)
        return list(self.points) + [self.start]

    def scaled(self, factor):
        return ClosedPath((x * factor, y * factor) for x, y in self.points)

    def bounds(self):
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return min(xs), min(ys), max(xs), max(ys)


def _arc_points(cx, cy, radius, start_deg, end_deg, steps):
    # Screen coordinates: y grows downward, so increasing angle runs clockwise.
    for i in range(steps + 1):
        a = math.radians(start_deg + (end_deg - start_deg) * i / steps)
        yield cx + math.cos(a) * radius, cy + math.sin(a) * radius


def circle_path(edge):
    r = edge / 2.0
    return ClosedPath(_arc_points(r, r, r, 0.0, 360.0, CIRCLE_SEGMENTS))


def rounded_square_path(edge):
    """Four straight edges joined by quarter-circle corners, clockwise."""
    r = edge * CORNER_RADIUS
    w = h = edge
    points = [(r, 0.0), (w - r, 0.0)]
    points += list(_arc_points(w - r, r, r, 270, 360, CORNER_SEGMENTS))[1:]
    points.append((w, h - r))
    points += list(_arc_points(w - r, h - r, r, 0, 90, CORNER_SEGMENTS))[1:]
    points.append((r, h))
    points += list(_arc_points(r, h - r, r, 90, 180, CORNER_SEGMENTS))[1:]
    points.append((0.0, r))
    points += list(_arc_points(r, r, r, 180, 270, CORNER_SEGMENTS))[1:]
    return ClosedPath(points)


def _signed_pow(v, e):
    return math.copysign(abs(v) ** e, v)


def squircle_path(edge, n=SQUIRCLE_EXPONENT, segments=SQUIRCLE_SEGMENTS):
    """Sample the superellipse |x/a|^n + |y/b|^n = 1 at segments + 1 angles."""
    w = h = edge
    e = 2.0 / n
    points = []
    for i in range(segments + 1):
        t = (i / segments) * 2.0 * math.pi
        x = (w / 2.0) * _signed_pow(math.cos(t), e) + w / 2.0
        y = (h / 2.0) * _signed_pow(math.sin(t), e) + h / 2.0
        points.append((x, y))
    return ClosedPath(points)


_BUILDERS = {
    ShapeKind.CIRCLE: circle_path,
    ShapeKind.ROUNDED_SQUARE: rounded_square_path,
    ShapeKind.SQUIRCLE: squircle_path,
}


def build_path(shape, edge):
    """Return the closed outline of shape inside an edge x edge square."""
    try:
        builder = _BUILDERS[ShapeKind(shape)]
    except ValueError:
        raise InvalidParameterError(f"unknown shape: {shape!r}") from None
    if edge <= 0:
        raise InvalidParameterError(f"edge length must be positive, got {edge}")
    return builder(edge)
