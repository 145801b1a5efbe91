"""Render parameter snapshots into PNG files and .ico containers."""

import io
from concurrent.futures import ThreadPoolExecutor

from .errors import EmptyExportError, RasterEncodingError
from .ico import build_ico
from .params import ICO_SIZES, RECOMMENDED_PNG_SIZES
from .render import check_size, render_icon

DEFAULT_BASENAME = "favicon"


def png_filename(base, size):
    return f"{base}-{size}.png"


def ico_filename(base):
    return f"{base}.ico"


def encode_png(image, size=None):
    """Encode an RGBA image as PNG bytes."""
    if size is None:
        size = image.size[0]
    buf = io.BytesIO()
    try:
        image.save(buf, format="PNG", optimize=True)
    except (OSError, ValueError) as exc:
        raise RasterEncodingError(size, f"PNG encoding failed for {size}px image: {exc}") from exc
    data = buf.getvalue()
    if not data:
        raise RasterEncodingError(size)
    return data


def _requested_sizes(sizes):
    sizes = sorted(set(check_size(s) for s in sizes))
    if not sizes:
        raise EmptyExportError("no sizes requested")
    return sizes


def render_png(size, params):
    """Render and encode one size from scratch."""
    return encode_png(render_icon(size, params), size)


def render_pngs(params, sizes, max_workers=None):
    """Render every distinct size independently and return {size: png_bytes}.

    Sizes are rendered in parallel; nothing is returned unless every size
    rendered and encoded.
    """
    sizes = _requested_sizes(sizes)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(lambda s: render_png(s, params), sizes))
    return dict(zip(sizes, results))


def export_png_set(params, sizes, base=DEFAULT_BASENAME, max_workers=None):
    """Return {'<base>-<size>.png': png_bytes} for each requested size."""
    pngs = render_pngs(params, sizes, max_workers)
    return {png_filename(base, size): data for size, data in pngs.items()}


def export_ico(params, sizes=ICO_SIZES, base=DEFAULT_BASENAME, max_workers=None):
    """Return ('<base>.ico', ico_bytes) embedding a PNG for every size."""
    pngs = render_pngs(params, sizes, max_workers)
    return ico_filename(base), build_ico(pngs.items())


def export_recommended(params, base=DEFAULT_BASENAME, max_workers=None):
    """Files of the recommended favicon pack: the PNG set plus the .ico.

    Archiving them is left to the caller.
    """
    files = export_png_set(params, RECOMMENDED_PNG_SIZES, base, max_workers)
    name, data = export_ico(params, ICO_SIZES, base, max_workers)
    files[name] = data
    return files
