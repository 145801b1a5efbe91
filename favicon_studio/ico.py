"""Assemble PNG payloads into a multi-resolution .ico file.

ICO file structure (little-endian):
ICONDIR (6 bytes) + N * ICONDIRENTRY (16 bytes) + concatenated images.
Each entry stores the payload length and its absolute offset in the file.
"""

import struct
from collections import namedtuple

from .errors import EmptyExportError, InvalidParameterError

ICONDIR = struct.Struct("<HHH")
ICONDIRENTRY = struct.Struct("<BBBBHHII")
ICON_TYPE = 1


class IconImage(namedtuple("IconImage", "size data")):
    """One embedded image: its pixel size and encoded bytes (usually PNG)."""

    __slots__ = ()


def dimension_byte(size):
    """Width/height are single bytes; 0 stands for 256 and larger."""
    return 0 if size >= 256 else size


def header_size(count):
    return ICONDIR.size + count * ICONDIRENTRY.size


def build_ico(images):
    """Return the .ico bytes for images, an iterable of (size, data) pairs.

    Images are written in ascending size order so equal inputs always give
    equal bytes. Callers must pass payloads that really encode their size;
    the payloads are embedded as-is.
    """
    items = [IconImage(*img) for img in images]
    if not items:
        raise EmptyExportError("an icon container needs at least one image")

    seen = set()
    for img in items:
        if isinstance(img.size, bool) or not isinstance(img.size, int) or img.size < 1:
            raise InvalidParameterError(f"image size must be a positive integer, got {img.size!r}")
        if img.size in seen:
            raise InvalidParameterError(f"duplicate image size {img.size}")
        if not img.data:
            raise InvalidParameterError(f"image {img.size} has an empty payload")
        seen.add(img.size)
    items.sort(key=lambda img: img.size)

    out = bytearray(ICONDIR.pack(0, ICON_TYPE, len(items)))
    offset = header_size(len(items))
    for img in items:
        w = h = dimension_byte(img.size)
        # color count 0 (truecolor), reserved 0, planes 1, 32 bpp (informational)
        out += ICONDIRENTRY.pack(w, h, 0, 0, 1, 32, len(img.data), offset)
        offset += len(img.data)
    for img in items:
        out += img.data
    return bytes(out)


def read_ico_directory(data):
    """Parse the header and directory of .ico bytes.

    Returns a list of dicts with width, height, planes, bit_count, length and
    offset per entry; width and height keep the raw byte (0 means 256).
    """
    if len(data) < ICONDIR.size:
        raise InvalidParameterError("data too short for an icon header")
    reserved, kind, count = ICONDIR.unpack_from(data, 0)
    if reserved != 0 or kind != ICON_TYPE:
        raise InvalidParameterError("not an icon file")
    if len(data) < header_size(count):
        raise InvalidParameterError("truncated icon directory")

    entries = []
    for i in range(count):
        w, h, colors, _, planes, bits, length, offset = ICONDIRENTRY.unpack_from(
            data, ICONDIR.size + i * ICONDIRENTRY.size
        )
        entries.append(
            {
                "width": w,
                "height": h,
                "color_count": colors,
                "planes": planes,
                "bit_count": bits,
                "length": length,
                "offset": offset,
            }
        )
    return entries
