"""Exceptions raised by favicon_studio."""


class IconStudioError(Exception):
    """Base class for every error raised by this package."""


class InvalidParameterError(IconStudioError, ValueError):
    """A render parameter (color, range, size) is malformed."""


class EmptyExportError(IconStudioError, ValueError):
    """An export or container was requested with nothing in it."""


class RasterEncodingError(IconStudioError):
    """The raster encoder produced no data for a size."""

    def __init__(self, size, message=None):
        self.size = size
        super().__init__(message or f"encoder returned no data for {size}px image")
