"""Error taxonomy for swatchkit.

Only two things can fail loudly: reading a JSON document that is not a
palette.v1 file, and producing the PNG. Everything else is coerced.
"""


class PaletteError(Exception):
    """Base class for palette errors surfaced as a status message."""


class FormatError(PaletteError):
    """A JSON document that is not a valid palette.v1 file."""


class RenderError(PaletteError):
    """The raster surface could not be created or encoded."""
