"""swatchkit — build, convert and render named colour palettes."""

__version__ = '0.1.0'
