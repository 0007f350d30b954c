"""swatchkit.core — Foundation layer.

Contains the colour model, grid layout, palette store, codecs, rasteriser
and the session that ties them together.
This module has NO dependencies on swatchkit.commands or swatchkit.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
