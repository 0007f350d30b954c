"""Palette rasteriser: labelled swatches drawn into a PNG.

The surface is an RGBA numpy array; gaps between cells stay transparent.
Each cell is filled with its colour, then its name is drawn in the contrast
text colour, left-aligned with a 2px pad and vertically centred, clipped to
the cell. Sizes are multiplied by `scale` before layout so a higher-res
export keeps the same proportions.

render() is synchronous. render_async() snapshots the items at call time and
runs render() on an executor, returning a Future that yields the PNG bytes or
raises RenderError.
"""

import io
from collections.abc import Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import replace
from functools import lru_cache
from typing import Any

import numpy as np
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from swatchkit.core import layout
from swatchkit.core.colour import contrast_text, hex_to_rgb, rgb_distance, rgb_to_hex
from swatchkit.core.errors import RenderError
from swatchkit.core.types import PaletteItem, RenderSettings, clamp

TEXT_PAD = 2
MIN_FONT_PX = 6
# Largest canvas a browser will hand out; anything bigger is refused up front.
MAX_CANVAS_SIDE = 32_767
MAX_CANVAS_PIXELS = 268_435_456
MATCH_THRESHOLD = 20

# Tried in order after the requested face, before Pillow's bundled font.
FALLBACK_FACES = ('DejaVuSans.ttf', 'Arial.ttf', 'arial.ttf', 'LiberationSans-Regular.ttf')


def scaled_grid(count: int, settings: RenderSettings) -> layout.Grid:
    """Grid geometry with every pixel size multiplied by settings.scale."""
    s = settings.scale
    return layout.compute(
        count,
        settings.row_len,
        settings.swatch_width * s,
        settings.swatch_height * s,
        settings.gap_h * s,
        settings.gap_v * s,
    )


def label_font_size(settings: RenderSettings) -> int:
    """Scaled font size, kept between 6px and the scaled swatch height."""
    sh = settings.swatch_height * settings.scale
    return clamp(settings.font_size * settings.scale, MIN_FONT_PX, max(MIN_FONT_PX, sh))


@lru_cache(maxsize=32)
def load_font(face: str, size: int) -> Any:
    """TrueType font by name or path, falling back to Pillow's default face."""
    for candidate in (face, *FALLBACK_FACES):
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _allocate(width: int, height: int) -> np.ndarray:
    if width > MAX_CANVAS_SIDE or height > MAX_CANVAS_SIDE or width * height > MAX_CANVAS_PIXELS:
        raise RenderError(f'Canvas {width}x{height} is too large')
    try:
        return np.zeros((height, width, 4), dtype=np.uint8)
    except (MemoryError, ValueError) as e:
        raise RenderError(f'Cannot allocate {width}x{height} canvas: {e}') from e


def _draw_label(image: Image.Image, box: tuple[int, int, int, int], text: str, fill: str, font: Any) -> None:
    """Draw text inside box only: draw on a crop of the cell, paste it back."""
    x1, y1, x2, y2 = box
    cell = image.crop(box)
    draw = ImageDraw.Draw(cell)
    ty = (y2 - y1) // 2
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text((TEXT_PAD, ty), text, fill=fill, font=font, anchor='lm')
    else:
        top, bottom = draw.textbbox((0, 0), text, font=font)[1::2]
        draw.text((TEXT_PAD, ty - (top + bottom) / 2), text, fill=fill, font=font)
    image.paste(cell, (x1, y1))


def render(items: Iterable[PaletteItem], settings: RenderSettings) -> bytes:
    """Render ascending-index-sorted items to PNG bytes."""
    items = list(items)
    grid = scaled_grid(len(items), settings)
    surface = _allocate(grid.canvas_width, grid.canvas_height)

    for i, it in enumerate(items):
        x1, y1, x2, y2 = grid.cell_box(i)
        surface[y1:y2, x1:x2] = (*hex_to_rgb(it.hex), 255)

    image = Image.fromarray(surface)
    font = load_font(settings.font_face, label_font_size(settings))
    for i, it in enumerate(items):
        if it.name:
            _draw_label(image, grid.cell_box(i), it.name, contrast_text(it.hex), font)

    buf = io.BytesIO()
    try:
        image.save(buf, format='PNG')
    except (OSError, ValueError) as e:
        raise RenderError(f'Failed to encode PNG: {e}') from e
    return buf.getvalue()


def render_async(
    items: Iterable[PaletteItem], settings: RenderSettings, executor: Executor | None = None
) -> 'Future[bytes]':
    """Snapshot items now, render on an executor, return the pending result."""
    snapshot = tuple(replace(it) for it in items)
    if executor is not None:
        return executor.submit(render, snapshot, settings)
    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix='swatchkit-render')
    try:
        return pool.submit(render, snapshot, settings)
    finally:
        pool.shutdown(wait=False)


def _dominant(pixels: np.ndarray) -> tuple[int, int, int]:
    unique, counts = np.unique(pixels.reshape(-1, 3), axis=0, return_counts=True)
    top = unique[int(np.argmax(counts))]
    return (int(top[0]), int(top[1]), int(top[2]))


def inspect_png(data: bytes, items: Iterable[PaletteItem], settings: RenderSettings) -> dict[str, Any]:
    """Check a rendered PNG against the palette it should show.

    Compares canvas size with the expected grid and, per cell, the most
    frequent pixel colour (the label covers far less than half a cell)
    with the item's hex.
    """
    items = list(items)
    try:
        image = Image.open(io.BytesIO(data)).convert('RGB')
    except (UnidentifiedImageError, OSError) as e:
        raise RenderError(f'Cannot read image: {e}') from e

    grid = scaled_grid(len(items), settings)
    result: dict[str, Any] = {
        'expected_size': list(grid.canvas_size),
        'actual_size': [image.width, image.height],
        'size_ok': image.size == grid.canvas_size,
        'cells': [],
    }
    arr = np.array(image)
    for i, it in enumerate(items):
        x1, y1, x2, y2 = grid.cell_box(i)
        region = arr[y1:y2, x1:x2]
        if region.size == 0:
            result['cells'].append({'index': it.index, 'expected': it.hex, 'actual': None, 'pass': False})
            continue
        actual = _dominant(region)
        dist = rgb_distance(hex_to_rgb(it.hex), actual)
        result['cells'].append(
            {
                'index': it.index,
                'name': it.name,
                'expected': it.hex,
                'actual': rgb_to_hex(*actual),
                'distance': round(dist, 1),
                'pass': dist < MATCH_THRESHOLD,
            }
        )
    result['pass'] = result['size_ok'] and all(c['pass'] for c in result['cells'])
    return result
