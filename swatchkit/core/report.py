"""Report builder — text and JSON listings for swatchkit output."""

import json
import os
from collections.abc import Iterable
from typing import Any

from swatchkit.core.colour import contrast_text, hex_to_rgb
from swatchkit.core.store import slugify
from swatchkit.core.types import PaletteItem


def _row(it: PaletteItem) -> dict[str, Any]:
    r, g, b = hex_to_rgb(it.hex)
    return {
        'index': it.index,
        'name': it.name,
        'hex': it.hex,
        'rgb': [r, g, b],
        'text': contrast_text(it.hex),
        'slug': slugify(it.name),
    }


def format_text(items: Iterable[PaletteItem], source: str | None = None) -> str:
    """Format a palette as a human-readable table."""
    rows = [_row(it) for it in items]
    header = f'swatchkit: {len(rows)} colors'
    if source:
        header += f' — {os.path.basename(source)}'
    lines = [header, '']
    for row in rows:
        r, g, b = row['rgb']
        lines.append(f'{row["index"]:>6}  {row["hex"]}  {r:>3} {g:>3} {b:>3}  text {row["text"]}  {row["name"]}')
    if rows:
        lines.append('')
    return '\n'.join(lines)


def format_json(items: Iterable[PaletteItem], source: str | None = None) -> str:
    """Format a palette listing as JSON."""
    rows = [_row(it) for it in items]
    obj: dict[str, Any] = {}
    if source:
        obj['source'] = source
    obj['count'] = len(rows)
    obj['items'] = rows
    return json.dumps(obj, indent=2, ensure_ascii=False)


def format_check_text(result: dict[str, Any], image_path: str | None = None) -> str:
    """Format an inspect_png() result."""
    w, h = result['actual_size']
    header = f'swatchkit: {image_path or "image"} ({w}×{h})'
    lines = [header, '']
    if not result['size_ok']:
        ew, eh = result['expected_size']
        lines.append(f'  size: expected {ew}×{eh}  got {w}×{h}  ✗')
    passed = 0
    for cell in result['cells']:
        mark = '✓' if cell['pass'] else '✗'
        passed += 1 if cell['pass'] else 0
        got = cell.get('actual') or '?'
        dist = cell.get('distance', '?')
        lines.append(f'── {cell["index"]:>6}  expected {cell["expected"]}  got {got}  Δ={dist}  {mark}')
    total = len(result['cells'])
    lines.append('')
    lines.append(f'PASS {passed}/{total} cells  FAIL {total - passed}/{total} cells')
    return '\n'.join(lines)
