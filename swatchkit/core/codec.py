"""Palette codecs: palette.v1 JSON and GIMP palette (GPL) text.

JSON decode is strict about the envelope (kind + items list) and lenient
about each item. GPL decode never raises: unrecognised lines are skipped
and accepted lines are renumbered 0..n-1 in file order, so an item's
original index does not survive a GPL round trip.

Encoders expect items already sorted by index (snapshot_sorted_by_index)
and already normalised; they do not re-normalise.
"""

import json
import math
import re
from collections.abc import Iterable
from typing import Any

from swatchkit.core.colour import hex_to_rgb, normalize_hex, rgb_to_hex
from swatchkit.core.errors import FormatError
from swatchkit.core.types import MAX_INDEX, PaletteEntry, PaletteItem, clamp

KIND = 'palette.v1'
FORMATS = ('json', 'gpl')
FILENAMES = {'json': 'palette.json', 'gpl': 'palette.gpl'}

GPL_HEADER = ('GIMP Palette', 'Name: Palette', '#')
_GPL_SKIP_PREFIXES = ('#', 'GIMP Palette', 'Name:', 'Columns:')
_GPL_LINE_RE = re.compile(r'([0-9]+)\s+([0-9]+)\s+([0-9]+)\s*(.*)')
_WS_RE = re.compile(r'\s+')


# ── JSON ───────────────────────────────────────────────────────────


def encode_json(items: Iterable[PaletteItem]) -> str:
    payload = {
        'kind': KIND,
        'items': [{'name': it.name, 'index': it.index, 'hex': it.hex} for it in items],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _coerce_index(value: Any) -> int:
    """Numbers and numeric strings truncate to int; anything else is 0."""
    if isinstance(value, int):
        return clamp(int(value), 0, MAX_INDEX)
    if isinstance(value, float):
        n = value
    elif isinstance(value, str):
        try:
            n = float(value.strip()) if value.strip() else 0.0
        except ValueError:
            n = 0.0
    else:
        n = 0.0
    if math.isnan(n):
        return 0
    if math.isinf(n):
        return MAX_INDEX if n > 0 else 0
    return clamp(int(n), 0, MAX_INDEX)


def _decode_json_item(raw: Any) -> PaletteEntry:
    obj = raw if isinstance(raw, dict) else {}
    name = obj.get('name')
    hex_value = obj.get('hex')
    return PaletteEntry(
        name=name if isinstance(name, str) else '',
        index=_coerce_index(obj.get('index')),
        hex=normalize_hex(hex_value if isinstance(hex_value, str) and hex_value else '#000000'),
    )


def decode_json(text: str) -> list[PaletteEntry]:
    """Parse a palette.v1 document. Raises FormatError on a foreign document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f'Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})') from e
    except (ValueError, RecursionError) as e:
        # oversized integer literals or nesting too deep for the parser
        raise FormatError(f'Invalid JSON: {e}') from e

    if not isinstance(data, dict) or data.get('kind') != KIND or not isinstance(data.get('items'), list):
        raise FormatError('Unknown JSON format')
    return [_decode_json_item(x) for x in data['items']]


# ── GPL ────────────────────────────────────────────────────────────


def encode_gpl(items: Iterable[PaletteItem]) -> str:
    lines = list(GPL_HEADER)
    for it in items:
        r, g, b = hex_to_rgb(it.hex)
        name = _WS_RE.sub(' ', it.name).strip()
        lines.append(f'{r:>3} {g:>3} {b:>3}\t{name}')
    return '\n'.join(lines) + '\n'


def _channel(digits: str) -> int:
    """Clamp a decimal digit run to 0..255 without converting arbitrarily long input."""
    digits = digits.lstrip('0') or '0'
    return 255 if len(digits) > 3 else min(int(digits), 255)


def decode_gpl(text: str) -> list[PaletteEntry]:
    """Parse GIMP palette text. Never raises; bad lines are skipped."""
    out: list[PaletteEntry] = []
    for raw in text.replace('\r\n', '\n').split('\n'):
        line = raw.strip()
        if not line or line.startswith(_GPL_SKIP_PREFIXES):
            continue
        m = _GPL_LINE_RE.fullmatch(line)
        if not m:
            continue
        n = len(out)
        r, g, b = (_channel(m.group(i)) for i in (1, 2, 3))
        name = m.group(4).strip() or f'Color {n}'
        out.append(PaletteEntry(name=name, index=n, hex=rgb_to_hex(r, g, b)))
    return out


# ── File dispatch ──────────────────────────────────────────────────


def format_for_filename(filename: str) -> str:
    """'gpl' for *.gpl (any case), otherwise 'json'."""
    return 'gpl' if filename.lower().endswith('.gpl') else 'json'


def decode_bytes(filename: str, data: bytes) -> tuple[str, list[PaletteEntry]]:
    """Decode raw file bytes, picking the codec from the file name."""
    text = data.decode('utf-8-sig', errors='replace')
    fmt = format_for_filename(filename)
    if fmt == 'gpl':
        return fmt, decode_gpl(text)
    return fmt, decode_json(text)


def encode(items: Iterable[PaletteItem], fmt: str) -> tuple[str, bytes]:
    """Encode items as (default filename, UTF-8 bytes)."""
    if fmt == 'gpl':
        text = encode_gpl(items)
    elif fmt == 'json':
        text = encode_json(items)
    else:
        raise ValueError(f'Unknown palette format: {fmt}. Available: {", ".join(FORMATS)}')
    return FILENAMES[fmt], text.encode('utf-8')
