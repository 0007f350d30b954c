"""Helpers shared by command modules: palette file I/O and layout flags."""

import argparse
import os
import sys

from swatchkit.core.codec import FORMATS
from swatchkit.core.env import settings_from_env
from swatchkit.core.session import Session
from swatchkit.core.types import RenderSettings

LAYOUT_FLAGS = ('row_len', 'swatch_width', 'swatch_height', 'gap_h', 'gap_v', 'font_face', 'font_size', 'scale')


def add_layout_arguments(parser: argparse.ArgumentParser) -> None:
    """Layout flags. Unset flags fall back to SWATCHKIT_* env vars, then defaults."""
    parser.add_argument('-n', '--row-len', help='Swatches per row, 1-256 (default 8)')
    parser.add_argument('-W', '--swatch-width', help='Swatch width in px, 8-1024 (default 96)')
    parser.add_argument('-H', '--swatch-height', help='Swatch height in px, 8-1024 (default 64)')
    parser.add_argument('--gap-h', help='Horizontal gap in px, 0-1024 (default 0)')
    parser.add_argument('--gap-v', help='Vertical gap in px, 0-1024 (default 0)')
    parser.add_argument('-f', '--font-face', help='Label font name or .ttf path (default ui-sans-serif)')
    parser.add_argument('-s', '--font-size', help='Label size in px, 6-256 (default 12)')
    parser.add_argument('-x', '--scale', help='Render scale factor, 1-16 (default 1)')


def add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--format',
        choices=FORMATS,
        default=None,
        help='Palette format to write (default: from file extension, then SWATCHKIT_FORMAT)',
    )


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    overrides = {name: getattr(args, name, None) for name in LAYOUT_FLAGS}
    overrides['fmt'] = getattr(args, 'format', None)
    return settings_from_env(overrides)


def output_format(path: str, args: argparse.Namespace) -> str:
    """--format, else the path's extension, else the configured default."""
    flag = getattr(args, 'format', None)
    if flag:
        return flag
    ext = os.path.splitext(path)[1].lower()
    if ext == '.gpl':
        return 'gpl'
    if ext == '.json':
        return 'json'
    return settings_from_env().fmt


def read_palette(session: Session, path: str, missing_ok: bool = False) -> bool:
    """Load a palette file into the session. False (with a message) on failure."""
    if not os.path.isfile(path):
        if missing_ok:
            return True
        print(f'swatchkit: palette not found: {path}', file=sys.stderr)
        return False
    with open(path, 'rb') as f:
        data = f.read()
    return session.load(os.path.basename(path), data)


def write_bytes(path: str, data: bytes) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'wb') as f:
        f.write(data)


def write_palette(session: Session, path: str, args: argparse.Namespace) -> None:
    _filename, data = session.save(output_format(path, args), os.path.basename(path))
    write_bytes(path, data)
