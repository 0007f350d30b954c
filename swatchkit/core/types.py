"""Shared types for swatchkit: PaletteItem, PaletteEntry, RenderSettings, Command."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

MAX_INDEX = 999_999

_LEADING_INT_RE = re.compile(r'\s*([+-]?\d+)')


@dataclass
class PaletteItem:
    """One colour in the live palette. `id` is session identity only."""

    id: str  # opaque token, never serialised
    name: str
    index: int  # display/sort key, not unique by construction
    hex: str  # canonical '#RRGGBB'


@dataclass(frozen=True)
class PaletteEntry:
    """The serialisable (name, index, hex) triple produced by decoders."""

    name: str
    index: int
    hex: str


def clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def coerce_int(value: Any, default: int) -> int:
    """Parse a form-style integer.

    Leading digits win ('12px' -> 12, '3.9' -> 3). Unparsable values and zero
    both fall back to default, the same as `parseInt(v) || default`.
    """
    if isinstance(value, bool):
        n = int(value)
    elif isinstance(value, int):
        n = value
    elif isinstance(value, float):
        n = int(value) if value == value and abs(value) != float('inf') else 0
    elif isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        n = int(m.group(1)) if m else 0
    else:
        n = 0
    return n or default


@dataclass(frozen=True)
class RenderSettings:
    """Layout, font and output options, always within their documented ranges."""

    row_len: int = 8
    swatch_width: int = 96
    swatch_height: int = 64
    gap_h: int = 0
    gap_v: int = 0
    font_face: str = 'ui-sans-serif'
    font_size: int = 12
    scale: int = 1
    fmt: str = 'json'

    @classmethod
    def clamped(
        cls,
        row_len: Any = None,
        swatch_width: Any = None,
        swatch_height: Any = None,
        gap_h: Any = None,
        gap_v: Any = None,
        font_face: Any = None,
        font_size: Any = None,
        scale: Any = None,
        fmt: Any = None,
    ) -> RenderSettings:
        """Build settings from raw values, applying defaults and range clamps."""
        face = font_face.strip() if isinstance(font_face, str) else ''
        fmt_value = fmt.strip().lower() if isinstance(fmt, str) else ''
        return cls(
            row_len=clamp(coerce_int(row_len, 8), 1, 256),
            swatch_width=clamp(coerce_int(swatch_width, 96), 8, 1024),
            swatch_height=clamp(coerce_int(swatch_height, 64), 8, 1024),
            gap_h=clamp(coerce_int(gap_h, 0), 0, 1024),
            gap_v=clamp(coerce_int(gap_v, 0), 0, 1024),
            font_face=face or 'ui-sans-serif',
            font_size=clamp(coerce_int(font_size, 12), 6, 256),
            scale=clamp(coerce_int(scale, 1), 1, 16),
            fmt=fmt_value if fmt_value in ('json', 'gpl') else 'json',
        )


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='show', help='List the palette')

        @command.arguments
        def arguments(parser):
            parser.add_argument('palette')

        @command.run
        def run(session, args):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, session: Any, args: Any) -> int:
        """Execute the command's run function, returning its exit status."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(session, args) or 0
