"""Configuration for swatchkit: .env loading and SWATCHKIT_* render settings.

Load order (first wins):
  1. Command-line flags.
  2. Existing OS environment variables — a .env never overwrites them.
  3. .env file at --env-file path (if explicitly provided).
  4. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables, all optional:

  SWATCHKIT_ROW_LEN        swatches per row          1-256   (8)
  SWATCHKIT_SWATCH_WIDTH   swatch width in px        8-1024  (96)
  SWATCHKIT_SWATCH_HEIGHT  swatch height in px       8-1024  (64)
  SWATCHKIT_GAP_H          horizontal gap in px      0-1024  (0)
  SWATCHKIT_GAP_V          vertical gap in px        0-1024  (0)
  SWATCHKIT_FONT_FACE      label font name or path           (ui-sans-serif)
  SWATCHKIT_FONT_SIZE      label size in px          6-256   (12)
  SWATCHKIT_SCALE          render scale factor       1-16    (1)
  SWATCHKIT_FORMAT         palette save format       json|gpl (json)

Out-of-range values are clamped; unparsable ones use the default.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from swatchkit.core.types import RenderSettings

ENV_PREFIX = 'SWATCHKIT_'

# variable suffix -> RenderSettings field
ENV_FIELDS: dict[str, str] = {
    'ROW_LEN': 'row_len',
    'SWATCH_WIDTH': 'swatch_width',
    'SWATCH_HEIGHT': 'swatch_height',
    'GAP_H': 'gap_h',
    'GAP_V': 'gap_v',
    'FONT_FACE': 'font_face',
    'FONT_SIZE': 'font_size',
    'SCALE': 'scale',
    'FORMAT': 'fmt',
}


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict.

    Handles KEY=value, KEY="value", KEY='value' and an optional leading
    `export`. Unquoted values lose a trailing ` # comment`.
    """
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        else:
            value = value.split(' #', 1)[0].rstrip()
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def settings_from_env(
    overrides: Mapping[str, Any] | None = None, environ: Mapping[str, str] | None = None
) -> RenderSettings:
    """Read SWATCHKIT_* variables, let non-None overrides win, then clamp."""
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    for suffix, name in ENV_FIELDS.items():
        value = env.get(ENV_PREFIX + suffix)
        if value is not None:
            raw[name] = value
    for name, value in (overrides or {}).items():
        if value is not None:
            raw[name] = value
    return RenderSettings.clamped(**raw)
