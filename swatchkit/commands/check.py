"""Check a rendered PNG against the palette it was rendered from.

Recomputes the grid from the layout flags (use the same ones given to
`render`), then compares the image size with the expected canvas and each
cell's most frequent colour with the item's hex. A cell passes when the
RGB distance is below 20.

Exits 1 if the size is wrong or any cell fails, for CI gating.

Example:
    swatchkit render palette.gpl out.png --row-len 4
    swatchkit check palette.gpl out.png --row-len 4
    swatchkit check palette.gpl out.png --row-len 4 --json
"""

import json
import os
import sys

from swatchkit.commands._common import add_layout_arguments, read_palette, settings_from_args
from swatchkit.core.errors import RenderError
from swatchkit.core.raster import inspect_png
from swatchkit.core.report import format_check_text
from swatchkit.core.types import Command

command = Command(
    name='check',
    help='Check a rendered PNG against the palette it was rendered from.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('palette', help='Palette file the image was rendered from')
    parser.add_argument('image', help='Rendered PNG')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    add_layout_arguments(parser)


@command.run
def run(session, args) -> int:
    if not read_palette(session, args.palette):
        return 1
    if not os.path.isfile(args.image):
        print(f'swatchkit: image not found: {args.image}', file=sys.stderr)
        return 1
    with open(args.image, 'rb') as f:
        data = f.read()

    try:
        result = inspect_png(data, session.store.snapshot_sorted_by_index(), settings_from_args(args))
    except RenderError as e:
        session.set_status(f'Check error: {e}', ok=False)
        return 1

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(format_check_text(result, image_path=args.image))
    failed = sum(1 for c in result['cells'] if not c['pass'])
    if result['pass']:
        session.set_status('Check passed.')
    else:
        session.set_status(f'Check failed: {failed} cell(s) differ', ok=False)
    return 0 if result['pass'] else 1
