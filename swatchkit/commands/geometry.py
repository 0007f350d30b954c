"""Print swatch block size and canvas size for a layout.

The block size is one swatch plus its trailing gaps (unscaled). The canvas
size is what `render` would produce for --count items (or the items in
--palette) at the given --scale.

Example:
    swatchkit geometry --swatch-width 94 --swatch-height 62 --gap-h 2 --gap-v 2
    swatchkit geometry --palette palette.gpl --row-len 4 --scale 2
"""

from swatchkit.commands._common import add_layout_arguments, read_palette, settings_from_args
from swatchkit.core.raster import scaled_grid
from swatchkit.core.types import Command

command = Command(
    name='geometry',
    help='Print swatch block size and canvas size for a layout.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-p', '--palette', default=None, help='Take the item count from this palette')
    parser.add_argument('-k', '--count', type=int, default=0, help='Number of items (default 0)')
    add_layout_arguments(parser)


@command.run
def run(session, args) -> int:
    count = max(0, args.count)
    if args.palette:
        if not read_palette(session, args.palette):
            return 1
        count = len(session.store)
    settings = settings_from_args(args)
    grid = scaled_grid(count, settings)
    print(session.geometry(settings))
    print(
        f'Canvas is {grid.canvas_width} x {grid.canvas_height} '
        f'({grid.cols} cols, {grid.rows} rows, scale {settings.scale})'
    )
    return 0
