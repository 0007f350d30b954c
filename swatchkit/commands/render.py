"""Render a palette to a PNG of labelled swatches.

Swatches are laid out row_len per row in ascending index order. Each cell
is filled with its colour and labelled with its name in near-black or
white, whichever has better contrast (sRGB relative luminance > 0.5 gets
dark text). Gaps between cells are transparent.

--scale multiplies swatch size, gaps and font size, so a scale-2 render is
the scale-1 render at twice the resolution.

Font lookup: --font-face as a TrueType name or path, then DejaVu Sans,
Arial or Liberation Sans, then Pillow's bundled font.

Example:
    swatchkit render palette.gpl palette.png --row-len 4 --gap-h 2 --gap-v 2
    swatchkit render palette.json big.png --scale 4 --font-face DejaVuSans-Bold.ttf
"""

from swatchkit.commands._common import add_layout_arguments, read_palette, settings_from_args, write_bytes
from swatchkit.core.types import Command

command = Command(
    name='render',
    help='Render a palette to a PNG of labelled swatches.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('palette', help='Palette file to render')
    parser.add_argument('out', nargs='?', default='palette.png', help='PNG to write (default palette.png)')
    add_layout_arguments(parser)


@command.run
def run(session, args) -> int:
    if not read_palette(session, args.palette):
        return 1
    settings = settings_from_args(args)
    data = session.finish_render(session.render_png(settings))
    if data is None:
        return 1
    write_bytes(args.out, data)
    return 0
