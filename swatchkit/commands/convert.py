"""Convert a palette between palette.v1 JSON and GIMP GPL.

Reads SRC (GPL if it ends in .gpl, JSON otherwise) and writes DST in the
format given by --format, or by DST's extension.

Converting through GPL renumbers items 0..n-1 in index order: GPL has no
index field, so file position becomes the index on reload.

Example:
    swatchkit convert palette.gpl palette.json
    swatchkit convert palette.json out.txt --format gpl
"""

from swatchkit.commands._common import add_format_argument, read_palette, write_palette
from swatchkit.core.types import Command

command = Command(
    name='convert',
    help='Convert a palette between palette.v1 JSON and GIMP GPL.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('src', help='Palette to read (.json or .gpl)')
    parser.add_argument('dst', help='Palette to write')
    add_format_argument(parser)


@command.run
def run(session, args) -> int:
    if not read_palette(session, args.src):
        return 1
    write_palette(session, args.dst, args)
    return 0
