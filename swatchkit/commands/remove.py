"""Remove the colour at an index from a palette file.

Exits 1 without touching the file when no item has that index.

Example:
    swatchkit remove palette.json --index 3
"""

from swatchkit.commands._common import add_format_argument, read_palette, write_palette
from swatchkit.core.types import Command

command = Command(
    name='remove',
    help='Remove the colour at an index from a palette file.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('palette', help='Palette file to modify')
    parser.add_argument('-i', '--index', required=True, help='Index of the colour to remove')
    add_format_argument(parser)


@command.run
def run(session, args) -> int:
    if not read_palette(session, args.palette):
        return 1
    if not session.remove(args.index):
        return 1
    status = session.status
    write_palette(session, args.palette, args)
    session.set_status(f'{status} in {args.palette}')
    return 0
