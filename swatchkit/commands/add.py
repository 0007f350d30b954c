"""Add a colour to a palette file, or update the colour at an index.

If an item with the same --index exists its name and colour are replaced
in place; otherwise a new item is appended. A missing palette file is
treated as empty. --color must be '#RRGGBB'; anything else is stored as
#000000. --index defaults to the number of items already in the palette.

Example:
    swatchkit add palette.json --name Red --index 0 --color '#ff0000'
    swatchkit add palette.gpl --name Sky --color '#87CEEB'
"""

from swatchkit.commands._common import add_format_argument, read_palette, write_palette
from swatchkit.core.types import Command

command = Command(
    name='add',
    help='Add a colour to a palette file, or update the colour at an index.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('palette', help='Palette file to modify (created if missing)')
    parser.add_argument('-N', '--name', default='', help='Colour name')
    parser.add_argument('-i', '--index', default=None, help='Index, 0-999999 (default: next free slot)')
    parser.add_argument('-c', '--color', required=True, help="Colour as '#RRGGBB'")
    add_format_argument(parser)


@command.run
def run(session, args) -> int:
    if not read_palette(session, args.palette, missing_ok=True):
        return 1
    index = args.index if args.index is not None else session.store.next_index()
    session.add_or_update(args.name, index, args.color)
    status = session.status
    write_palette(session, args.palette, args)
    session.set_status(f'{status} in {args.palette}')
    return 0
