"""List a palette: index, hex, RGB, label text colour and name.

Items are listed in ascending index order, the order they are saved and
rendered in. --json prints the same listing as JSON, with each item's slug.

Example:
    swatchkit show palette.gpl
    swatchkit show palette.json --json
"""

from swatchkit.commands._common import read_palette
from swatchkit.core.report import format_json, format_text
from swatchkit.core.types import Command

command = Command(
    name='show',
    help='List a palette: index, hex, RGB, label text colour and name.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('palette', help='Palette file to list')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(session, args) -> int:
    if not read_palette(session, args.palette):
        return 1
    items = session.store.snapshot_sorted_by_index()
    if args.json:
        print(format_json(items, source=args.palette))
    else:
        print(format_text(items, source=args.palette))
    return 0
