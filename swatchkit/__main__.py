"""swatchkit — build, convert and render named colour palettes.

Usage: swatchkit <command> [options]

Commands are auto-discovered from swatchkit/commands/.
Each command module's docstring is its documentation.
Run `swatchkit help <command>` for full module docs.

Palettes are read and written as palette.v1 JSON or GIMP GPL, chosen by
file extension (.gpl, anything else is JSON).

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, swatchkit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  See `swatchkit help env` for the SWATCHKIT_* variables.
"""

import argparse
import importlib
import sys

from swatchkit import registry
from swatchkit.core.env import load_env
from swatchkit.core.session import READY, Session


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'swatchkit.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  swatchkit add palette.json --name Red --index 0 --color "#ff0000"\n'
        '  swatchkit convert palette.json palette.gpl\n'
        '  swatchkit show palette.gpl --json\n'
        '  swatchkit render palette.gpl palette.png --row-len 4 --scale 2\n'
        '  swatchkit check palette.gpl palette.png --row-len 4 --scale 2\n'
        '  swatchkit geometry --swatch-width 94 --gap-h 2\n'
        '  swatchkit help render\n'
        '\n'
        'Layout defaults (set in .env or environment):\n'
        '  SWATCHKIT_ROW_LEN SWATCHKIT_SWATCH_WIDTH SWATCHKIT_SWATCH_HEIGHT\n'
        '  SWATCHKIT_GAP_H SWATCHKIT_GAP_V SWATCHKIT_FONT_FACE SWATCHKIT_FONT_SIZE\n'
        '  SWATCHKIT_SCALE SWATCHKIT_FORMAT\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatchkit',
        description='Build, convert and render named colour palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help), formatter_class=argparse.RawTextHelpFormatter)
        cmd.add_arguments(p)

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name, or "env"')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: swatchkit help <command> for full docs.')
        return

    if topic == 'env':
        from swatchkit.core import env

        print((env.__doc__ or '').strip())
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'swatchkit: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    session = Session()
    code = registry.get(args.command).execute(session, args)

    # Status goes to stderr so stdout stays clean for --json output
    if session.status != READY:
        print(f'swatchkit: {session.status}', file=sys.stderr)
    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
