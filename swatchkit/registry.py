"""Subcommand lookup.

Every public module in swatchkit/commands/ that exposes a module-level
`command` (a Command) becomes a subcommand under that command's name.
Modules are imported once, on first lookup.
"""

import importlib
import pkgutil

import swatchkit.commands
from swatchkit.core.types import Command

_commands: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Import the command modules and return {name: Command}."""
    if _commands:
        return _commands

    for info in pkgutil.iter_modules(swatchkit.commands.__path__):
        if info.name.startswith('_'):
            continue
        module = importlib.import_module(f'swatchkit.commands.{info.name}')
        cmd = getattr(module, 'command', None)
        if not isinstance(cmd, Command):
            continue
        if cmd.name in _commands:
            raise RuntimeError(f'Command {cmd.name!r} is defined twice (second in {module.__name__})')
        _commands[cmd.name] = cmd

    return _commands


def get(name: str) -> Command:
    reg = discover()
    try:
        return reg[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
