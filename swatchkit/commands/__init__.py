"""swatchkit subcommands.

One module per subcommand. A module is picked up by swatchkit.registry when
it defines a `command` object; its docstring is what `swatchkit help <name>`
prints, and its first line is the short help in the command list.
"""
