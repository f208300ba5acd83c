"""
toonplay CLI Commands - Modular command structure.

Structure:
    cli_commands/
    ├── __init__.py      # This file - registration
    ├── convert.py       # convert
    ├── share_cmd.py     # share encode, share decode
    ├── config_cmd.py    # config
    └── ui.py            # serve

Usage:
    from toonplay.cli_commands import register_all

    @click.group()
    def cli():
        pass

    register_all(cli)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_all(cli: "click.Group") -> None:
    """Register all command modules with the CLI group.

    Each module has a `register(cli)` function that adds its commands
    to the CLI group using Click decorators.

    Args:
        cli: The Click group to register commands with
    """
    from . import convert
    from . import share_cmd
    from . import config_cmd
    from . import ui

    convert.register(cli)
    share_cmd.register(cli)
    config_cmd.register(cli)
    ui.register(cli)
