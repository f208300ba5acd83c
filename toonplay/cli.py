"""
toonplay CLI - one document, four notations, token costs side by side.

Commands:
- convert: Show a document as JSON, TOON, YAML and CSV with token counts
- share: Encode/decode share-link tokens
- config: Show or change playground settings
- serve: Run the HTTP playground
"""

import logging

import click

from toonplay import __version__
from toonplay.cli_commands import register_all
from toonplay.config import load_config


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="Config file (default: ~/.toonplay/config.json)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str):
    """toonplay - JSON / TOON / YAML / CSV playground.

    Re-express structured data losslessly in several notations,
    compare their token costs, and share sessions as compact links.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = load_config(config_path)


register_all(cli)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
