"""
Configuration Commands - Playground settings management.

Commands:
- config: Show or change settings (tokenizer, debounce, share base URL)
"""

import click

from toonplay.config import get_config_path, save_config


def register(cli):
    """Register configuration commands with CLI."""

    @cli.command("config")
    @click.option("--encoding", default=None, help="tiktoken encoding name (e.g. o200k_base)")
    @click.option("--debounce", default=None, type=click.FloatRange(0.0, 10.0),
                  help="Share-link update delay in seconds")
    @click.option("--base-url", default=None, help="Base URL used for share links")
    @click.option("--show", is_flag=True, help="Show current configuration")
    @click.pass_context
    def config_cmd(ctx, encoding: str, debounce: float, base_url: str, show: bool):
        """Show or change playground settings.

        Examples:
            toonplay config --show
            toonplay config --encoding cl100k_base
            toonplay config --base-url https://example.com/playground
        """
        config = ctx.obj["config"]
        path = ctx.obj["config_path"] or str(get_config_path())

        if show or (encoding is None and debounce is None and base_url is None):
            click.echo(f"Configuration ({path}):")
            click.echo(f"  Tokenizer encoding: {config.tokenizer_encoding}")
            click.echo(f"  Debounce: {config.debounce_seconds}s")
            click.echo(f"  Share base URL: {config.base_url}")
            return

        if encoding is not None:
            config.tokenizer_encoding = encoding
            click.echo(f"Tokenizer encoding: {encoding}")
        if debounce is not None:
            config.debounce_seconds = debounce
            click.echo(f"Debounce: {debounce}s")
        if base_url is not None:
            config.base_url = base_url
            click.echo(f"Share base URL: {base_url}")

        save_config(config, path)
