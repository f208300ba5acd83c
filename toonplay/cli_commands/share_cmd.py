"""
Share Commands - Share-link tokens.

Commands:
- share encode: Build a share token (or full link) for a document
- share decode: Print the session stored in a token
"""

import json
import sys

import click

from toonplay.config import DELIMITERS
from toonplay.formats import ParseError
from toonplay.share import SessionState, decode_state, encode_state, share_url
from toonplay.ux import print_error

from .convert import INPUT_FORMATS, canonical_text_from, formatting_options


def register(cli):
    """Register share commands with CLI."""

    @cli.group()
    def share():
        """Encode and decode share-link tokens."""
        pass

    @share.command("encode")
    @click.argument("source", type=click.File("r", encoding="utf-8"))
    @click.option("--from", "source_format", default="json", type=click.Choice(INPUT_FORMATS),
                  help="Notation of SOURCE")
    @click.option("--indent", default=2, type=click.IntRange(0, 8), help="Indent width (0-8)")
    @click.option("--delimiter", default="comma", type=click.Choice(list(DELIMITERS)),
                  help="Field delimiter for TOON and CSV")
    @click.option("--url", "as_url", is_flag=True, help="Print a full link instead of the token")
    @click.pass_context
    def share_encode(ctx, source, source_format: str, indent: int, delimiter: str, as_url: bool):
        """Encode SOURCE and options into a share token.

        Examples:
            toonplay share encode data.json
            toonplay share encode data.json --delimiter pipe --url
        """
        options = formatting_options(indent, delimiter)
        try:
            text = canonical_text_from(source.read(), source_format, options)
        except ParseError as e:
            print_error(f"Cannot parse input: {e}")
            sys.exit(1)

        state = SessionState(json=text, delimiter=options.delimiter, indent=options.indent_width)
        if as_url:
            click.echo(share_url(ctx.obj["config"].base_url, state))
        else:
            click.echo(encode_state(state))

    @share.command("decode")
    @click.argument("token")
    def share_decode(token: str):
        """Print the session stored in TOKEN (a token or a full link).

        Examples:
            toonplay share decode eJyrVspKz8...
            toonplay share decode "http://127.0.0.1:8080/#eJyrVspKz8..."
        """
        if "#" in token:
            token = token.split("#", 1)[1]
        state = decode_state(token)
        if state is None:
            print_error("Not a valid share token")
            sys.exit(1)
        click.echo(json.dumps(state.to_dict(), indent=2, ensure_ascii=False))
