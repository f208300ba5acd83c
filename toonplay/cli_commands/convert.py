"""
Convert Commands - Re-express a document in every notation.

Commands:
- convert: Print JSON, TOON, YAML and CSV renditions plus token costs
"""

import sys

import click

from toonplay.config import DELIMITERS, FormattingOptions
from toonplay.formats import CANONICAL_ID, FORMAT_IDS, JsonAdapter, ParseError, load_adapter
from toonplay.share import SessionState
from toonplay.ux import print_error, print_header, print_token_table

INPUT_FORMATS = ["json", "yaml", "csv"]


def canonical_text_from(text: str, source_format: str, options: FormattingOptions) -> str:
    """Turn input in any editable notation into canonical JSON text.

    Raises:
        ParseError: malformed input
    """
    if source_format == CANONICAL_ID:
        return text
    try:
        adapter = load_adapter(source_format)
    except ImportError as e:
        raise ParseError(f"library unavailable: {e}", source_format)
    document = adapter.parse(text, options)
    return JsonAdapter().serialize(document, options)


def formatting_options(indent: int, delimiter: str) -> FormattingOptions:
    return FormattingOptions(indent_width=indent, delimiter=DELIMITERS[delimiter])


def register(cli):
    """Register convert commands with CLI."""

    @cli.command()
    @click.argument("source", type=click.File("r", encoding="utf-8"))
    @click.option("--from", "source_format", default="json", type=click.Choice(INPUT_FORMATS),
                  help="Notation of SOURCE")
    @click.option("--indent", default=2, type=click.IntRange(0, 8), help="Indent width (0-8)")
    @click.option("--delimiter", default="comma", type=click.Choice(list(DELIMITERS)),
                  help="Field delimiter for TOON and CSV")
    @click.option("--format", "only", default=None, type=click.Choice(FORMAT_IDS),
                  help="Print only this notation, without headers")
    @click.option("--no-tokens", is_flag=True, help="Skip token counting")
    @click.pass_context
    def convert(ctx, source, source_format: str, indent: int, delimiter: str,
                only: str, no_tokens: bool):
        """Show SOURCE as JSON, TOON, YAML and CSV with token costs.

        SOURCE is a file path, or - for stdin.

        Examples:
            toonplay convert data.json
            toonplay convert data.json --delimiter tab --indent 4
            toonplay convert data.yaml --from yaml --format toon
            cat data.json | toonplay convert - --no-tokens
        """
        from toonplay.session import run_playground

        options = formatting_options(indent, delimiter)
        try:
            text = canonical_text_from(source.read(), source_format, options)
        except ParseError as e:
            print_error(f"Cannot parse input: {e}")
            sys.exit(1)

        state = SessionState(json=text, delimiter=options.delimiter, indent=options.indent_width)
        kwargs = {"config": ctx.obj["config"]}
        if no_tokens or only:
            kwargs["tokenizer_factory"] = lambda: None
        playground = run_playground(state, **kwargs)
        controller = playground.controller

        if controller.error:
            print_error(f"Invalid JSON: {controller.error}")
            sys.exit(1)

        if only:
            if not controller.has_adapter(only):
                print_error(f"{only} support is unavailable (library failed to load)")
                sys.exit(1)
            click.echo(controller.text(only))
            return

        for fid in FORMAT_IDS:
            rep = controller.representations[fid]
            print_header(fid.upper(), char="-")
            print(rep.text if controller.has_adapter(fid) else "(unavailable)")
            print()

        if not no_tokens:
            print_token_table(controller.representations.values())
