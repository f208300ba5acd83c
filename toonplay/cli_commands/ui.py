"""
UI Commands - HTTP playground.

Commands:
- serve: Start the playground API server
"""

import sys
import click


def register(cli):
    """Register UI commands with CLI."""

    @cli.command()
    @click.option('--port', default=8080, help='Port to serve on')
    @click.option('--host', default='127.0.0.1', help='Host to bind to')
    @click.option('--open', 'open_browser', is_flag=True, help='Open browser automatically')
    @click.pass_context
    def serve(ctx, port: int, host: str, open_browser: bool):
        """Start the playground API server.

        One shared session per server: edit any pane, watch the others
        follow, and grab the share link.

        Examples:
            toonplay serve
            toonplay serve --port 3000
            toonplay serve --open
        """
        try:
            from toonplay.ui.server import create_app
            import uvicorn
        except ImportError as e:
            click.echo("UI dependencies not installed.", err=True)
            click.echo("Run: pip install toonplay[ui]", err=True)
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        app = create_app(config=ctx.obj["config"])
        url = f"http://{host}:{port}"

        click.echo("toonplay playground")
        click.echo(f"URL: {url}/api/state")
        click.echo("Press Ctrl+C to stop")
        click.echo("")

        if open_browser:
            import webbrowser
            webbrowser.open(f"{url}/api/state")

        uvicorn.run(app, host=host, port=port, log_level="warning")
