"""rfml CLI: parse and inspect Rainforest RFML test files."""

import typer
from rich.console import Console

from rfml import __version__

from .commands import check, fmt, init, show
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rfml {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="rfml",
    help="Parse and inspect Rainforest RFML test files",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """rfml - Rainforest RFML tools."""
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    console = Console(no_color=no_color, highlight=False, soft_wrap=True)
    set_output_context(OutputContext(console=console, json_mode=json_output))


app.command()(check)
app.command()(show)
app.command()(fmt)
app.command()(init)


if __name__ == "__main__":
    app()
