"""Fmt command implementation."""

from pathlib import Path

import typer

from ..config import load_config
from ..core import write_rfml
from ..errors import ParseError
from ..loader import load_rfml_file
from ..output import get_output_context


def fmt(
    file: Path = typer.Argument(..., help="RFML file to format"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
) -> None:
    """Print an RFML file in canonical form."""
    ctx = get_output_context()
    config = load_config(Path.cwd())

    if not file.is_file():
        ctx.error(f"File not found: {file}")
        raise typer.Exit(2)

    try:
        test = load_rfml_file(file, config)
    except ParseError as e:
        ctx.error(str(e), {"line": e.line, "reason": e.reason})
        raise typer.Exit(1) from None
    except UnicodeDecodeError:
        ctx.error(f"Not valid UTF-8 text: {file}")
        raise typer.Exit(1) from None
    except OSError as e:
        ctx.error(f"Failed to read file: {e}")
        raise typer.Exit(1) from None

    text = write_rfml(test, default_redirect=config.parser.default_redirect)
    if write:
        file.write_text(text, encoding="utf-8")
        ctx.success(f"Formatted {file}", {"file": str(file)})
    elif ctx.json_mode:
        ctx.print_json({"file": str(file), "rfml": text})
    else:
        typer.echo(text, nl=False)
