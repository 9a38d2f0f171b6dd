"""Show command implementation."""

from pathlib import Path

import typer

from ..config import load_config
from ..errors import ParseError
from ..loader import find_upload_indexes, load_rfml_file
from ..output import get_output_context


def show(
    file: Path = typer.Argument(..., help="RFML file to show"),
) -> None:
    """Show a parsed RFML test."""
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

    ctx.document(test, find_upload_indexes(test, config))
