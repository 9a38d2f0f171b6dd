"""Check command implementation."""

from pathlib import Path

import typer

from ..config import load_config
from ..core import check_document
from ..errors import ParseError
from ..loader import find_upload_indexes, load_rfml_file
from ..output import get_output_context


def check(
    files: list[Path] = typer.Argument(..., help="RFML files to check"),
) -> None:
    """Parse RFML files and report problems."""
    ctx = get_output_context()
    config = load_config(Path.cwd())

    results = []
    failed = False
    missing = False
    for path in files:
        if not path.is_file():
            missing = True
            results.append({"file": str(path), "ok": False, "error": "File not found"})
            ctx.print(f"[red]✗[/red] {path}: file not found")
            continue

        try:
            test = load_rfml_file(path, config)
        except ParseError as e:
            failed = True
            results.append({"file": str(path), "ok": False, "line": e.line, "error": e.reason})
            ctx.print(f"[red]✗[/red] {path}: line {e.line}: {e.reason}")
            continue
        except UnicodeDecodeError:
            failed = True
            results.append({"file": str(path), "ok": False, "error": "Not valid UTF-8 text"})
            ctx.print(f"[red]✗[/red] {path}: not valid UTF-8 text")
            continue
        except OSError as e:
            failed = True
            results.append({"file": str(path), "ok": False, "error": f"Failed to read file: {e}"})
            ctx.print(f"[red]✗[/red] {path}: failed to read file: {e}")
            continue

        warnings = check_document(test)
        uploads = sorted(find_upload_indexes(test, config))
        results.append(
            {
                "file": str(path),
                "ok": True,
                "rfml_id": test.rfml_id,
                "steps": len(test.steps),
                "warnings": warnings,
                "uploadable_steps": uploads,
            }
        )
        ctx.print(f"[green]✓[/green] {path} ({len(test.steps)} steps)")
        for warning in warnings:
            ctx.warning(warning)
        if uploads:
            ctx.print(f"  Steps needing file upload: {', '.join(map(str, uploads))}")

    ctx.print_json({"results": results})
    if missing:
        raise typer.Exit(2)
    if failed:
        raise typer.Exit(1)
