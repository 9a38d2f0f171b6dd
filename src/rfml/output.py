"""Output formatting for rfml CLI."""

import json
from dataclasses import dataclass
from typing import Any, assert_never

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import uploadable_steps
from .models import ActionStep, EmbeddedTest, RFTest


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message respecting output mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print result in appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {message}[/red]")

    def warning(self, message: str) -> None:
        """Print a warning; suppressed in JSON mode."""
        if not self.json_mode:
            self.console.print(f"[yellow]Warning: {message}[/yellow]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{message}[/green]")

    def document(self, test: RFTest, upload_indexes: set[int] | None = None) -> None:
        """Render a parsed test.

        JSON mode prints the submission payload plus the steps; otherwise
        metadata is printed followed by a table of steps.

        Args:
            test: Parsed test
            upload_indexes: 1-based indexes of steps needing a file upload,
                detected with default settings when not given
        """
        if upload_indexes is None:
            upload_indexes = {index for index, _, _ in uploadable_steps(test)}

        if self.json_mode:
            payload = test.to_payload()
            payload["steps"] = [step.model_dump() for step in test.steps]
            payload["has_uploadable_files"] = bool(upload_indexes)
            self.print_json(payload)
            return

        self.console.print(f"[bold]{escape(test.title) or '(untitled)'}[/bold]")
        self.console.print(f"  RFML ID: {escape(test.rfml_id) or '(new)'}")
        self.console.print(f"  Start URI: {escape(test.start_uri) or '-'}")
        self.console.print(f"  Site ID: {'-' if test.site_id is None else test.site_id}")
        self.console.print(f"  Tags: {escape(', '.join(test.tags)) or '-'}")
        self.console.print(f"  Browsers: {escape(', '.join(test.browsers)) or '-'}")
        if test.description:
            self.console.print(f"  Description: {escape(test.description.rstrip())}")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Action")
        table.add_column("Response")
        table.add_column("Redirect")
        for index, step in enumerate(test.steps, start=1):
            marker = " [cyan](upload)[/cyan]" if index in upload_indexes else ""
            match step:
                case ActionStep():
                    action = escape(step.action) + marker
                    table.add_row(str(index), action, escape(step.response), str(step.redirect))
                case EmbeddedTest():
                    action = f"embedded: {escape(step.rfml_id)}"
                    table.add_row(str(index), action, "", str(step.redirect))
                case _:
                    assert_never(step)
        self.console.print(table)


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
