# rpkgdev/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, Dict, List, Optional, Tuple

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_SUCCESS
from ...models import DeploymentResult

console = Console()


def format_deployment_result(result: DeploymentResult) -> None:
    """Format and display a deployment result"""
    lines = [
        f"[green]{EMOJI_SUCCESS}[/green] Package created successfully!",
        "",
        f"[bold]Package:[/bold] {result.package_name}",
        f"[bold]Location:[/bold] {escape(str(result.path))}",
        f"[bold]Paths created:[/bold] {len(result.files_created)}",
        f"[bold]Git:[/bold] {'initialized' if result.git_initialized else 'not initialized'}",
    ]

    if result.ide_project:
        lines.append(f"[bold]RStudio project:[/bold] {result.ide_project.name}")

    if result.warnings:
        lines.append("")
        for warning in result.warnings:
            lines.append(f"[yellow]• {warning}[/yellow]")

    panel = Panel(
        "\n".join(lines),
        title="Deployment Result",
        border_style="green"
    )
    console.print(panel)


def format_table(data: List[Dict[str, Any]],
                 columns: List[Tuple[str, str]],
                 title: Optional[str] = None) -> Table:
    """Create a formatted table

    Args:
        data: List of dictionaries with data
        columns: List of (key, header) tuples
        title: Optional table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.ROUNDED)

    for key, header in columns:
        table.add_column(header, style="cyan" if key == "name" else None)

    for item in data:
        row = []
        for key, _ in columns:
            value = item.get(key, "")
            if value is None:
                value = ""
            row.append(str(value))
        table.add_row(*row)

    return table


def print_json(data: Any) -> None:
    """Print JSON without markup or wrapping, for scripting"""
    click.echo(json.dumps(data, indent=2, default=str))


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}", soft_wrap=True)
    else:
        console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)

