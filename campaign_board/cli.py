import asyncio
import json
import logging
from typing import Any, List, Optional

import typer
from typing_extensions import Annotated
from rich.console import Console
from rich.table import Table

from campaign_board.client.campaign_board import CampaignBoard
from campaign_board.domains import OperationResult, Project

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()

ConfigOption = Annotated[
    str, typer.Option(help="Path to the configuration JSON file.")
]
SessionOption = Annotated[
    Optional[str], typer.Option(help="Session token issued by the identity provider.")
]


def load_board(config: str) -> CampaignBoard:
    """Create the client or exit with a readable error."""
    try:
        return CampaignBoard(config_path=config)
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


def report_failure(result: OperationResult) -> None:
    """Print an error result and exit non-zero."""
    error = result.error
    console.print(f"[bold red]{error.code}:[/bold red] {error.message}")
    for violation in error.violations:
        console.print(f"  [red]{violation.field}[/red] ({violation.code.value}): {violation.message}")
    raise typer.Exit(code=1)


def print_projects(title: str, projects: List[Project]) -> None:
    if not projects:
        console.print(f"[yellow]No {title.lower()}.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Goal", justify="right")
    table.add_column("Status")
    table.add_column("Submitted")
    for project in projects:
        table.add_row(
            project.id,
            project.title,
            project.category.value,
            f"${project.goal_amount:,.0f}",
            project.status.value,
            project.submitted_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


def run(board_call: Any) -> OperationResult:
    result = asyncio.run(board_call)
    if not result.ok:
        report_failure(result)
    return result


@app.command()
def submit(
    payload: Annotated[str, typer.Argument(help="Path to a JSON file with the project fields.")],
    session: SessionOption = None,
    config: ConfigOption = "config.json",
):
    """Submit a project for review."""
    try:
        with open(payload, "r") as f:
            fields = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Could not read payload:[/bold red] {e}")
        raise typer.Exit(code=1)

    board = load_board(config)
    result = run(board.submit_project(fields, session))
    console.print(f"[green]Project submitted for review:[/green] {result.data}")
    console.print(f"[dim]{result.message}[/dim]")


@app.command()
def pending(session: SessionOption = None, config: ConfigOption = "config.json"):
    """List projects awaiting review (admins only)."""
    board = load_board(config)
    result = run(board.list_pending_projects(session))
    print_projects("Pending Projects", result.data)


@app.command()
def approve(
    project_id: Annotated[str, typer.Argument(help="ID of the project to approve.")],
    session: SessionOption = None,
    config: ConfigOption = "config.json",
):
    """Approve a pending project (admins only)."""
    board = load_board(config)
    result = run(board.approve_project(project_id, session))
    console.print(f"[green]Approved:[/green] {result.data.title}")


@app.command()
def reject(
    project_id: Annotated[str, typer.Argument(help="ID of the project to reject.")],
    reason: Annotated[str, typer.Option(help="Reason shown to the submitter.")] = "",
    session: SessionOption = None,
    config: ConfigOption = "config.json",
):
    """Reject a pending project with a reason (admins only)."""
    board = load_board(config)
    result = run(board.reject_project(project_id, reason, session))
    console.print(f"[yellow]Rejected:[/yellow] {result.data.title}")


@app.command()
def browse(
    category: Annotated[
        Optional[str], typer.Option(help="Only show projects in this category.")
    ] = None,
    config: ConfigOption = "config.json",
):
    """List published projects."""
    board = load_board(config)
    result = run(board.list_active_projects(category))
    print_projects("Active Projects", result.data)


@app.command()
def mine(session: SessionOption = None, config: ConfigOption = "config.json"):
    """List your own submissions and their review status."""
    board = load_board(config)
    result = run(board.list_my_projects(session))
    print_projects("My Projects", result.data)
    for project in result.data:
        if project.rejection_reason:
            console.print(f"[red]{project.title}[/red] rejected: {project.rejection_reason}")


if __name__ == "__main__":
    app()
