"""Command: gatekeeper check - Check grants against a resource operation."""

from typing import Annotated

import typer
from rich.console import Console


console = Console()


def check(
    resource: str = typer.Argument(..., help="Resource to check (e.g., 'media')"),
    operation: str = typer.Argument(
        ..., help="Operation to check (e.g., 'read'); '*' checks for full access"
    ),
    grants: Annotated[
        list[str] | None,
        typer.Option("--grant", "-g", help="Granted permission (repeatable)"),
    ] = None,
    manage: bool = typer.Option(
        False, "--manage", help="Check full control of the resource instead"
    ),
) -> None:
    """Check whether a set of grants allows an operation.

    Exits with status 1 when the operation is denied.
    """
    from gatekeeper.permissions.checker import is_allowed

    allowed = is_allowed(grants or [], resource, operation, is_manage_check=manage)
    target = f"{resource}.manage" if manage else f"{resource}.{operation}"

    if allowed:
        console.print(f"[green]allowed[/green] {target}")
        return

    console.print(f"[red]denied[/red] {target}")
    raise typer.Exit(1)
