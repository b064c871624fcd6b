"""Command: gatekeeper roles - List built-in roles."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table


console = Console()


def list_roles(
    examples: bool = typer.Option(
        False, "--examples", "-e", help="Also show the example roles"
    ),
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Project configuration file"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale for labels and descriptions"),
    ] = None,
) -> None:
    """List the roles the system creates, with their protection status."""
    from gatekeeper.config import get_settings
    from gatekeeper.core.errors import ConfigurationError
    from gatekeeper.roles import get_example_roles, get_system_roles, protected_role_notice
    from gatekeeper.utils import load_project_config

    settings = get_settings()

    try:
        project = load_project_config(config or Path(settings.config_file))
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from None

    roles = get_system_roles(project.public_permissions, locale)
    if examples:
        roles.extend(get_example_roles(locale).values())

    table = Table(title="Roles", show_header=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Permissions", style="green")
    table.add_column("Status", no_wrap=True)

    for role in roles:
        status = "[yellow]protected[/yellow]" if role.protected else ""
        table.add_row(role.name, role.label, ", ".join(role.permissions), status)

    console.print()
    console.print(table)

    notice = next(
        (n for n in (protected_role_notice(r, locale) for r in roles) if n is not None),
        None,
    )
    if notice:
        console.print(f"\n[bold]{notice.title}[/bold]: {notice.description}")
    console.print()
