"""Command: gatekeeper catalog - Show the permission catalog."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table


console = Console()


def show_catalog(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Project configuration file"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale for labels and descriptions"),
    ] = None,
) -> None:
    """Show every permission available for the configured resources.

    The roles resource itself is always included.
    """
    from gatekeeper.config import get_settings
    from gatekeeper.core.errors import ConfigurationError
    from gatekeeper.permissions.catalog import build_role_catalog
    from gatekeeper.utils import load_project_config

    settings = get_settings()
    config_path = config or Path(settings.config_file)

    try:
        project = load_project_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1) from None

    entries = build_role_catalog(
        project.resources,
        project.custom_permissions,
        roles_slug=project.roles_slug or settings.roles_slug,
        locale=locale,
    )

    table = Table(title="Permission Catalog", show_header=True)
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Permission", style="green", no_wrap=True)
    table.add_column("Label")
    table.add_column("Description")

    for entry in entries:
        table.add_row(entry.category or "", entry.value, entry.label, entry.description or "")

    console.print()
    console.print(table)
    console.print()
