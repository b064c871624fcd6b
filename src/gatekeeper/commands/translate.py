"""Command: gatekeeper translate - Resolve a translation key."""

from typing import Annotated

import typer
from rich.console import Console


console = Console()


def translate_key(
    key: str = typer.Argument(..., help="Translation key in dot notation"),
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Locale to resolve against"),
    ] = None,
    values: Annotated[
        list[str] | None,
        typer.Option("--value", help="Placeholder value as name=value (repeatable)"),
    ] = None,
) -> None:
    """Resolve a translation key with optional placeholder values."""
    from gatekeeper.i18n import translate

    placeholders: dict[str, str] = {}
    for item in values or []:
        name, separator, value = item.partition("=")
        if not separator or not name:
            console.print(f"[red]Error:[/red] Invalid value '{item}', expected name=value.")
            raise typer.Exit(1)
        placeholders[name] = value

    console.print(translate(key, placeholders, locale), markup=False, highlight=False)
