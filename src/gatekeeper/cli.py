"""Main Gatekeeper CLI application."""

import typer
from rich.console import Console

from gatekeeper import __version__
from gatekeeper.commands import catalog, check, roles, translate


console = Console()

app = typer.Typer(
    name="gatekeeper",
    help="Inspect permission catalogs, check grants and resolve translations.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="catalog")(catalog.show_catalog)
app.command(name="check")(check.check)
app.command(name="roles")(roles.list_roles)
app.command(name="translate")(translate.translate_key)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """Gatekeeper CLI - permissions and role protection."""
    if version:
        console.print(f"[bold cyan]gatekeeper[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    from gatekeeper.config import get_settings
    from gatekeeper.core.logging import configure_logging
    from gatekeeper.i18n import init_i18n

    settings = get_settings()
    configure_logging(settings)
    init_i18n(settings.default_locale)
    app()


if __name__ == "__main__":
    main()
