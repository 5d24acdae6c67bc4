"""
LangSift CLI - Main entry point
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from langsift.cli.commands import detect, evaluate, profiles
from langsift.core.config.settings import settings
from langsift.core.logging.logger import get_logger

# Initialize CLI app
app = typer.Typer(
    name="langsift",
    help="Character n-gram language identification",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Initialize console and logger
console = Console()
logger = get_logger(__name__)

# Add subcommands
app.add_typer(detect.app, name="detect", help="Language detection commands")
app.add_typer(profiles.app, name="profiles", help="Language profile commands")
app.add_typer(evaluate.app, name="evaluate", help="Accuracy evaluation commands")


def _version_table() -> Table:
    table = Table(title="LangSift Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("LangSift", settings.APP_VERSION)
    table.add_row("Environment", settings.ENVIRONMENT)
    table.add_row("Profile variant", settings.PROFILE_VARIANT)
    table.add_row("Trials", str(settings.NUMBER_OF_TRIALS))
    return table


def version_callback(value: bool) -> None:
    """Handle version callback"""
    if value:
        console.print(_version_table())
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show LangSift version and exit",
    ),
) -> None:
    """
    LangSift CLI - identify the language of text from character n-grams

    Run 'langsift --help' for available commands.
    """
    if verbose:
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)
        for handler in root.handlers:
            handler.setLevel(logging.DEBUG)
        logger.info("Verbose logging enabled")


@app.command()
def version() -> None:
    """Show LangSift version information"""
    console.print(_version_table())


if __name__ == "__main__":
    app()
