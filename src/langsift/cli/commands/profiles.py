"""
Profile inspection commands for LangSift CLI
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from langsift.cli.utils.validators import validate_profile_variant
from langsift.core.config.settings import settings
from langsift.core.config.validation import ProfileVariant
from langsift.core.exceptions.custom_exceptions import LangSiftError
from langsift.core.logging.logger import get_logger
from langsift.detection.profiles.sources import profile_source_for

app = typer.Typer(help="Language profile commands")
console = Console()
logger = get_logger(__name__)


def _variant(profile: Optional[str]) -> ProfileVariant:
    return ProfileVariant(validate_profile_variant(profile) or settings.PROFILE_VARIANT)


@app.command("list")
def list_profiles(
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Profile variant: default or short-text"
    ),
) -> None:
    """List the languages a profile variant supplies"""
    try:
        variant = _variant(profile)
        source = profile_source_for(variant)
        codes = source.available_languages()
    except (LangSiftError, ValueError) as e:
        console.print(f"[red]Error:[/red] {getattr(e, 'message', e)}")
        raise typer.Exit(1)

    table = Table(title=f"{variant.value} profiles ({len(codes)})")
    table.add_column("Language", style="cyan")
    for code in codes:
        table.add_row(code)
    console.print(table)
    console.print(f"Source: {source.description}")


@app.command()
def show(
    code: str = typer.Argument(..., help="Language code"),
    top: int = typer.Option(10, "--top", "-n", help="N-grams shown per length"),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Profile variant: default or short-text"
    ),
) -> None:
    """Show totals and the most frequent n-grams of one profile"""
    try:
        language_profile = profile_source_for(_variant(profile)).load(code)
    except (LangSiftError, ValueError) as e:
        console.print(f"[red]Error:[/red] {getattr(e, 'message', e)}")
        raise typer.Exit(1)

    table = Table(title=f"Profile {language_profile.code}")
    table.add_column("Length", style="cyan", justify="right")
    table.add_column("Total", style="green", justify="right")
    table.add_column("Distinct", style="green", justify="right")
    table.add_column("Most frequent", style="yellow")

    for n, frequencies in enumerate(language_profile.frequencies, start=1):
        ranked = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
        table.add_row(
            str(n),
            str(language_profile.total(n)),
            str(len(frequencies)),
            " ".join(repr(ngram) for ngram, _ in ranked[:top]),
        )
    console.print(table)
