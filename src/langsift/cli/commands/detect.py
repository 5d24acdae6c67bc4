"""
Command-line interface for language detection.

Example Usage:
    # Best language of a text
    langsift detect text "The quick brown fox jumps over the lazy dog"

    # Ranked languages of a file, restricted to a few candidates
    langsift detect file article.txt --all --languages en,de,fr

    # HTML input, short-text profiles, JSON output
    langsift detect file page.html --html --profile short-text --json

    # Candidate languages and trial count from a config file
    langsift detect text "Guten Morgen" --config detector.yaml
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from langsift.cli.utils.factory import build_service
from langsift.cli.utils.validators import validate_file_path
from langsift.core.exceptions.custom_exceptions import LangSiftError
from langsift.core.logging.logger import get_logger
from langsift.detection.base import DetectionStatus
from langsift.detection.preprocessing.cleaners import MarkupCleaner

app = typer.Typer(help="Language detection commands")
console = Console()
logger = get_logger(__name__)


def _report(
    text: str,
    show_all: bool,
    as_json: bool,
    languages: Optional[str],
    profile: Optional[str],
    config_file: Optional[str],
) -> None:
    try:
        service = build_service(languages, profile, config_file=config_file)
    except LangSiftError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    outcome = service.classify(text)

    if as_json:
        console.print_json(json.dumps(outcome.to_dict(), ensure_ascii=False))
    elif outcome.status is DetectionStatus.DETECTED:
        if show_all:
            table = Table(title="Detected Languages")
            table.add_column("Language", style="cyan")
            table.add_column("Probability", style="green", justify="right")
            for language in outcome.languages:
                table.add_row(language.code, f"{language.probability:.6f}")
            console.print(table)
        else:
            console.print(outcome.best.code)
    else:
        console.print(f"[yellow]{outcome.status.value}:[/yellow] {outcome.reason}")

    if outcome.status is DetectionStatus.NO_EVIDENCE:
        raise typer.Exit(2)


@app.command()
def text(
    content: str = typer.Argument(..., help="Text to identify"),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show every ranked language"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    languages: Optional[str] = typer.Option(
        None, "--languages", "-l", help="Comma separated candidate language codes"
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Profile variant: default or short-text"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="YAML or JSON detector configuration file"
    ),
) -> None:
    """Identify the language of a text given on the command line"""
    _report(content, show_all, as_json, languages, profile, config_file)


@app.command()
def file(
    input_file: str = typer.Argument(..., help="Path to a UTF-8 text file"),
    html: bool = typer.Option(
        False, "--html", help="Strip HTML markup before detection"
    ),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show every ranked language"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    languages: Optional[str] = typer.Option(
        None, "--languages", "-l", help="Comma separated candidate language codes"
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Profile variant: default or short-text"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="YAML or JSON detector configuration file"
    ),
) -> None:
    """Identify the language of a file's content"""
    try:
        path = validate_file_path(input_file)
        content = path.read_text(encoding="utf-8")
    except LangSiftError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Cannot read {input_file}: {e}")
        raise typer.Exit(1)

    if html:
        content = MarkupCleaner()(content)

    logger.debug("Detecting file language", path=str(path), characters=len(content))
    _report(content, show_all, as_json, languages, profile, config_file)
