"""
Accuracy evaluation commands for LangSift CLI

Example Usage:
    # Full calibration table on a UDHR-style dataset
    langsift evaluate dataset udhr.tsv

    # One substring length with custom thresholds
    langsift evaluate dataset wp-translations.tsv --length 20 --sample-size 10 \\
        --min-accuracy 0.65 --mean-accuracy 0.88
"""

from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from langsift.cli.utils.factory import build_service
from langsift.cli.utils.validators import validate_file_path
from langsift.core.config.validation import ProfileVariant
from langsift.core.exceptions.custom_exceptions import LangSiftError
from langsift.core.logging.logger import get_logger
from langsift.detection.evaluation import (
    UDHR_SHORT_TEXT_TRIALS,
    UDHR_TRIALS,
    AccuracyTrial,
    evaluate_accuracies,
    read_dataset,
    substring_sample,
)

app = typer.Typer(help="Accuracy evaluation commands")
console = Console()
logger = get_logger(__name__)


@app.command()
def dataset(
    input_file: str = typer.Argument(
        ..., help="Tab-separated dataset: language code, text"
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Profile variant: default or short-text"
    ),
    languages: Optional[str] = typer.Option(
        None, "--languages", "-l", help="Comma separated candidate language codes"
    ),
    length: Optional[int] = typer.Option(
        None, "--length", help="Evaluate a single substring length"
    ),
    sample_size: int = typer.Option(
        100, "--sample-size", help="Substrings drawn per text for --length"
    ),
    min_accuracy: float = typer.Option(
        0.0, "--min-accuracy", help="Per-language accuracy threshold for --length"
    ),
    mean_accuracy: float = typer.Option(
        0.0, "--mean-accuracy", help="Mean accuracy threshold for --length"
    ),
) -> None:
    """Measure per-language accuracy on substrings of a dataset"""
    try:
        path = validate_file_path(input_file)
        service = build_service(languages, profile)
        data = read_dataset(path, service.languages)
    except LangSiftError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    if not data:
        console.print("[red]Error:[/red] Dataset has no text in a configured language")
        raise typer.Exit(1)

    if length is not None:
        trials = [AccuracyTrial(length, sample_size, min_accuracy, mean_accuracy)]
    elif service.store.variant is ProfileVariant.SHORT_TEXT:
        trials = list(UDHR_SHORT_TEXT_TRIALS)
    else:
        trials = list(UDHR_TRIALS)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Evaluating {len(data)} languages...", total=None)
            reports = evaluate_accuracies(service, data, trials)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Substring Accuracy")
    table.add_column("Length", style="cyan", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Thresholds", style="blue")
    table.add_column("Status", style="bold")

    for report in reports:
        status = "[green]pass[/green]" if report.passed else "[red]fail[/red]"
        table.add_row(
            str(report.substring_length),
            f"{report.min_accuracy:.3f}",
            f"{report.mean_accuracy:.3f}",
            f"{report.trial.min_threshold:.2f} / {report.trial.mean_threshold:.2f}",
            status,
        )
    console.print(table)

    if not all(report.passed for report in reports):
        raise typer.Exit(1)


@app.command()
def sample(
    content: str = typer.Argument(..., help="Text to sample from"),
    length: int = typer.Option(20, "--length", help="Substring length"),
    size: int = typer.Option(5, "--size", help="Number of substrings"),
) -> None:
    """Print the reproducible substring sample used by the evaluation"""
    try:
        substrings = substring_sample(content, length, size)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    for substring in substrings:
        console.print(repr(substring), markup=False, highlight=False)
