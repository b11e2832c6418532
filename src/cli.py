"""
Shortlist Command Line Interface

Loads exported candidate and employer JSON, runs the matching engine and
prints the ranked shortlist or every candidate's verdict.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Ensure src is in path
sys.path.insert(0, str(Path(__file__).parent.parent))

app = typer.Typer(
    name="shortlist",
    help="Candidate matching, elimination and scoring engine",
    add_completion=False,
)
console = Console()

_LEVEL_STYLES = {
    "excellent": "bold green",
    "good": "green",
    "fair": "yellow",
    "poor": "red",
}


def _load_inputs(
    candidates_file: Path,
    employer_file: Path,
    exclusions_file: Optional[Path],
    profiles_file: Optional[Path],
):
    """Load every input file, exiting with code 1 on bad input."""
    from src.data.loaders import (
        InputFileError,
        find_profile,
        load_candidates,
        load_employer,
        load_exclusions,
        load_profiles,
    )

    try:
        candidates = load_candidates(candidates_file)
        employer = load_employer(employer_file)
        exclusions = load_exclusions(exclusions_file) if exclusions_file else None
        profile = None
        if profiles_file:
            profile = find_profile(load_profiles(profiles_file), employer.employer_name)
            if profile is None:
                console.print(
                    f"[dim]No profile for employer '{employer.employer_name}'; "
                    "exclusions will not apply.[/dim]"
                )
    except InputFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    return candidates, employer, exclusions, profile


@app.command()
def version():
    """Show application version."""
    from src import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective configuration."""
    from src.utils.config import get_settings
    from src.utils.logger import decision_log_path

    settings = get_settings()

    table = Table(title="Shortlist Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Audit Decisions", str(settings.matching.audit_decisions))
    table.add_row("Log Breakdowns", str(settings.matching.log_breakdowns))
    table.add_row("Log Level", settings.logging.level)
    table.add_row("Log File", str(settings.logging.file_path) if settings.logging.file_output else "disabled")
    table.add_row("Decision Log", str(decision_log_path(settings)) if settings.logging.file_output else "disabled")

    console.print(table)


@app.command()
def rank(
    candidates_file: Path = typer.Argument(..., help="JSON list of candidates"),
    employer_file: Path = typer.Argument(..., help="JSON employer job posting"),
    exclusions_file: Optional[Path] = typer.Option(
        None, "--exclusions", "-x", help="JSON list of candidate exclusions"
    ),
    profiles_file: Optional[Path] = typer.Option(
        None, "--profiles", "-p", help="JSON list of employer profiles"
    ),
    top_n: int = typer.Option(0, "--top", "-n", help="Only show the top N (0 shows all)"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Rank candidates against an employer's requirements."""
    from src.core.matching import get_matching_engine

    candidates, employer, exclusions, profile = _load_inputs(
        candidates_file, employer_file, exclusions_file, profiles_file
    )

    results = get_matching_engine().rank_candidates(candidates, employer, exclusions, profile)
    if top_n > 0:
        results = results[:top_n]

    if as_json:
        payload = [result.model_dump(mode="json") for result in results]
        typer.echo(json.dumps(payload, indent=2))
        return

    if not results:
        console.print(f"[yellow]No candidates survived for {employer.job_title or employer.job_id}.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Shortlist: {employer.job_title} at {employer.employer_name}")
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("ID", justify="right")
    table.add_column("Candidate")
    table.add_column("Score", justify="right")
    table.add_column("Match", justify="right")
    table.add_column("Matched Categories")

    for result in results:
        level = result.score_level.value
        categories = ", ".join(
            f"{item.category} ({item.score})" for item in result.details.breakdown
        )
        table.add_row(
            str(result.rank),
            str(result.candidate.candidate_id),
            escape(result.candidate.full_name) or "-",
            str(result.score),
            f"[{_LEVEL_STYLES[level]}]{result.percentage}%[/{_LEVEL_STYLES[level]}]",
            categories or "[dim]none[/dim]",
        )

    console.print(table)


@app.command()
def verdicts(
    candidates_file: Path = typer.Argument(..., help="JSON list of candidates"),
    employer_file: Path = typer.Argument(..., help="JSON employer job posting"),
    exclusions_file: Optional[Path] = typer.Option(
        None, "--exclusions", "-x", help="JSON list of candidate exclusions"
    ),
    profiles_file: Optional[Path] = typer.Option(
        None, "--profiles", "-p", help="JSON list of employer profiles"
    ),
):
    """Show every candidate's outcome, including exclusion and elimination reasons."""
    from src.core.matching import get_matching_engine
    from src.utils.constants import MatchOutcome

    candidates, employer, exclusions, profile = _load_inputs(
        candidates_file, employer_file, exclusions_file, profiles_file
    )

    results = get_matching_engine().evaluate(candidates, employer, exclusions, profile)

    styles = {
        MatchOutcome.SCORED: "green",
        MatchOutcome.ELIMINATED: "yellow",
        MatchOutcome.EXCLUDED: "red",
    }

    table = Table(title=f"Verdicts: {employer.job_title} at {employer.employer_name}")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Candidate")
    table.add_column("Outcome")
    table.add_column("Rank", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Reasons")

    for result in results:
        outcome = MatchOutcome(result.outcome)
        style = styles[outcome]
        table.add_row(
            str(result.candidate.candidate_id),
            escape(result.candidate.full_name) or "-",
            f"[{style}]{outcome.value}[/{style}]",
            str(result.rank) if result.rank else "-",
            str(result.score),
            escape("; ".join(result.elimination_reasons)) or "[dim]-[/dim]",
        )

    console.print(table)


if __name__ == "__main__":
    app()
