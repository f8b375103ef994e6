"""
Candidate Ranking Command Line Interface

Provides CLI commands for ranking a candidate pool against a job posting
and summarizing hiring insights from a JSON export.
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

# Ensure src is in path
sys.path.insert(0, str(Path(__file__).parent.parent))

app = typer.Typer(
    name="ats-rank",
    help="Candidate ranking engine CLI",
    add_completion=False,
)
console = Console()


def _load_pool(path: Path) -> tuple[Any, list[Any]]:
    """Read a {"job": {...}, "candidates": [...]} export and validate it."""
    from src.data.models import Candidate, JobPosting

    if not path.exists():
        console.print(f"[red]Error: File does not exist: {path}[/red]")
        raise typer.Exit(1)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {path}: {e}[/red]")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        console.print("[red]Error: Expected an object with 'job' and 'candidates' keys.[/red]")
        raise typer.Exit(1)

    try:
        job = JobPosting.model_validate(data.get("job") or {})
        candidates = [Candidate.model_validate(c) for c in data.get("candidates") or []]
    except ValidationError as e:
        console.print(f"[red]Error: Invalid record in {path}:[/red]\n{e}")
        raise typer.Exit(1)

    return job, candidates


def _build_engine(now: Optional[str]):
    """Build a ranking engine on a fixed or system clock."""
    from src.core.ranking import RankingEngine
    from src.utils.clock import FixedClock, SystemClock
    from src.utils.config import get_settings

    clock = SystemClock()
    if now:
        try:
            clock = FixedClock(datetime.fromisoformat(now))
        except ValueError:
            console.print(f"[red]Error: --now must be an ISO timestamp, got {now!r}[/red]")
            raise typer.Exit(1)

    return RankingEngine(clock, weights=get_settings().ranking.weights)


@app.command()
def version():
    """Show application version."""
    from src import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective ranking configuration."""
    from src.utils.config import get_settings

    settings = get_settings()

    table = Table(title="Ranking Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    for factor, weight in settings.ranking.weights.items():
        table.add_row(f"Weight: {factor}", f"{weight:.2f}")
    table.add_row("Default Sort", str(getattr(settings.ranking.sort_by, "value", settings.ranking.sort_by)))
    table.add_row("Cache Entries", str(settings.ranking.cache_max_entries))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def rank(
    path: Path = typer.Argument(..., help="JSON file with a job and its candidates"),
    sort_by: Optional[str] = typer.Option(None, "--sort-by", "-s", help="priority_score, skill_match, experience or application_date (default: RANKING_SORT_BY)"),
    top_n: int = typer.Option(0, "--top", "-n", help="Only display the first N candidates (0 = all)"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time for recency scoring (ISO 8601)"),
    as_json: bool = typer.Option(False, "--json", help="Print the ranking as JSON"),
):
    """Rank candidates against a job posting."""
    from src.data.models import RankingOptions
    from src.utils.config import get_settings
    from src.utils.constants import SortBy

    settings = get_settings().ranking
    sort_by = sort_by or SortBy(settings.sort_by).value

    try:
        sort_key = SortBy(sort_by)
    except ValueError:
        choices = ", ".join(s.value for s in SortBy)
        console.print(f"[red]Error: Unknown sort key {sort_by!r}. Choose one of: {choices}[/red]")
        raise typer.Exit(1)

    job, candidates = _load_pool(path)
    engine = _build_engine(now)
    options = RankingOptions(sort_by=sort_key, include_analysis=settings.include_analysis)
    ranked = engine.rank(candidates, job, options)
    shown = ranked[:top_n] if top_n > 0 else ranked

    if as_json:
        typer.echo(json.dumps([r.model_dump(mode="json", by_alias=True) for r in shown], indent=2))
        return

    if not ranked:
        console.print("[yellow]No candidates to rank.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Ranking: {job.title or job.id or 'job'}")
    table.add_column("Rank", style="bold", justify="right")
    table.add_column("Candidate", style="cyan")
    table.add_column("Priority", justify="right")
    table.add_column("Skills %", justify="right")
    table.add_column("Missing Skills", style="dim")

    for r in shown:
        score_style = "green" if r.priority_score >= 80 else "yellow" if r.priority_score >= 60 else "red"
        missing = ", ".join(r.skill_match.missing_skills[:3]) if r.skill_match else ""
        table.add_row(
            str(r.rank),
            r.candidate.display_name,
            f"[{score_style}]{r.priority_score}[/{score_style}]",
            f"{r.skill_match_score:.2f}",
            missing,
        )

    console.print(table)


@app.command()
def insights(
    path: Path = typer.Argument(..., help="JSON file with a job and its candidates"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time for recency scoring (ISO 8601)"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """Summarize hiring insights for a candidate pool."""
    from src.core.ranking import InsightAggregator

    job, candidates = _load_pool(path)
    report = InsightAggregator(_build_engine(now)).aggregate(candidates, job)

    if as_json:
        typer.echo(json.dumps(report.model_dump(mode="json", by_alias=True), indent=2))
        return

    console.print(f"[bold]Insights: {job.title or job.id or 'job'}[/bold]")
    console.print(f"  Candidates: [cyan]{report.total_candidates}[/cyan]")
    console.print(f"  Average score: [cyan]{report.average_score}[/cyan]")

    dist = report.score_distribution
    console.print(
        f"  Distribution: [green]{dist.excellent}[/green] excellent, "
        f"[green]{dist.good}[/green] good, [yellow]{dist.average}[/yellow] average, "
        f"[red]{dist.below}[/red] below"
    )

    if report.top_candidates:
        console.print("\n[bold]Top Candidates:[/bold]")
        for r in report.top_candidates:
            console.print(f"  {r.rank}. {r.candidate.display_name} ([green]{r.priority_score}[/green])")

    if report.skill_gaps:
        table = Table(title="Skill Gaps")
        table.add_column("Skill", style="cyan")
        table.add_column("Coverage", justify="right")
        table.add_column("Candidates", justify="right")
        for gap in report.skill_gaps:
            table.add_row(gap.skill, f"{gap.coverage}%", f"{gap.candidates_with_skill}/{gap.total_candidates}")
        console.print(table)

    for rec in report.recommendations:
        style = "yellow" if rec.type == "warning" else "blue"
        console.print(f"[{style}]{rec.type.upper()}:[/{style}] {rec.message}")


if __name__ == "__main__":
    app()
