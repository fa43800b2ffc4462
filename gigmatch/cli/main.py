"""CLI interface for gigmatch using Typer."""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config.loader import load_config
from ..core.matching.explainer import explain_job_match, generate_match_explanation_with_ai
from ..core.matching.recommend import get_recommended_jobs
from ..core.matching.scorer import score_breakdown
from ..core.matching.skills import extract_skills
from ..core.models.profiles import Job, WorkerProfile
from ..core.models.search import RAGQuery
from ..core.safety.fraud import FraudulentPostingError, detect_fraud_keywords, ensure_job_postable
from ..core.safety.messages import (
    check_message_suspicion,
    filter_chat_message,
    mask_sensitive_content,
)
from ..observability.logger import get_logger, setup_logging
from ..search.ranker import HybridRanker
from ..search.store import RAGStore

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="gigmatch",
    help="gigmatch - worker/job matching, safety filters and résumé search",
    add_completion=False,
)

JsonFile = Annotated[
    Path,
    typer.Argument(exists=True, file_okay=True, dir_okay=False, help="Path to a JSON file"),
]


@app.callback()
def main() -> None:
    """Configure logging from config before any command runs."""
    log_config = load_config().get("logging", {})
    setup_logging(
        log_level=log_config.get("level", "INFO"),
        log_format=log_config.get("format", "json"),
        log_file=log_config.get("file"),
    )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (IOError, UnicodeDecodeError, json.JSONDecodeError) as e:
        console.print(f"[red]! Error reading {path}:[/red] {e}")
        raise typer.Exit(code=1)


def _load_model(path: Path, model: type) -> Any:
    try:
        return model.model_validate(_read_json(path))
    except ValidationError as e:
        console.print(f"[red]! Invalid {model.__name__} in {path}:[/red]\n{e}")
        raise typer.Exit(code=1)


@app.command()
def score(
    worker_file: JsonFile,
    job_file: JsonFile,
    ai: Annotated[bool, typer.Option("--ai/--no-ai", help="Ask the LLM for the explanation")] = False,
):
    """Score a worker profile against a job posting."""
    worker: WorkerProfile = _load_model(worker_file, WorkerProfile)
    job: Job = _load_model(job_file, Job)

    breakdown = score_breakdown(worker, job)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Signal")
    table.add_column("Points", justify="right")
    table.add_column("Max", justify="right", style="dim")
    table.add_row("Skills", f"{breakdown.skills:g}", "40")
    table.add_row("Category", f"{breakdown.category:g}", "20")
    table.add_row("Location", f"{breakdown.location:g}", "15")
    table.add_row("Availability", f"{breakdown.availability:g}", "15")
    table.add_row("Experience", f"{breakdown.experience:g}", "10")
    table.add_row("[bold]Total[/bold]", f"[bold]{breakdown.total}[/bold]", "100")
    console.print(table)

    if ai:
        from ..integrations.openai_client import OpenAIClient

        client = OpenAIClient.from_config(load_config())
        explanation = asyncio.run(
            generate_match_explanation_with_ai(worker, job, breakdown.total, generator=client)
        )
    else:
        explanation = explain_job_match(worker, job, breakdown.total)
    console.print(f"\n[bold]Why:[/bold] {explanation}")


@app.command()
def recommend(
    worker_file: JsonFile,
    jobs_file: JsonFile,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Number of jobs to show")] = 10,
):
    """Recommend jobs from a JSON list for a worker."""
    worker: WorkerProfile = _load_model(worker_file, WorkerProfile)
    raw_jobs = _read_json(jobs_file)
    if not isinstance(raw_jobs, list):
        console.print(f"[red]! Error:[/red] {jobs_file} must contain a JSON list of jobs")
        raise typer.Exit(code=1)

    try:
        jobs = [Job.model_validate(item) for item in raw_jobs]
    except ValidationError as e:
        console.print(f"[red]! Invalid job in {jobs_file}:[/red]\n{e}")
        raise typer.Exit(code=1)

    recommendations = get_recommended_jobs(worker, jobs, limit=limit)
    if not recommendations:
        console.print("[yellow]No recommended jobs[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Rank", style="dim", width=6)
    table.add_column("Job")
    table.add_column("Category")
    table.add_column("Location")
    table.add_column("Score", justify="right")
    for rank, rec in enumerate(recommendations, start=1):
        table.add_row(str(rank), rec.job.title, rec.job.category, rec.job.location, str(rec.score))
    console.print(table)


@app.command()
def skills(
    description: Annotated[str, typer.Argument(help="Free-text self description")],
):
    """Extract normalized skills from a self description."""
    found = extract_skills(description)
    if not found:
        console.print("[yellow]No skills recognized[/yellow]")
        return
    console.print(", ".join(found))


@app.command("scan-job")
def scan_job(
    title: Annotated[str, typer.Argument(help="Job title")],
    description: Annotated[str, typer.Argument(help="Job description")] = "",
):
    """Scan a job posting for fraud keywords."""
    threshold = load_config().get("safety", {}).get("posting_block_threshold", 2)

    scan = detect_fraud_keywords(f"{title} {description}")
    if not scan.is_suspicious:
        console.print("[green]> No fraud keywords found[/green]")
    else:
        console.print(f"[yellow]Suspicious keywords:[/yellow] {', '.join(scan.keywords)}")

    try:
        ensure_job_postable(title, description, threshold=threshold)
    except FraudulentPostingError as e:
        console.print(f"[red]! Posting blocked:[/red] {e}")
        raise typer.Exit(code=1)
    console.print("[green]> Posting allowed[/green]")


@app.command("check-message")
def check_message(
    message: Annotated[str, typer.Argument(help="Chat message text")],
):
    """Run the chat safety checks on a message."""
    suspicion = check_message_suspicion(message)
    filtered = filter_chat_message(message)

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Suspicious", "[red]yes[/red]" if suspicion.is_suspicious else "[green]no[/green]")
    table.add_row("Reason", suspicion.reason or "-")
    table.add_row("Blocked", "[red]yes[/red]" if filtered.blocked else "[green]no[/green]")
    table.add_row("Filter category", filtered.category or "-")
    table.add_row("Masked", escape(mask_sensitive_content(message)))
    console.print(table)


@app.command()
def search(
    resumes_file: JsonFile,
    query: Annotated[str, typer.Argument(help="Search query text")],
    skill: Annotated[
        list[str] | None, typer.Option("--skill", "-s", help="Required skill (repeatable)")
    ] = None,
    min_experience: Annotated[
        float | None, typer.Option("--min-experience", "-e", help="Minimum years of experience")
    ] = None,
    limit: Annotated[int | None, typer.Option("--limit", "-n", help="Number of results")] = None,
    rerank: Annotated[bool, typer.Option("--rerank/--no-rerank", help="Use LLM re-ranking")] = False,
    parse: Annotated[
        bool, typer.Option("--parse/--no-parse", help="Let the LLM turn the query into filters")
    ] = False,
):
    """Search résumés from a JSON list of worker documents."""
    config = load_config()
    workers = _read_json(resumes_file)
    if not isinstance(workers, list):
        console.print(f"[red]! Error:[/red] {resumes_file} must contain a JSON list of résumés")
        raise typer.Exit(code=1)

    store = RAGStore()
    try:
        indexed = store.bulk_index(workers)
    except (KeyError, ValidationError) as e:
        console.print(f"[red]! Invalid résumé entry:[/red] {e}")
        raise typer.Exit(code=1)
    console.print(f"[dim]Indexed {indexed} résumés[/dim]")

    configured = HybridRanker.from_config(store, config) if (rerank or parse) else None
    ranker = configured if rerank else HybridRanker(store)

    default_limit = config.get("search", {}).get("default_limit", 10)

    async def run_search():
        if parse:
            rag_query = await configured.parse_rag_query(query)
        else:
            rag_query = RAGQuery(text=query)
        fields = rag_query.model_dump()
        fields["limit"] = limit if limit is not None else default_limit
        if skill:
            fields["skills"] = list(skill)
        if min_experience is not None:
            fields["min_experience"] = min_experience
        return await ranker.rag_search(RAGQuery(**fields))

    results = asyncio.run(run_search())

    if not results:
        console.print("[yellow]No results found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Rank", style="dim", width=6)
    table.add_column("Worker")
    table.add_column("Score", justify="right")
    table.add_column("Matched")
    table.add_column("Why")

    for idx, res in enumerate(results, start=1):
        matched = ", ".join(res.matched_skills + res.matched_keywords)
        table.add_row(
            str(idx),
            res.worker_name or res.worker_id,
            f"{res.score:.2f}",
            matched[:60],
            res.explanation or "",
        )

    console.print(table)


if __name__ == "__main__":
    app()
