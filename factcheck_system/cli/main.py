"""Interactive CLI for the fact-check pipeline using Typer and Rich."""

import asyncio
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from factcheck_system.config.settings import settings
from factcheck_system.config.logging import get_logger
from factcheck_system.data_management.schemas import FactCheckVerdict, Recommendation
from factcheck_system.pipeline import FactCheckPipeline

app = typer.Typer(
    help="Fact-check CLI - verify claims against web evidence and media analysis",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")

RECOMMENDATION_STYLES = {
    Recommendation.AUTHENTIC: "green",
    Recommendation.NEEDS_REVIEW: "yellow",
    Recommendation.DUBIOUS: "red",
}


@app.command()
def status() -> None:
    """
    Display configuration and collaborator readiness.
    """
    logger.info("Displaying system status")

    table = Table(title="Fact-Check System Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=18)
    table.add_column("Details", style="yellow")

    python_version = f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    table.add_row("Environment", "✓ Ready", python_version)

    services = settings.service_status()
    table.add_row(
        "Chat Gateway",
        _status_cell(services["gateway"]),
        f"{settings.gateway_url} (model: {settings.gateway_model}, timeout: {settings.gateway_timeout:g}s)",
    )
    table.add_row(
        "Brave Search",
        _status_cell(services["brave_search"]),
        f"timeout: {settings.brave_timeout:g}s, results/query: {settings.brave_result_count}",
    )
    table.add_row("Logging", "✓ Active", f"Level: {settings.log_level}, Format: {settings.log_format}")

    console.print(table)


@app.command()
def check(
    claim: str = typer.Argument("", help="Claim text to verify"),
    media: Optional[str] = typer.Option(None, "--media", "-m", help="Path to an image to analyze"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw verdict record as JSON"),
) -> None:
    """
    Run one fact-check analysis and print the verdict.
    """
    if not claim and not media:
        console.print("[red]Provide a claim and/or --media path.[/red]")
        raise typer.Exit(code=2)

    for service, state in settings.service_status().items():
        if state != "configured":
            logger.warning(f"{service} not configured, results will be degraded")

    result = asyncio.run(_run_check(claim, media))

    if isinstance(result, dict) or result is None:
        error = result.get("error") if isinstance(result, dict) else "no result"
        console.print(f"[bold red]Analysis failed:[/bold red] {error}")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(result.model_dump_json())
        return

    _render_verdict(result)


async def _run_check(claim: str, media: Optional[str]):
    pipeline = FactCheckPipeline()
    try:
        analysis_id = await pipeline.submit(claim, media)
        with console.status("[bold cyan]Analyzing claim...[/bold cyan]"):
            await pipeline.wait_all()
        return await pipeline.get_result(analysis_id)
    finally:
        await pipeline.aclose()


def _status_cell(state: str) -> str:
    return "✓ Configured" if state == "configured" else "⚠ Not Configured"


def _render_verdict(result: FactCheckVerdict) -> None:
    style = RECOMMENDATION_STYLES.get(result.recommendation, "white")
    console.print(
        Panel(
            f"[bold]{result.verdict.value}[/bold]  ({result.confidence * 100:.1f}% confidence, "
            f"[{style}]{result.recommendation.value}[/{style}])\n\n{result.explanation}",
            title=f"Claim: {result.claim or '(media only)'}",
            subtitle=f"input: {result.input_type.value}",
        )
    )

    breakdown = Table(title="Confidence Breakdown", header_style="bold magenta")
    breakdown.add_column("Signal", style="cyan")
    breakdown.add_column("Value", justify="right")
    for name, value in result.confidence_breakdown.model_dump().items():
        breakdown.add_row(name.replace("_", " "), "n/a" if value is None else f"{value:.2f}")
    console.print(breakdown)

    if result.sources:
        sources = Table(title="Sources", header_style="bold magenta")
        sources.add_column("Tier", width=6)
        sources.add_column("Stance", width=12)
        sources.add_column("Title")
        sources.add_column("URL", style="blue")
        for source in result.sources:
            sources.add_row(
                str(source.tier) if source.tier else "-",
                source.stance.value,
                source.title,
                source.url,
            )
        console.print(sources)

    if result.media_analysis is not None:
        media = result.media_analysis
        score = "n/a" if media.authenticity_score is None else f"{media.authenticity_score * 100:.1f}%"
        console.print(
            Panel(
                f"Type: {media.type.value}\nAuthenticity: {score}\n"
                f"Indicators: {', '.join(media.deepfake_indicators) or 'none'}\n{media.notes}",
                title=f"Media: {media.filename}",
            )
        )


if __name__ == "__main__":
    app()
