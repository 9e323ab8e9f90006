"""
CLI for the standings service.

Commands:
    sync         - Run one refresh cycle and show what was loaded
    leaderboard  - Fetch and print a ranked leaderboard
    serve        - Start the HTTP API
"""

import asyncio
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table as RichTable

from .cache.store import CacheStore, DataSet
from .config.settings import get_settings
from .observability.logging import configure_logging
from .query.views import PageRequest, leaderboard_view
from .sync.client import SheetClient
from .sync.orchestrator import RefreshOrchestrator, RefreshReport
from .sync.pipelines import build_pipelines

app = typer.Typer(
    name="standings",
    help="Tournament standings mirror - sync sheets and serve ranked views",
)
console = Console()


async def _refresh_once() -> tuple[CacheStore, RefreshReport]:
    settings = get_settings()
    store = CacheStore()
    async with SheetClient(
        timeout=settings.fetch_timeout_seconds,
        max_attempts=settings.fetch_max_attempts,
    ) as client:
        report = await RefreshOrchestrator(store, build_pipelines(client, settings)).refresh_all()
    return store, report


@app.command()
def sync(
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level"),
):
    """
    Run one refresh cycle against the configured sheets.

    Exits with status 1 if any data set failed to load.
    """
    configure_logging(log_level)
    store, report = asyncio.run(_refresh_once())

    table = RichTable(title="Refresh Results")
    table.add_column("Data set", style="cyan")
    table.add_column("Status")
    table.add_column("Records", justify="right")

    counts = store.counts()
    for data_set in DataSet:
        if data_set in report.failed:
            status = f"[red]failed[/red] {report.failed[data_set]}"
        else:
            status = "[green]ok[/green]"
        table.add_row(data_set.value, status, str(counts[data_set.value]))

    console.print(table)
    rprint(f"Finished in {report.duration_seconds:.2f}s")
    if report.failed:
        raise typer.Exit(1)


@app.command()
def leaderboard(
    second: bool = typer.Option(False, "--second", "-2", help="Use the second leaderboard"),
    sort_by: str = typer.Option("totalPoint", "--sort-by", "-s", help="total or totalPoint"),
    order: str = typer.Option("desc", "--order", "-o", help="asc or desc"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Name substring filter"),
    limit: int = typer.Option(20, "--limit", "-k", help="Rows to show"),
):
    """Fetch a leaderboard and print it ranked with the tie-break cascade."""
    configure_logging("WARNING")
    store, report = asyncio.run(_refresh_once())
    data_set = DataSet.LEADERBOARD2 if second else DataSet.LEADERBOARD
    if data_set in report.failed:
        rprint(f"[red]Could not load {data_set.value}: {report.failed[data_set]}[/red]")
        raise typer.Exit(1)

    request = PageRequest.from_query(
        limit=str(limit), name=name, sort_by=sort_by, order=order, max_page_size=max(limit, 1)
    )
    page = leaderboard_view(store.leaderboard(data_set), request)

    table = RichTable(title=f"{data_set.value} ({page.meta.total} entries)")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Matches")
    table.add_column("Total", justify="right")
    table.add_column("Total point", justify="right")
    table.add_column("Prize")
    for entry in page.items:
        table.add_row(
            entry.position,
            entry.name,
            " ".join(str(p) if p else "-" for p in entry.matches),
            str(entry.total),
            str(entry.total_point),
            entry.prize,
        )
    console.print(table)


@app.command()
def serve():
    """Start the HTTP API with uvicorn."""
    from .api.main import run

    run()


if __name__ == "__main__":
    app()
