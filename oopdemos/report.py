"""Rich tables for demo listings and run summaries."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from oopdemos.demos import DemoInfo
from oopdemos.models import RunStatus, RunSummary

_STATUS_STYLES = {
    RunStatus.PASSED: "green",
    RunStatus.FAILED: "red",
    RunStatus.UNKNOWN: "yellow",
}


def render_demo_list(demos: list[DemoInfo], console: Console) -> None:
    """Render the table printed by `oopdemos list`."""
    table = Table(title="Available Demos", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=10)
    table.add_column("Description", min_width=30)
    table.add_column("Concepts")

    for d in demos:
        table.add_row(d.name, d.description, ", ".join(d.concepts))

    console.print()
    console.print(table)
    console.print()


def render_demo_info(info: DemoInfo, console: Console) -> None:
    table = Table(title=f"Demo: {info.name}", show_header=False)
    table.add_column("Field", style="dim", min_width=12)
    table.add_column("Value")

    table.add_row("Name", info.name)
    table.add_row("Description", info.description or "--")
    table.add_row("Concepts", ", ".join(info.concepts) or "--")
    table.add_row("Module", f"{info.module}.demo")
    table.add_row("Path", str(info.path))

    console.print()
    console.print(table)
    console.print()


def render_summary(summary: RunSummary, console: Console) -> None:
    """Render a Rich table with one row per demo run, plus a totals caption."""
    if not summary.results:
        console.print("[yellow]No demos were run.[/yellow]")
        return

    table = Table(title="Run Summary", show_header=True, header_style="bold")
    table.add_column("Demo", min_width=10)
    table.add_column("Status", justify="center")
    table.add_column("Wall clock", justify="right")
    table.add_column("Error")

    for r in summary.results:
        color = _STATUS_STYLES.get(r.status, "white")
        table.add_row(
            r.name,
            f"[{color}]{r.status.value}[/{color}]",
            f"{r.wall_clock_s:.2f}s",
            r.error or "",
        )

    verdict_color = {"pass": "green", "partial": "yellow", "fail": "red"}.get(summary.verdict, "white")
    table.caption = (
        f"{summary.passed}/{len(summary.results)} passed "
        f"([{verdict_color}]{summary.verdict}[/{verdict_color}]) "
        f"in {summary.total_wall_clock_s:.2f}s"
    )

    console.print()
    console.print(table)
    console.print()
