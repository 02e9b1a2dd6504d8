"""CLI for the oopdemos teaching demos.

Usage:
    python -m oopdemos list                  # Show available demos
    python -m oopdemos info game             # Metadata for one demo
    python -m oopdemos run coffee            # Run one demo
    python -m oopdemos run --all             # Run every demo
    python -m oopdemos run game --seed 42    # Reproducible dice rolls
    python -m oopdemos run --all --json out.json  # Also save the summary
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from oopdemos.demos import list_demos, load_demo
from oopdemos.environment import DemoSettings
from oopdemos.models import RunSummary
from oopdemos.report import render_demo_info, render_demo_list, render_summary
from oopdemos.runner import run_all_demos, run_demo

app = typer.Typer(
    name="oopdemos",
    help="Object-oriented programming teaching demos",
    no_args_is_help=True,
)
console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Route log records through Rich on the stderr console."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _load_settings(seed: Optional[int], verbose: bool) -> DemoSettings:
    try:
        settings = DemoSettings.from_env()
    except ValueError as e:
        console.print(f"[red]Invalid environment:[/red] {e}")
        raise typer.Exit(1)

    # Flags win over the environment
    if seed is not None:
        settings.seed = seed
    if verbose:
        settings.log_level = "DEBUG"
    return settings


@app.command("list")
def cmd_list() -> None:
    """Show available demos."""
    demos = list_demos()
    if not demos:
        console.print("[yellow]No demos found.[/yellow]")
        raise typer.Exit(1)
    render_demo_list(demos, console)


@app.command("info")
def cmd_info(
    name: str = typer.Argument(help="Demo name (e.g., 'shapes')"),
) -> None:
    """Show the metadata of one demo."""
    info = load_demo(name)
    if not info:
        console.print(f"[red]Error:[/red] Unknown demo: {name}")
        raise typer.Exit(1)
    render_demo_info(info, console)


@app.command("run")
def cmd_run(
    name: Optional[str] = typer.Argument(None, help="Demo name (e.g., 'coffee')"),
    all_demos: bool = typer.Option(False, "--all", "-a", help="Run every demo in name order"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for demos that roll dice"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also write the run summary as JSON to this file"),
) -> None:
    """Run one demo, or all of them."""
    settings = _load_settings(seed, verbose)
    setup_logging(settings.log_level)
    output = Console(highlight=False, no_color=settings.no_color)

    if all_demos:
        summary = run_all_demos(console, settings, output)
    elif name:
        summary = RunSummary(results=[run_demo(name, console, settings, output)])
    else:
        console.print("[red]Specify a demo name or --all[/red]")
        raise typer.Exit(1)

    render_summary(summary, console)
    if json_path:
        summary.save(json_path)
        console.print(f"Summary written to {json_path}")
    if summary.failed:
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
