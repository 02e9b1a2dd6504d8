"""oopdemos runner: loads a demo, runs it, records the outcome.

Data flow per run:
1. Look up the demo's metadata
2. Import its demo.py and build the arguments run() accepts
3. Call run(), timing it with a monotonic clock
4. Assemble a DemoResult (a failure is recorded, never re-raised)
"""

from __future__ import annotations

import inspect
import logging
import time
from typing import Optional

from rich.console import Console

from oopdemos.demos import list_demos, load_demo
from oopdemos.environment import DemoSettings
from oopdemos.models import DemoResult, RunStatus, RunSummary

logger = logging.getLogger(__name__)


def _run_kwargs(entry, settings: DemoSettings) -> dict:
    """Extra keyword arguments for entry.run(); only demos that roll dice take rng."""
    if "rng" in inspect.signature(entry.run).parameters:
        return {"rng": settings.rng()}
    return {}


def run_demo(
    name: str,
    console: Console,
    settings: Optional[DemoSettings] = None,
    output: Optional[Console] = None,
) -> DemoResult:
    """Execute a single demo.

    Args:
        name: Demo name (e.g., 'coffee').
        console: Rich Console for status lines.
        settings: Seed and logging settings; defaults to an unseeded run.
        output: Console the demo narrates to; defaults to ``console``.

    Returns:
        DemoResult with status, wall clock and, on failure, the error text.
    """
    settings = settings or DemoSettings()
    output = output or console

    info = load_demo(name)
    if not info:
        console.print(f"[red]Error:[/red] Unknown demo: {name}")
        return DemoResult(name=name, status=RunStatus.FAILED, error=f"Unknown demo: {name}")

    console.print(f"\n[bold]Running:[/bold] {info.name}")
    logger.debug("Running %s (seed=%s)", info.module, settings.seed)

    start = time.monotonic()
    try:
        entry = info.load_entry()
        entry.run(output, **_run_kwargs(entry, settings))
    except Exception as e:
        elapsed = time.monotonic() - start
        logger.debug("Demo %s failed", info.name, exc_info=True)
        console.print(f"  [red]FAILED[/red] {type(e).__name__}: {e}")
        return DemoResult(
            name=info.name,
            status=RunStatus.FAILED,
            wall_clock_s=round(elapsed, 3),
            error=f"{type(e).__name__}: {e}",
        )
    elapsed = time.monotonic() - start

    console.print(f"  [bold green]Done.[/bold green] ({elapsed:.2f}s)")
    return DemoResult(name=info.name, status=RunStatus.PASSED, wall_clock_s=round(elapsed, 3))


def run_all_demos(
    console: Console,
    settings: Optional[DemoSettings] = None,
    output: Optional[Console] = None,
) -> RunSummary:
    """Run every discovered demo in name order, continuing past failures."""
    demos = list_demos()
    console.print(f"\n[bold]Demo order:[/bold] {', '.join(d.name for d in demos)}")

    summary = RunSummary()
    for info in demos:
        summary.results.append(run_demo(info.name, console, settings, output))
    return summary
