"""Demo discovery and loading for oopdemos.

Each demo is a subdirectory of oopdemos/demos/ containing:
    __init__.py  : NAME, DESCRIPTION, CONCEPTS constants
    demo.py      : run(console[, rng]) entry point, also runnable as a script
    tests/       : pytest suite for the demo's classes
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Optional


@dataclass
class DemoInfo:
    """Metadata about a discovered demo."""

    name: str
    description: str
    concepts: tuple[str, ...]
    path: Path
    module: str

    def load_entry(self) -> ModuleType:
        """Import the demo's demo.py module."""
        return importlib.import_module(f"{self.module}.demo")


def _demos_root() -> Path:
    """Absolute path to the demos/ directory."""
    return Path(__file__).parent


def list_demos() -> list[DemoInfo]:
    """Discover all available demos, sorted by directory name.

    Scans subdirectories of oopdemos/demos/ for valid demo packages
    (those with both __init__.py and demo.py).
    """
    demos = []
    for child in sorted(_demos_root().iterdir()):
        if not child.is_dir():
            continue
        info = load_demo(child.name)
        if info:
            demos.append(info)
    return demos


def load_demo(name: str) -> Optional[DemoInfo]:
    """Load a single demo's metadata by name.

    Args:
        name: Directory name under oopdemos/demos/ (e.g., 'coffee').

    Returns:
        DemoInfo if the demo exists and is valid, None otherwise.
    """
    demo_dir = _demos_root() / name
    if not (demo_dir / "__init__.py").exists() or not (demo_dir / "demo.py").exists():
        return None

    module = f"oopdemos.demos.{name}"
    mod = importlib.import_module(module)

    return DemoInfo(
        name=getattr(mod, "NAME", name),
        description=getattr(mod, "DESCRIPTION", ""),
        concepts=tuple(getattr(mod, "CONCEPTS", ())),
        path=demo_dir,
        module=module,
    )
