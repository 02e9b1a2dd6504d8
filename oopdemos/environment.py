"""Settings for oopdemos runs, read from OOPDEMOS_* environment variables.

Self-contained, no external config files. CLI flags override what is read
here.
"""

from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from typing import Optional

from rich.console import Console

ENV_PREFIX = "OOPDEMOS_"

_TRUTHY = ("1", "true", "yes", "on")


def _env(name: str, environ: Optional[dict[str, str]] = None) -> Optional[str]:
    """Look up OOPDEMOS_<name>, treating an empty value as unset."""
    env = os.environ if environ is None else environ
    value = env.get(f"{ENV_PREFIX}{name}", "").strip()
    return value or None


@dataclass
class DemoSettings:
    """Resolved settings for one CLI invocation."""

    seed: Optional[int] = None
    log_level: str = "INFO"
    no_color: bool = False

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> DemoSettings:
        """Build settings from the environment.

        A malformed OOPDEMOS_SEED raises ValueError rather than being ignored.
        """
        raw_seed = _env("SEED", environ)
        seed = int(raw_seed) if raw_seed is not None else None

        level = (_env("LOG_LEVEL", environ) or "INFO").upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {level}")

        no_color = (_env("NO_COLOR", environ) or "").lower() in _TRUTHY
        return cls(seed=seed, log_level=level, no_color=no_color)

    def rng(self) -> random.Random:
        """A fresh random generator honouring the configured seed."""
        return random.Random(self.seed)


def default_console() -> Console:
    """Console used by demo classes when the caller does not pass one."""
    no_color = (_env("NO_COLOR") or "").lower() in _TRUTHY
    return Console(highlight=False, no_color=no_color)
