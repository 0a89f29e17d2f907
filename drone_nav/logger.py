# drone_nav/logger.py
# Lightweight logging utilities for the planner.
# Everything goes to stderr so stdout stays reserved for the route report.

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Logger:
    enabled: bool = True
    prefix: str = "[NAV]"

    def info(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} {msg}", file=sys.stderr)

    def warn(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} WARNING: {msg}", file=sys.stderr)

    def error(self, msg: str) -> None:
        print(f"{self.prefix} ERROR: {msg}", file=sys.stderr)

    def search(self, backend: str, n: int, outcome: str, seconds: float) -> None:
        """One summary line per solver run: backend, problem size, outcome, wall time."""
        if self.enabled:
            print(f"{self.prefix} {backend} [n={n}] {outcome} ({seconds:.3f} s)", file=sys.stderr)


# Global default logger
LOGGER = Logger(enabled=True)


def set_enabled(flag: bool) -> None:
    LOGGER.enabled = bool(flag)


def get_logger() -> Logger:
    return LOGGER
