# drone_nav/errors.py
# Exception hierarchy shared by the loader, the solvers and the CLI.
# Everything derives from NavigationError so the CLI can report domain
# failures with one except clause.

from __future__ import annotations


class NavigationError(Exception):
    """Base class for all drone_nav errors."""


class ParamsParseError(NavigationError, ValueError):
    """Drone parameters file cannot be opened, parsed or is out of range."""


class InvalidMatrixError(NavigationError, ValueError):
    """Cost matrix is malformed (not square, negative, NaN, too small...)."""


class UnableToFindPathError(NavigationError):
    """No closed tour exists for the selected cost matrix."""

    def __init__(self, msg: str = "Unable to find path") -> None:
        super().__init__(msg)


class SearchTimeoutError(NavigationError):
    """Branch-and-bound search exceeded its time limit."""
