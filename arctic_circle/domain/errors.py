"""Exceptions raised by the simulation domain."""

from __future__ import annotations


class InconsistentGeometryError(RuntimeError):
    """Grid geometry broke an invariant of the diamond growth rule.

    Not recoverable: the current run must stop instead of producing an
    inconsistent tiling.
    """
