"""Error types raised by freqstats."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when an input violates a precondition of a statistics routine.

    Covers empty or non-numeric samples, mismatched paired samples, class and
    quartile indices out of range, zero standard deviation, and the other
    degenerate inputs the routines refuse to compute on. Subclasses
    :class:`ValueError` so callers may catch either.
    """
