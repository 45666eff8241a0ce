"""Provide the ordinary least-squares straight-line fit.

This module supports:
- fitting ``y = slope * x + intercept`` to paired samples,
- fitting the same line to one collection of records through two selectors, and
- evaluating the fitted line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

import numpy as np

from ..exceptions import InvalidArgument
from ..samples import Selector, as_sample, project


@dataclass(frozen=True)
class LineFormula:
    """Straight line ``y = slope * x + intercept``.

    Attributes:
        slope: Change in ``y`` per unit change in ``x``.
        intercept: Value of ``y`` at ``x = 0``.
    """

    slope: float
    intercept: float

    def predict(self, x):
        """Evaluate the line at ``x`` (scalar or array-like)."""
        if np.ndim(x) == 0:
            return self.slope * float(x) + self.intercept
        return self.slope * np.asarray(x, dtype=float) + self.intercept

    def __str__(self) -> str:
        return f"f(x) = {self.slope}x + {self.intercept}"


def fit_line(
    xs,
    ys,
    *,
    selector_x: Optional[Selector] = None,
    selector_y: Optional[Selector] = None,
) -> LineFormula:
    """Fit an ordinary least-squares straight line to paired samples.

    Args:
        xs: Independent-variable sample (records when ``selector_x`` is given).
        ys: Dependent-variable sample (records when ``selector_y`` is given).
        selector_x: Optional record-to-number projection for ``xs``.
        selector_y: Optional record-to-number projection for ``ys``.

    Returns:
        LineFormula: Slope and intercept of the best-fit line.

    Raises:
        InvalidArgument: If either sample is empty, the samples differ in
            length, fewer than 2 pairs are given, or every ``x`` is identical
            (no unique line exists).

    Note:
        Uses the moment form of the normal equations,
        ``slope = (mean(x)·mean(y) - mean(xy)) / (mean(x)² - mean(x²))`` and
        ``intercept = mean(y) - slope·mean(x)``.

    References:
        Ordinary least squares linear regression.
    """
    x_arr = as_sample(xs, selector=selector_x, name="xs")
    y_arr = as_sample(ys, selector=selector_y, name="ys")
    if x_arr.size != y_arr.size:
        raise InvalidArgument(
            f"xs and ys must have the same length, got {x_arr.size} and {y_arr.size}."
        )
    if x_arr.size < 2:
        raise InvalidArgument(
            f"Regression requires at least 2 observations, got {x_arr.size}."
        )

    avg_x = float(np.mean(x_arr))
    avg_y = float(np.mean(y_arr))
    avg_xy = float(np.mean(x_arr * y_arr))
    avg_xx = float(np.mean(x_arr * x_arr))

    denom = avg_x * avg_x - avg_xx
    if denom == 0 or np.ptp(x_arr) == 0:
        raise InvalidArgument("Insufficient x variance for regression.")

    slope = (avg_x * avg_y - avg_xy) / denom
    intercept = avg_y - slope * avg_x
    return LineFormula(slope=float(slope), intercept=float(intercept))


def fit_line_by(
    records: Iterable[Any], selector_x: Selector, selector_y: Selector
) -> LineFormula:
    """Fit a line to one collection of records, reading ``x`` and ``y`` from each."""
    if records is None:
        raise InvalidArgument("records must not be None.")
    records = list(records)
    return fit_line(project(records, selector_x), project(records, selector_y))
