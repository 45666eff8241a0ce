"""
Variance and standard deviation around a caller-supplied central value.

The mean is passed in rather than recomputed so the same routines can measure
spread around any reference value (a trimmed mean, a target, a median).
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..exceptions import InvalidArgument
from ..samples import Selector, as_sample


def _sum_of_squares(arr: np.ndarray, mean: float) -> float:
    return float(np.sum((arr - float(mean)) ** 2))


def variance_population(
    values, mean: float, *, selector: Optional[Selector] = None
) -> float:
    """Population variance: squared deviations from ``mean`` divided by ``n``."""
    arr = as_sample(values, selector=selector)
    return _sum_of_squares(arr, mean) / arr.size


def variance_sample(
    values, mean: float, *, selector: Optional[Selector] = None
) -> float:
    """Sample variance: squared deviations from ``mean`` divided by ``n - 1``.

    Raises:
        InvalidArgument: If the sample has a single observation.
    """
    arr = as_sample(values, selector=selector)
    if arr.size < 2:
        raise InvalidArgument(
            "Sample variance requires at least 2 observations (n - 1 would be zero)."
        )
    return _sum_of_squares(arr, mean) / (arr.size - 1)


def _checked_sqrt(variance: float) -> float:
    # Also rejects NaN, which a non-finite mean propagates.
    if not variance >= 0:
        raise InvalidArgument(
            f"Variance must be a non-negative number, got {variance!r}."
        )
    return math.sqrt(variance)


def std_dev_population(
    values, mean: float, *, selector: Optional[Selector] = None
) -> float:
    """Square root of :func:`variance_population`."""
    return _checked_sqrt(variance_population(values, mean, selector=selector))


def std_dev_sample(
    values, mean: float, *, selector: Optional[Selector] = None
) -> float:
    """Square root of :func:`variance_sample`."""
    return _checked_sqrt(variance_sample(values, mean, selector=selector))
