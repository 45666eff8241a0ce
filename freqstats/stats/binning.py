"""Build histogram classes from a sample's range.

The class width follows the square-root choice: the range is divided into
``round(sqrt(n))`` classes. Class boundaries start one and a half widths below
the sample minimum and advance by one width per class.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..exceptions import InvalidArgument
from ..samples import Selector, as_sample

DEFAULT_EXTRA_CLASSES = 4


def compute_range(values, *, selector: Optional[Selector] = None) -> float:
    """Return ``max(values) - min(values)``."""
    arr = as_sample(values, selector=selector)
    return float(arr.max() - arr.min())


def compute_class_width(
    values, value_range: float, *, selector: Optional[Selector] = None
) -> float:
    """Divide ``value_range`` into ``round(sqrt(n))`` equal classes.

    Args:
        values: The sample; only its size is used.
        value_range (float): Span to divide, usually ``compute_range(values)``.
        selector: Optional record-to-number projection.

    Returns:
        float: The class width.

    Note:
        ``round`` is Python's built-in round-half-to-even. The square root of
        a whole number is never exactly halfway between two integers, so the
        tie rule never changes the result: 125 observations give 11 classes,
        30 give 5.
    """
    arr = as_sample(values, selector=selector)
    k = int(round(math.sqrt(arr.size)))
    return float(value_range) / float(k)


def compute_class_boundaries(
    values,
    class_width: float,
    number_of_classes: int,
    *,
    selector: Optional[Selector] = None,
) -> np.ndarray:
    """Return the start of each class.

    The first boundary is ``min(values) - class_width / 2 - class_width`` and
    every following boundary adds one ``class_width``.

    Args:
        values: The sample; only its minimum is used.
        class_width (float): Width of each class, finite and positive.
        number_of_classes (int): Number of boundaries to produce, at least 2.
        selector: Optional record-to-number projection.

    Returns:
        numpy.ndarray: ``number_of_classes`` strictly increasing boundaries.

    Raises:
        InvalidArgument: If the sample is empty, ``number_of_classes`` is not
            an integer greater than 1, or ``class_width`` is not a finite
            positive number.
    """
    arr = as_sample(values, selector=selector)
    if isinstance(number_of_classes, bool) or not isinstance(
        number_of_classes, (int, np.integer)
    ):
        raise InvalidArgument(
            f"number_of_classes must be an integer, got {type(number_of_classes)}"
        )
    if number_of_classes <= 1:
        raise InvalidArgument(
            f"number_of_classes must be greater than 1, got {number_of_classes}"
        )
    width = float(class_width)
    if not math.isfinite(width) or width <= 0:
        raise InvalidArgument(f"class_width must be finite and > 0, got {width}")

    start = float(arr.min()) - width / 2.0 - width
    steps = np.full(int(number_of_classes), width)
    steps[0] = start
    return np.cumsum(steps)


def suggest_class_count(values, *, selector: Optional[Selector] = None) -> int:
    """Return a class count whose boundaries cover the whole sample.

    With the width from :func:`compute_class_width`, ``round(sqrt(n))``
    classes span the range; the boundaries start 1.5 widths below the
    minimum, and the last class only collects values at or above its own
    start, so ``DEFAULT_EXTRA_CLASSES`` more are needed.
    """
    arr = as_sample(values, selector=selector)
    return int(round(math.sqrt(arr.size))) + DEFAULT_EXTRA_CLASSES
