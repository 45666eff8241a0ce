"""Count observations per histogram class."""

from __future__ import annotations

from typing import List, NamedTuple, Optional

import numpy as np

from ..samples import Selector, as_sample


class ClassFrequency(NamedTuple):
    """Observation count of one histogram class.

    Attributes:
        boundary: Class boundary labelling the class.
        count: Number of observations counted in the class, or the running
            total for cumulative frequencies.
    """

    boundary: float
    count: int


def compute_frequencies(
    boundaries, values, *, selector: Optional[Selector] = None
) -> List[ClassFrequency]:
    """Tally how many observations fall in each class.

    For boundary index ``i``:

    - ``i == 0`` counts values below ``boundaries[0]``;
    - the last index counts values at or above ``boundaries[-1]``;
    - any other index counts values in ``[boundaries[i-1], boundaries[i])``.

    Values in ``[boundaries[-2], boundaries[-1])`` therefore belong to no
    class, and the counts only add up to the sample size when the boundaries
    extend past the sample maximum by more than one class.

    Args:
        boundaries: Ordered class boundaries, e.g. from
            :func:`compute_class_boundaries`.
        values: The sample (records when ``selector`` is given).
        selector: Optional record-to-number projection applied to ``values``.

    Returns:
        list[ClassFrequency]: One ``(boundary, count)`` pair per boundary, in
        boundary order.

    Raises:
        InvalidArgument: If ``boundaries`` or ``values`` is empty.
    """
    bounds = as_sample(boundaries, name="boundaries")
    arr = as_sample(values, selector=selector)

    last = bounds.size - 1
    frequencies = []
    for i, boundary in enumerate(bounds):
        if i == 0:
            mask = arr < boundary
        elif i == last:
            mask = arr >= boundary
        else:
            mask = (arr >= bounds[i - 1]) & (arr < boundary)
        frequencies.append(ClassFrequency(float(boundary), int(np.count_nonzero(mask))))
    return frequencies


def compute_cumulative_frequencies(
    boundaries, values, *, selector: Optional[Selector] = None
) -> List[ClassFrequency]:
    """Return running totals of :func:`compute_frequencies`.

    Each count is the number of observations in its class and every class
    before it.
    """
    frequencies = compute_frequencies(boundaries, values, selector=selector)
    totals = np.cumsum([f.count for f in frequencies])
    return [
        ClassFrequency(f.boundary, int(total))
        for f, total in zip(frequencies, totals)
    ]
