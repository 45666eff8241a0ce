"""Central tendency and order statistics."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

import numpy as np

from ..exceptions import InvalidArgument
from ..samples import Selector, as_sample


def mean(values, *, selector: Optional[Selector] = None) -> float:
    """Arithmetic mean of the sample."""
    return float(np.mean(as_sample(values, selector=selector)))


def minimum(values, *, selector: Optional[Selector] = None) -> float:
    """Smallest observation."""
    return float(np.min(as_sample(values, selector=selector)))


def maximum(values, *, selector: Optional[Selector] = None) -> float:
    """Largest observation."""
    return float(np.max(as_sample(values, selector=selector)))


def _median_of_sorted(ordered: np.ndarray) -> float:
    n = ordered.size
    middle = n // 2
    if n % 2 == 0:
        return (float(ordered[middle - 1]) + float(ordered[middle])) / 2.0
    return float(ordered[middle])


def median(values, *, selector: Optional[Selector] = None) -> float:
    """Middle value of the sorted sample; mean of the two middle values when
    the count is even."""
    return _median_of_sorted(np.sort(as_sample(values, selector=selector)))


def modes(values, *, selector: Optional[Selector] = None) -> List[float]:
    """All values sharing the highest occurrence count, in first-seen order."""
    counts = Counter(as_sample(values, selector=selector).tolist())
    top = max(counts.values())
    return [value for value, count in counts.items() if count == top]


def mode(values, *, selector: Optional[Selector] = None) -> float:
    """Most frequent value.

    When several values tie for the highest count, the one that appears first
    in ``values`` is returned; use :func:`modes` to get all of them.
    """
    return modes(values, selector=selector)[0]


def _split_at_median(ordered: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    if ordered.size == 0:
        return ordered, ordered
    m = _median_of_sorted(ordered)
    return ordered[ordered <= m], ordered[ordered > m]


def quartile_partitions(
    values, *, selector: Optional[Selector] = None
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Split the sorted sample into four ordered partitions.

    The sample is split at its median into a lower half (values ``<=`` the
    median) and an upper half (values ``>`` the median); each half is split
    again at its own median the same way. Partitions may be empty for small or
    heavily tied samples.

    Returns:
        tuple[numpy.ndarray, ...]: First to fourth partition, each sorted.
    """
    ordered = np.sort(as_sample(values, selector=selector))
    lower, upper = _split_at_median(ordered)
    first, second = _split_at_median(lower)
    third, fourth = _split_at_median(upper)
    return first, second, third, fourth


def _partition(values, quartile: int, selector: Optional[Selector]) -> np.ndarray:
    if (
        isinstance(quartile, bool)
        or not isinstance(quartile, (int, np.integer))
        or quartile not in (1, 2, 3, 4)
    ):
        raise InvalidArgument(f"quartile must be between 1 and 4, got {quartile!r}")
    part = quartile_partitions(values, selector=selector)[quartile - 1]
    if part.size == 0:
        raise InvalidArgument(
            f"Quartile {quartile} is empty for this sample; "
            "it has too few distinct values."
        )
    return part


def quartile_start(
    values, quartile: int, *, selector: Optional[Selector] = None
) -> float:
    """Smallest value in quartile partition ``quartile`` (1 to 4)."""
    return float(_partition(values, quartile, selector)[0])


def quartile_end(
    values, quartile: int, *, selector: Optional[Selector] = None
) -> float:
    """Largest value in quartile partition ``quartile`` (1 to 4)."""
    return float(_partition(values, quartile, selector)[-1])
