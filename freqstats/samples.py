"""
Coerce caller input into validated one-dimensional float samples.

Every public routine funnels its input through :func:`as_sample`, which accepts
lists, tuples, generators, NumPy arrays and pandas Series, optionally projects
arbitrary records to floats through a ``selector`` callable, and enforces the
minimum sample size.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

import numpy as np

from .exceptions import InvalidArgument

Selector = Callable[[Any], float]


def project(records: Iterable[Any], selector: Selector) -> List[float]:
    """Map ``selector`` over ``records``, preserving input order.

    Args:
        records: Iterable of arbitrary records.
        selector: Callable extracting one number from a record.

    Returns:
        list[float]: Extracted values in the order the records were given.

    Raises:
        InvalidArgument: If ``records`` is ``None`` or ``selector`` is not
            callable.
    """
    if records is None:
        raise InvalidArgument("values must not be None.")
    if not callable(selector):
        raise InvalidArgument("selector must be callable.")
    return [selector(record) for record in records]


def as_sample(
    values: Any,
    *,
    selector: Optional[Selector] = None,
    name: str = "values",
    min_size: int = 1,
) -> np.ndarray:
    """Return ``values`` as a validated 1-D float array.

    Args:
        values: Iterable of numbers, or of records when ``selector`` is given.
        selector: Optional callable projecting each record to a number.
        name: Argument name used in error messages.
        min_size: Minimum number of observations required.

    Returns:
        numpy.ndarray: A new float array; the caller's object is left untouched.

    Raises:
        InvalidArgument: If ``values`` is ``None``, not numeric, not
            one-dimensional, or holds fewer than ``min_size`` observations.
    """
    if values is None:
        raise InvalidArgument(f"{name} must not be None.")
    if selector is not None:
        values = project(values, selector)
    elif isinstance(values, Iterator):
        # Generators and other one-shot iterables.
        values = list(values)

    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must contain only numbers.") from exc

    if arr.ndim != 1:
        raise InvalidArgument(
            f"{name} must be one-dimensional, got {arr.ndim} dimensions."
        )
    if arr.size == 0:
        raise InvalidArgument(f"{name} must not be empty.")
    if arr.size < min_size:
        raise InvalidArgument(
            f"{name} must contain at least {min_size} observations, got {arr.size}."
        )
    return arr
