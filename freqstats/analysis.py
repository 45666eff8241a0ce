"""
Exploratory summaries of a numeric sample as pandas objects.

This module chains the routines of :mod:`freqstats.stats` the way a
spreadsheet histogram worksheet does:
- range and square-root class width,
- class boundaries starting 1.5 widths below the minimum,
- frequencies, cumulative and relative frequencies per class, and
- the normal density at each class start, using the sample mean and the
  population standard deviation, for overlaying a bell curve.

:func:`describe_sample` collects central tendency, dispersion and quartile
boundaries into one labelled Series.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd

from .samples import Selector, as_sample
from .schema import COLUMNS, LABELS
from .stats.binning import (
    compute_class_boundaries,
    compute_class_width,
    compute_range,
    suggest_class_count,
)
from .stats.central import mean, median, mode, quartile_partitions
from .stats.dispersion import (
    std_dev_population,
    std_dev_sample,
    variance_population,
    variance_sample,
)
from .stats.frequency import compute_cumulative_frequencies, compute_frequencies
from .stats.normal import density

logger = logging.getLogger(__name__)


def frequency_table(
    values,
    number_of_classes: Optional[int] = None,
    *,
    selector: Optional[Selector] = None,
) -> pd.DataFrame:
    """Build a histogram frequency table for a sample.

    Args:
        values: The sample (records when ``selector`` is given).
        number_of_classes (int, optional): Number of classes. Defaults to
            :func:`freqstats.stats.suggest_class_count`, which covers the
            whole sample.
        selector: Optional record-to-number projection.

    Returns:
        pandas.DataFrame: One row per class with the columns of
        :class:`freqstats.schema.TableColumns`.

    Raises:
        InvalidArgument: If the sample is empty, ``number_of_classes`` is not
            greater than 1, or all observations are equal (zero class width
            and zero standard deviation).

    Note:
        A WARNING is logged when the frequencies add up to fewer observations
        than the sample holds, i.e. when the classes stop short of the sample
        maximum.
    """
    arr = as_sample(values, selector=selector)
    if number_of_classes is None:
        number_of_classes = suggest_class_count(arr)

    value_range = compute_range(arr)
    class_width = compute_class_width(arr, value_range)
    logger.debug(
        "n=%d range=%.6g class width=%.6g classes=%d",
        arr.size,
        value_range,
        class_width,
        number_of_classes,
    )

    boundaries = compute_class_boundaries(arr, class_width, number_of_classes)
    frequencies = compute_frequencies(boundaries, arr)
    cumulative = compute_cumulative_frequencies(boundaries, arr)

    sample_mean = mean(arr)
    sigma = std_dev_population(arr, sample_mean)

    counts = np.array([f.count for f in frequencies], dtype=int)
    counted = int(counts.sum())
    if counted != arr.size:
        logger.warning(
            "Classes cover %d of %d observations; %d classes stop short of "
            "the sample maximum %.6g.",
            counted,
            arr.size,
            number_of_classes,
            float(arr.max()),
        )

    return pd.DataFrame(
        {
            COLUMNS.class_start: boundaries,
            COLUMNS.frequency: counts,
            COLUMNS.cumulative: [c.count for c in cumulative],
            COLUMNS.relative: counts / arr.size,
            COLUMNS.density: density(boundaries, sample_mean, sigma),
        }
    )


def describe_sample(values, *, selector: Optional[Selector] = None) -> pd.Series:
    """Summarize a sample in one labelled Series.

    Args:
        values: The sample (records when ``selector`` is given).
        selector: Optional record-to-number projection.

    Returns:
        pandas.Series: Indexed by :class:`freqstats.schema.SummaryLabels`.
        Dispersion is measured around the arithmetic mean.

    Note:
        For a single observation the sample variance and sample standard
        deviation are undefined (``n - 1`` is zero) and reported as NaN, as
        are the bounds of quartile partitions that come out empty.
    """
    arr = as_sample(values, selector=selector)
    sample_mean = mean(arr)

    summary = {
        LABELS.count: int(arr.size),
        LABELS.mean: sample_mean,
        LABELS.median: median(arr),
        LABELS.mode: mode(arr),
        LABELS.minimum: float(arr.min()),
        LABELS.maximum: float(arr.max()),
        LABELS.range: compute_range(arr),
        LABELS.var_p: variance_population(arr, sample_mean),
        LABELS.var_s: math.nan,
        LABELS.std_p: std_dev_population(arr, sample_mean),
        LABELS.std_s: math.nan,
    }
    if arr.size > 1:
        summary[LABELS.var_s] = variance_sample(arr, sample_mean)
        summary[LABELS.std_s] = std_dev_sample(arr, sample_mean)

    for quartile, part in enumerate(quartile_partitions(arr), start=1):
        empty = part.size == 0
        summary[LABELS.quartile_start(quartile)] = math.nan if empty else float(part[0])
        summary[LABELS.quartile_end(quartile)] = math.nan if empty else float(part[-1])
        if empty:
            logger.debug("Quartile %d is empty for a sample of %d", quartile, arr.size)

    return pd.Series(summary, dtype=float)
