"""
Statistical core of freqstats.

This subpackage holds the numerical routines. Every function takes a sample
(any iterable of numbers) and returns plain floats, NumPy arrays or small
value objects; none of them log, keep state or perform I/O.

Modules:
    binning:
        Sample range, square-root class width and class boundaries.

    frequency:
        Per-class frequencies and cumulative frequencies.

    dispersion:
        Population and sample variance and standard deviation around a
        caller-supplied mean.

    regression:
        Ordinary least-squares straight-line fit and the ``LineFormula``
        result type.

    normal:
        Normal density, cumulative distribution and inverse CDF.

    central:
        Mean, median, mode, minimum, maximum and quartile boundaries.

Design Principle:
    Every public function accepts a keyword ``selector`` so the same routine
    runs over arbitrary records by projecting each one to a number.
"""

from .binning import (
    compute_class_boundaries,
    compute_class_width,
    compute_range,
    suggest_class_count,
)
from .central import (
    maximum,
    mean,
    median,
    minimum,
    mode,
    modes,
    quartile_end,
    quartile_partitions,
    quartile_start,
)
from .dispersion import (
    std_dev_population,
    std_dev_sample,
    variance_population,
    variance_sample,
)
from .frequency import (
    ClassFrequency,
    compute_cumulative_frequencies,
    compute_frequencies,
)
from .normal import cdf, density, inverse_cdf
from .regression import LineFormula, fit_line, fit_line_by

__all__ = [
    "compute_class_boundaries",
    "compute_class_width",
    "compute_range",
    "suggest_class_count",
    "ClassFrequency",
    "compute_cumulative_frequencies",
    "compute_frequencies",
    "std_dev_population",
    "std_dev_sample",
    "variance_population",
    "variance_sample",
    "LineFormula",
    "fit_line",
    "fit_line_by",
    "cdf",
    "density",
    "inverse_cdf",
    "maximum",
    "mean",
    "median",
    "minimum",
    "mode",
    "modes",
    "quartile_end",
    "quartile_partitions",
    "quartile_start",
]
