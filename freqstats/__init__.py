"""
A Python package for exploratory descriptive statistics on numeric samples.

Computes histogram classes, frequency and cumulative-frequency distributions,
dispersion, least-squares regression and normal-distribution values, giving
the results a spreadsheet's statistics functions would.

Modules:
    - stats: Pure numerical routines (binning, frequencies, dispersion,
      regression, normal distribution, central tendency and quartiles).
    - analysis: Frequency tables and sample summaries as pandas objects.
    - shortcuts: Spreadsheet-style aliases (var_p, stdev_s, norm_s_inv, ...).
    - samples: Input coercion and record projection through selectors.
"""

__version__ = "1.0.0"

from .analysis import describe_sample, frequency_table
from .exceptions import InvalidArgument
from .samples import as_sample, project
from .stats import (
    ClassFrequency,
    LineFormula,
    cdf,
    compute_class_boundaries,
    compute_class_width,
    compute_cumulative_frequencies,
    compute_frequencies,
    compute_range,
    density,
    fit_line,
    fit_line_by,
    inverse_cdf,
    maximum,
    mean,
    median,
    minimum,
    mode,
    modes,
    quartile_end,
    quartile_partitions,
    quartile_start,
    std_dev_population,
    std_dev_sample,
    suggest_class_count,
    variance_population,
    variance_sample,
)

__all__ = [
    # Errors and input handling
    "InvalidArgument",
    "as_sample",
    "project",
    # Binning and frequencies
    "compute_range",
    "compute_class_width",
    "compute_class_boundaries",
    "suggest_class_count",
    "ClassFrequency",
    "compute_frequencies",
    "compute_cumulative_frequencies",
    # Dispersion
    "variance_population",
    "variance_sample",
    "std_dev_population",
    "std_dev_sample",
    # Regression
    "LineFormula",
    "fit_line",
    "fit_line_by",
    # Normal distribution
    "density",
    "cdf",
    "inverse_cdf",
    # Central tendency and quartiles
    "mean",
    "median",
    "mode",
    "modes",
    "minimum",
    "maximum",
    "quartile_partitions",
    "quartile_start",
    "quartile_end",
    # Tables
    "frequency_table",
    "describe_sample",
]
