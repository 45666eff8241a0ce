"""Spreadsheet-style names for the common statistics routines.

``var_p``/``var_s``/``stdev_p``/``stdev_s`` mirror VAR.P, VAR.S, STDEV.P and
STDEV.S, ``lin_reg`` mirrors a linear trend fit, ``norm_s_inv`` mirrors
NORM.S.INV and ``norm_dist`` mirrors NORM.DIST.
"""

from __future__ import annotations

from .stats.dispersion import (
    std_dev_population,
    std_dev_sample,
    variance_population,
    variance_sample,
)
from .stats.normal import cdf, density, inverse_cdf
from .stats.regression import fit_line

var_p = variance_population
var_s = variance_sample
stdev_p = std_dev_population
stdev_s = std_dev_sample
lin_reg = fit_line
norm_s_inv = inverse_cdf


def norm_dist(value: float, mean: float, std_dev: float, cumulative: bool = False) -> float:
    """Evaluate the normal distribution like the spreadsheet NORM.DIST.

    Args:
        value (float): Point at which to evaluate.
        mean (float): Distribution mean.
        std_dev (float): Distribution standard deviation, finite and positive.
        cumulative (bool, optional): Return ``P(X <= value)`` instead of the
            density. Defaults to ``False``.

    Returns:
        float: Density or cumulative probability at ``value``.
    """
    if cumulative:
        return cdf(value, mean, std_dev)
    return density(value, mean, std_dev)
