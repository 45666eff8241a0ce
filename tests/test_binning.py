import math

import numpy as np
import pytest

from freqstats.exceptions import InvalidArgument
from freqstats.stats.binning import (
    compute_class_boundaries,
    compute_class_width,
    compute_range,
    suggest_class_count,
)

EXPECTED_BOUNDARIES = [
    1593.2727, 1643.0909, 1692.9090, 1742.7272, 1792.5454, 1842.3636,
    1892.1818, 1942.0, 1991.8181, 2041.6363, 2091.4545, 2141.2727,
    2191.0909, 2240.9090, 2290.7272, 2340.5454,
]


def test_range_of_measurements(measurements):
    assert compute_range(measurements) == 548


def test_range_equals_max_minus_min():
    values = [3.5, -2.0, 7.25, 0.0]
    assert compute_range(values) == max(values) - min(values)


def test_class_width_of_measurements(measurements):
    width = compute_class_width(measurements, compute_range(measurements))
    # sqrt(125) = 11.18 rounds to 11 classes.
    assert math.isclose(width, 548 / 11, abs_tol=1e-9)
    assert abs(width - 49.8181) < 1e-4


def test_class_width_uses_only_sample_size():
    assert compute_class_width([1.0] * 30, 10.0) == 2.0
    assert compute_class_width([5.0], 3.0) == 3.0


def test_sixteen_class_boundaries(measurements):
    width = compute_class_width(measurements, compute_range(measurements))
    bounds = compute_class_boundaries(measurements, width, 16)

    assert len(bounds) == 16
    for got, want in zip(bounds, EXPECTED_BOUNDARIES):
        assert abs(got - want) < 1e-4
    assert np.all(np.diff(bounds) > 0)


def test_first_boundary_is_one_and_a_half_widths_below_min():
    bounds = compute_class_boundaries([10.0, 14.0, 12.0], 2.0, 5)
    assert bounds.tolist() == [7.0, 9.0, 11.0, 13.0, 15.0]


def test_boundaries_with_selector():
    records = [{"w": 10.0}, {"w": 14.0}]
    bounds = compute_class_boundaries(records, 2.0, 3, selector=lambda r: r["w"])
    assert bounds.tolist() == [7.0, 9.0, 11.0]


def test_single_class_rejected(measurements):
    with pytest.raises(InvalidArgument, match="greater than 1"):
        compute_class_boundaries(measurements, 49.8, 1)


@pytest.mark.parametrize("width", [0.0, -1.0, math.inf, math.nan])
def test_non_positive_width_rejected(width):
    with pytest.raises(InvalidArgument, match="class_width"):
        compute_class_boundaries([1.0, 2.0], width, 4)


def test_non_integer_class_count_rejected():
    with pytest.raises(InvalidArgument, match="integer"):
        compute_class_boundaries([1.0, 2.0], 1.0, 4.0)


def test_empty_sample_rejected():
    with pytest.raises(InvalidArgument, match="must not be empty"):
        compute_range([])
    with pytest.raises(InvalidArgument, match="must not be empty"):
        compute_class_boundaries([], 1.0, 3)


def test_suggested_class_count_covers_sample(measurements):
    assert suggest_class_count(measurements) == 15
    width = compute_class_width(measurements, compute_range(measurements))
    bounds = compute_class_boundaries(measurements, width, suggest_class_count(measurements))
    # The second to last class ends beyond the maximum, so nothing is dropped.
    assert bounds[-2] > max(measurements)
