import numpy as np
import pytest

from freqstats.exceptions import InvalidArgument
from freqstats.stats.regression import LineFormula, fit_line, fit_line_by


def test_regression_recovers_exact_line():
    xs = [9, 12, 14, 12, 12, 13, 10, 11, 12, 15]
    ys = [1216, 1300, 1356, 1288, 1276, 1292, 1260, 1244, 1288, 1360]

    line = fit_line(xs, ys)
    assert abs(line.slope - 24) < 1e-7
    assert abs(line.intercept - 1000) < 1e-7


def test_regression_on_normal_quantiles():
    xs = [3, 4, 5, 6, 7, 8, 9, 10, 11, 12]
    ys = [
        -1.977368428, -1.522036242, -0.785773832, -0.274110116, 0.171284586,
        0.655726679, 0.962098754, 1.589267557, 2.144410621, 2.408915546,
    ]

    line = fit_line(xs, ys)
    assert abs(line.slope - 0.492181572424858) < 1e-7
    assert abs(line.intercept - -3.35412028069202) < 1e-7


def test_regression_matches_polyfit():
    rng = np.random.default_rng(7)
    x = np.linspace(0.0, 5.0, 40)
    y = 1.5 * x - 0.25 + rng.normal(scale=0.1, size=x.size)

    line = fit_line(x, y)
    m, b = np.polyfit(x, y, 1)
    assert np.isclose(line.slope, m)
    assert np.isclose(line.intercept, b)


def test_regression_with_selectors():
    points = [{"t": 0.0, "v": 1.0}, {"t": 1.0, "v": 3.0}, {"t": 2.0, "v": 5.0}]

    by_pairs = fit_line(points, points, selector_x=lambda p: p["t"], selector_y=lambda p: p["v"])
    by_records = fit_line_by(points, lambda p: p["t"], lambda p: p["v"])
    assert by_pairs == by_records
    assert by_pairs.slope == pytest.approx(2.0)
    assert by_pairs.intercept == pytest.approx(1.0)


def test_fit_line_by_accepts_generator():
    line = fit_line_by(((x, 3 * x) for x in range(4)), lambda p: p[0], lambda p: p[1])
    assert line.slope == pytest.approx(3.0)
    assert line.intercept == pytest.approx(0.0, abs=1e-12)


def test_line_formula_prediction_and_text():
    line = LineFormula(slope=24.0, intercept=1000.0)
    assert line.predict(10) == 1240.0
    assert np.allclose(line.predict([0, 1]), [1000.0, 1024.0])
    assert str(line) == "f(x) = 24.0x + 1000.0"


def test_mismatched_lengths_raise():
    with pytest.raises(InvalidArgument, match="same length"):
        fit_line([1.0, 2.0, 3.0], [1.0, 2.0])


def test_empty_inputs_raise():
    with pytest.raises(InvalidArgument, match="xs must not be empty"):
        fit_line([], [1.0])
    with pytest.raises(InvalidArgument, match="ys must not be empty"):
        fit_line([1.0], [])


def test_constant_x_raises():
    with pytest.raises(InvalidArgument, match="x variance"):
        fit_line([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])


def test_single_point_raises_on_sample_size():
    with pytest.raises(InvalidArgument, match="at least 2 observations"):
        fit_line([2.0], [1.0])
    with pytest.raises(InvalidArgument, match="at least 2 observations"):
        fit_line_by([(2.0, 1.0)], lambda p: p[0], lambda p: p[1])
