"""Define standardized labels for the tables and summaries freqstats builds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableColumns:
    """Column labels of :func:`freqstats.analysis.frequency_table`.

    Attributes:
        class_start: Boundary value labelling each class. Under the counting
            rule of :func:`freqstats.stats.compute_frequencies` it is the upper
            edge of every class except the last, whose lower edge it is.
        frequency: Number of observations counted in the class.
        cumulative: Running total of ``frequency``.
        relative: ``frequency`` divided by the sample size.
        density: Normal density at the class start, using the sample mean and
            population standard deviation.
    """

    class_start: str = "Class Start"
    frequency: str = "Frequency"
    cumulative: str = "Cumulative Frequency"
    relative: str = "Relative Frequency"
    density: str = "Normal Density"


@dataclass(frozen=True)
class SummaryLabels:
    """Index labels of :func:`freqstats.analysis.describe_sample`."""

    count: str = "Count"
    mean: str = "Mean"
    median: str = "Median"
    mode: str = "Mode"
    minimum: str = "Min"
    maximum: str = "Max"
    range: str = "Range"
    var_p: str = "Variance (population)"
    var_s: str = "Variance (sample)"
    std_p: str = "Std Dev (population)"
    std_s: str = "Std Dev (sample)"

    @staticmethod
    def quartile_start(quartile: int) -> str:
        return f"Q{quartile} Start"

    @staticmethod
    def quartile_end(quartile: int) -> str:
        return f"Q{quartile} End"


COLUMNS = TableColumns()
LABELS = SummaryLabels()
