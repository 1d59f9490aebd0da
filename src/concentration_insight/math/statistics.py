"""Descriptive statistics: mean, sample standard deviation, coefficient of variation."""

import math
import statistics as stdlib_stats
from typing import Iterable

from ..logging_config import get_logger
from ..validation import Values, as_values

logger = get_logger(__name__)


def running_sum(values: Iterable[float]) -> float:
    """Left-to-right float sum, without the compensation builtin sum() applies."""
    total = 0.0
    for v in values:
        total += v
    return total


class Statistics:
    """Statistical analysis methods."""

    @staticmethod
    def mean(values: Values) -> float:
        """Compute arithmetic mean."""
        vals = as_values(values, metric="mean")
        if not vals:
            return 0.0
        return stdlib_stats.mean(vals)

    @staticmethod
    def stdev(values: Values) -> float:
        """Compute sample standard deviation (n - 1 denominator)."""
        vals = as_values(values, metric="stdev")
        if len(vals) < 2:
            return 0.0
        return stdlib_stats.stdev(vals)

    @staticmethod
    def coefficient_of_variation(values: Values) -> float:
        """
        Coefficient of variation: CV = s / mean.

        Uses the sample standard deviation (Bessel's correction), so a
        single value has no defined spread.

        Args:
            values: List of values

        Returns:
            CV. 0.0 for empty input or zero mean; nan for a single non-zero
            value.
        """
        vals = as_values(values, metric="cv")
        n = len(vals)
        if n == 0:
            return 0.0

        mean_val = running_sum(vals) / n
        if mean_val == 0:
            return 0.0

        if n == 1:
            logger.debug("CV of a single value is undefined (n - 1 = 0); returning nan")
            return math.nan

        variance = running_sum((v - mean_val) ** 2 for v in vals) / (n - 1)
        return math.sqrt(variance) / mean_val
