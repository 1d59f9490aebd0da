"""Gini coefficient for inequality measurement.

The Gini coefficient measures statistical dispersion. Applied to activity
counts per contributor, it shows whether the work is spread evenly or
concentrated in a few hands.

    G = 0: perfect equality (everyone contributes the same)
    G -> 1: perfect inequality (one contributor does everything)

Reference: Gini (1912) - Variabilita e Mutabilita

Formula (for sorted values x_1 <= x_2 <= ... <= x_n, S_i = x_1 + ... + x_i):
    G = (n + 1 - 2 * sum(S_i) / S_n) / n
"""

from ..validation import Values, as_values, require_non_negative
from .statistics import running_sum


class Gini:
    """Gini coefficient calculations for inequality measurement."""

    @staticmethod
    def gini_coefficient(values: Values, bias_correction: bool = False) -> float:
        """Compute Gini coefficient.

        Args:
            values: Non-negative values. May be empty.
            bias_correction: If True, apply n/(n-1) correction for sample data.

        Returns:
            Gini coefficient, nominally in [0, 1]. 0.0 when the values sum to
            zero, which includes the empty sequence.

        Raises:
            InvalidInputError: If any value is negative.
        """
        vals = as_values(values, metric="gini")
        require_non_negative(vals, metric="gini")

        total = running_sum(vals)
        if total == 0:
            return 0.0

        sorted_vals = sorted(vals)
        n = len(sorted_vals)

        # Sum of the running sums: each x_i counted (n - i + 1) times
        cum_sum = 0.0
        cum_total = 0.0
        for v in sorted_vals:
            cum_sum += v
            cum_total += cum_sum

        gini = (n + 1 - 2 * (cum_total / cum_sum)) / n

        if bias_correction and n > 1:
            gini *= n / (n - 1)

        return gini
