"""Concentration measures: Herfindahl-Hirschman Index and liveness coefficient.

HHI = sum(s_i^2) where s_i = x_i / sum(x)
    1/n for an even split between n participants, 1.0 for a monopoly.

Liveness = smallest k such that the top-k values reach sum(x) / 3
    "How many of the most active contributors carry a third of the work?"
"""

from numbers import Integral

from ..exceptions import InvalidInputError
from ..validation import Values, as_values, require_non_negative
from .statistics import running_sum


class Concentration:
    """Share-based concentration measures."""

    @staticmethod
    def hhi(values: Values, reject_negative: bool = False) -> float:
        """
        Herfindahl-Hirschman Index over raw (unnormalised) amounts.

        Args:
            values: Amounts per participant; normalised to shares internally
            reject_negative: Refuse negative amounts instead of computing
                through them

        Returns:
            HHI, in (0, 1] for non-empty input with positive total.
            0.0 when the total is zero.
        """
        vals = as_values(values, metric="hhi")
        if reject_negative:
            require_non_negative(vals, metric="hhi")

        total = running_sum(vals)
        if total == 0:
            return 0.0

        return running_sum((v / total) ** 2 for v in vals)

    @staticmethod
    def liveness_coefficient(values: Values, parts: int = 3) -> int:
        """
        Count of top contributors whose combined activity reaches
        total / parts.

        Args:
            values: Activity per contributor
            parts: Threshold divisor (3 = one third of total activity)

        Returns:
            1-based count. 0 for empty input; len(values) if no prefix
            reaches the threshold.
        """
        if isinstance(parts, bool) or not isinstance(parts, Integral) or parts < 1:
            raise InvalidInputError("parts must be a positive integer", "liveness", parts)

        sorted_vals = sorted(as_values(values, metric="liveness"), reverse=True)
        threshold = running_sum(sorted_vals) / parts

        partial = 0.0
        for i, v in enumerate(sorted_vals):
            partial += v
            if partial >= threshold:
                return i + 1

        return len(sorted_vals)
