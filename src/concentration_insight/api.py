"""Public API for Concentration Insight.

Example:
    >>> from concentration_insight import summarize
    >>>
    >>> summary = summarize([10, 5, 3, 2])
    >>> summary.liveness
    1
    >>>
    >>> # With customization
    >>> from concentration_insight import MetricsConfig
    >>> summary = summarize([10, 5, 3, 2], MetricsConfig(liveness_parts=2))
"""

from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, MetricsConfig
from .logging_config import get_logger
from .math import Concentration, Gini, Statistics
from .math.statistics import running_sum
from .models import MetricsSummary
from .validation import Values, as_values

logger = get_logger(__name__)


def summarize(values: Values, config: Optional[MetricsConfig] = None) -> MetricsSummary:
    """Compute Gini, HHI, liveness and CV for one sequence of values.

    Args:
        values: Sequence of real numbers (left untouched)
        config: Metric options; defaults to MetricsConfig()

    Returns:
        MetricsSummary with all four metrics

    Raises:
        InvalidInputError: If the values are not numeric, or a metric
            rejects them (negative values always fail Gini)
    """
    if config is None:
        config = DEFAULT_CONFIG

    vals = as_values(values, metric="summary")

    summary = MetricsSummary(
        count=len(vals),
        total=running_sum(vals),
        gini=Gini.gini_coefficient(vals, bias_correction=config.gini_bias_correction),
        hhi=Concentration.hhi(vals, reject_negative=config.hhi_reject_negative),
        liveness=Concentration.liveness_coefficient(vals, parts=config.liveness_parts),
        cv=Statistics.coefficient_of_variation(vals),
    )

    logger.debug(
        f"Summarized {summary.count} values: gini={summary.gini:.4f} hhi={summary.hhi:.4f} "
        f"liveness={summary.liveness} cv={summary.cv:.4f}"
    )
    return summary
