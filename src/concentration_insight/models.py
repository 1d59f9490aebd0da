"""Result models for Concentration Insight."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MetricsSummary:
    """All four distribution metrics for one sequence of values.

    Attributes:
        count: Number of values
        total: Sum of the values
        gini: Gini coefficient (inequality)
        hhi: Herfindahl-Hirschman Index (concentration)
        liveness: Top contributors needed to reach the liveness threshold
        cv: Coefficient of variation (nan for a single non-zero value)
    """

    count: int
    total: float
    gini: float
    hhi: float
    liveness: int
    cv: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dict."""
        return asdict(self)
