"""
Concentration Insight - distribution metrics for activity data

Four scale-free summaries of how a quantity is spread across participants:
Gini coefficient, Herfindahl-Hirschman Index, liveness coefficient and
coefficient of variation.
"""

__version__ = "0.1.0"

from .api import summarize
from .config import MetricsConfig, load_config
from .exceptions import ConcentrationInsightError, InvalidInputError
from .math import Concentration, Gini, Statistics
from .models import MetricsSummary

gini = Gini.gini_coefficient
hhi = Concentration.hhi
liveness_coefficient = Concentration.liveness_coefficient
coefficient_of_variation = Statistics.coefficient_of_variation

__all__ = [
    "summarize",  # All four metrics at once
    "gini",
    "hhi",
    "liveness_coefficient",
    "coefficient_of_variation",
    "Gini",
    "Concentration",
    "Statistics",
    "MetricsConfig",
    "MetricsSummary",
    "load_config",
    "ConcentrationInsightError",
    "InvalidInputError",
]
