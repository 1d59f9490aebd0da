"""Distribution metrics: inequality, concentration, dispersion."""

from .concentration import Concentration
from .gini import Gini
from .statistics import Statistics

__all__ = [
    "Concentration",
    "Gini",
    "Statistics",
]
