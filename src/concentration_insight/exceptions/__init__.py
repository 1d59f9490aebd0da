"""Exception hierarchy for Concentration Insight."""

from .base import ConcentrationInsightError
from .config import ConfigurationError, InvalidConfigError
from .input import InvalidInputError

__all__ = [
    "ConcentrationInsightError",
    "InvalidInputError",
    "ConfigurationError",
    "InvalidConfigError",
]
