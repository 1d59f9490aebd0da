"""Input exceptions: values a metric cannot be computed over."""

from typing import Dict, Optional

from .base import ConcentrationInsightError


class InvalidInputError(ConcentrationInsightError, ValueError):
    """Raised when a metric receives values it cannot accept.

    Also a ``ValueError``, so callers that only know about the builtin
    hierarchy still catch it.
    """

    def __init__(
        self,
        message: str,
        metric: Optional[str] = None,
        value: Optional[object] = None,
    ):
        details: Dict[str, str] = {}
        if metric is not None:
            details["metric"] = metric
        if value is not None:
            details["value"] = repr(value)

        super().__init__(message, details=details)
        self.metric = metric
        self.value = value
