"""Input boundary: turn caller-supplied sequences into plain float lists.

Every metric converts its input here first, so the formulas themselves only
ever see a private, finite, one-dimensional ``list[float]``. The caller's
object is never modified.
"""

from typing import Iterable, List, Optional, Union

import numpy as np

from .exceptions import InvalidInputError
from .logging_config import get_logger

logger = get_logger(__name__)

Values = Union[Iterable[float], Iterable[int], np.ndarray]


def as_values(values: Values, metric: Optional[str] = None) -> List[float]:
    """
    Coerce a sequence of numbers to a new list of floats.

    Accepts lists, tuples, generators, numpy arrays and numeric strings
    (``"3"`` becomes ``3.0``).

    Args:
        values: Sequence of real numbers
        metric: Name of the calling metric, used in error details

    Returns:
        Fresh list of floats in input order

    Raises:
        InvalidInputError: If any element is non-numeric or non-finite, or
            the input is not one-dimensional.
    """
    if isinstance(values, (str, bytes)):
        raise InvalidInputError("Values must be a sequence of numbers", metric, values)

    try:
        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"Rejected non-numeric input for {metric}: {e}")
        raise InvalidInputError("Values must be a sequence of numbers", metric) from e

    if arr.ndim != 1:
        raise InvalidInputError(
            f"Values must be one-dimensional, got {arr.ndim} dimensions", metric
        )

    if not np.all(np.isfinite(arr)):
        bad = arr[~np.isfinite(arr)][0]
        raise InvalidInputError("Values must be finite", metric, float(bad))

    return arr.tolist()


def require_non_negative(values: List[float], metric: Optional[str] = None) -> None:
    """Raise InvalidInputError if any value is below zero."""
    for v in values:
        if v < 0:
            raise InvalidInputError("Values cannot be negative", metric, v)
