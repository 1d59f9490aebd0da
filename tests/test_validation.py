"""Tests for the input boundary."""

import math

import numpy as np
import pytest

from concentration_insight.exceptions import ConcentrationInsightError, InvalidInputError
from concentration_insight.validation import as_values, require_non_negative


class TestAsValues:
    """Tests for as_values coercion."""

    def test_list_of_ints(self):
        assert as_values([1, 2, 3]) == [1.0, 2.0, 3.0]

    def test_returns_floats(self):
        assert all(type(v) is float for v in as_values([1, 2, 3]))

    def test_returns_fresh_list(self):
        values = [1.0, 2.0]
        result = as_values(values)
        assert result == values
        assert result is not values

    def test_tuple_and_generator(self):
        assert as_values((1, 2)) == [1.0, 2.0]
        assert as_values(x * 2 for x in range(3)) == [0.0, 2.0, 4.0]

    def test_numpy_array(self):
        assert as_values(np.array([1, 2, 3], dtype=np.int32)) == [1.0, 2.0, 3.0]

    def test_numeric_strings(self):
        assert as_values(["3", "4.5"]) == [3.0, 4.5]

    def test_empty(self):
        assert as_values([]) == []

    def test_preserves_order(self):
        assert as_values([3, 1, 2]) == [3.0, 1.0, 2.0]

    def test_non_numeric_element(self):
        with pytest.raises(InvalidInputError, match="numbers"):
            as_values([1, "two"])

    def test_none_element(self):
        with pytest.raises(InvalidInputError):
            as_values([1, None])

    def test_not_iterable(self):
        with pytest.raises(InvalidInputError):
            as_values(5)

    def test_string_rejected(self):
        with pytest.raises(InvalidInputError):
            as_values("123")

    def test_integer_too_large_for_float(self):
        with pytest.raises(InvalidInputError, match="numbers"):
            as_values([10**400, 1])

    def test_two_dimensional(self):
        with pytest.raises(InvalidInputError, match="one-dimensional"):
            as_values([[1, 2], [3, 4]])

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, bad):
        with pytest.raises(InvalidInputError, match="finite"):
            as_values([1.0, bad])

    def test_metric_in_details(self):
        with pytest.raises(InvalidInputError) as exc_info:
            as_values([1, "x"], metric="gini")
        assert exc_info.value.metric == "gini"
        assert "metric=gini" in str(exc_info.value)

    def test_error_hierarchy(self):
        with pytest.raises(ConcentrationInsightError):
            as_values(["x"])


class TestRequireNonNegative:
    """Tests for require_non_negative."""

    def test_accepts_zero_and_positive(self):
        require_non_negative([0.0, 1.0, 2.5])

    def test_rejects_negative(self):
        with pytest.raises(InvalidInputError, match="cannot be negative") as exc_info:
            require_non_negative([1.0, -0.5], metric="gini")
        assert exc_info.value.value == -0.5
