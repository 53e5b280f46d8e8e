"""Unit tests for the Gini coefficient."""

from __future__ import annotations

import pytest

from werks.stats import gini


class TestGini:
    """Inequality of a set of non-negative values."""

    def test_equal_values(self) -> None:
        assert gini([5, 5, 5, 5]) == pytest.approx(0.0)

    def test_single_holder(self) -> None:
        # One of n holds everything: (n - 1) / n
        assert gini([0, 0, 0, 10]) == pytest.approx(0.75)

    def test_known_value(self) -> None:
        # sorted 1,2,3,4: 2 * (1 + 4 + 9 + 16) / 10 = 6, (6 - 5) / 4
        assert gini([4, 1, 3, 2]) == pytest.approx(0.25)

    def test_order_independent(self) -> None:
        assert gini([3, 1, 2]) == pytest.approx(gini([1, 2, 3]))

    def test_scale_invariant(self) -> None:
        assert gini([1, 2, 3]) == pytest.approx(gini([100, 200, 300]))

    def test_accepts_generators(self) -> None:
        assert gini(x for x in [1, 1]) == pytest.approx(0.0)

    @pytest.mark.parametrize("values", [[], [0, 0], [1, -1, 3]])
    def test_undefined(self, values: list) -> None:
        with pytest.raises(ValueError):
            gini(values)
