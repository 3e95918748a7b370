"""
Tests for the utilisation percentage calculation
"""
import math

import pytest

from utilisation.errors import EmptyInputError
from utilisation.models.sample_store import SampleStore
from utilisation.processing.utilisation_calculator import (
    calculate_percentage_usage,
    count_triggered,
    percentage_of,
)


def make_store(values, capacity=255) -> SampleStore:
    store = SampleStore(capacity)
    for value in values:
        store.append(value)
    return store


class TestCountTriggered:

    def test_threshold_is_inclusive(self) -> None:
        """A reading equal to the threshold counts as in use"""
        store = make_store([10.0, 9.9, 10.0])
        assert count_triggered(store, 10.0) == 2

    def test_nothing_triggered(self) -> None:
        assert count_triggered(make_store([1.0, 2.0]), 10.0) == 0

    def test_negative_readings(self) -> None:
        assert count_triggered(make_store([-3.0, -1.0, 0.0]), -1.0) == 2


class TestCalculatePercentageUsage:

    def test_inclusive_threshold_percentage(self) -> None:
        result = calculate_percentage_usage(make_store([10.0, 9.9, 10.0]), 10.0)
        assert result == pytest.approx(66.6666666)
        assert result == 100.0 * (2 / 3)

    @pytest.mark.parametrize("values, expected", [
        ([1.0, 20.0, 15.0, 5.0], 50.0),
        ([11.0, 12.0], 100.0),
        ([1.0, 2.0, 3.0], 0.0),
        ([10.0], 100.0),
    ])
    def test_percentages(self, values, expected) -> None:
        assert calculate_percentage_usage(make_store(values), 10.0) == expected

    def test_default_trigger_level(self) -> None:
        assert calculate_percentage_usage(make_store([9.99, 10.0])) == 50.0

    def test_empty_store_raises(self) -> None:
        """No NaN, Inf or zero for an empty store"""
        with pytest.raises(EmptyInputError):
            calculate_percentage_usage(SampleStore(), 10.0)

    def test_repeated_calls_are_identical(self) -> None:
        """Calculation must not touch the store's count"""
        store = make_store([1.0, 20.0, 15.0, 5.0])

        first = calculate_percentage_usage(store, 10.0)
        second = calculate_percentage_usage(store, 10.0)

        assert first == second == 50.0
        assert store.size() == 4
        assert store.get_all() == [1.0, 20.0, 15.0, 5.0]

    def test_unused_slots_are_ignored(self) -> None:
        """Pre-allocated zeros past count never affect the result"""
        store = make_store([20.0], capacity=10)
        assert calculate_percentage_usage(store, -5.0) == 100.0


class TestPercentageOf:

    def test_zero_total_raises(self) -> None:
        with pytest.raises(EmptyInputError):
            percentage_of(0, 0)

    def test_result_is_finite(self) -> None:
        result = percentage_of(1, 3)
        assert math.isfinite(result)
        assert 0.0 <= result <= 100.0
