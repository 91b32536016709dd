"""Tests for mean, median, modes and normalized standard deviation."""

from __future__ import annotations

import pytest

from kdroll.elemstats import mean, median, modes, standard_deviation
from kdroll.exceptions import DomainError, InvalidInputError


@pytest.mark.parametrize(
    "sample, expected_mean, expected_median, expected_modes, expected_std",
    [
        ([0, 1], 0.5, 0.5, [0, 1], 0.5),
        ([0, 1, 2], 1, 1, [0, 1, 2], 0.408248290463863),
        ([1, 2, 3, 4, 5], 3, 3, [1, 2, 3, 4, 5], 0.282842712474619),
        ([1, 2, 2, 3, 4, 5], 2.8333333333333335, 2.5, [2], 0.26874192494328497),
        ([1] * 9, 1, 1, [1], 0),
        ([11, 24, 4, 3.21, 24, 40.9191, 0.12909, 11], 14.78227375, 11, [11, 24], 0.317061252161967),
    ],
)
def test_statistics_on_samples(sample, expected_mean, expected_median, expected_modes, expected_std) -> None:
    assert mean(sample) == pytest.approx(expected_mean, rel=1e-12)
    assert median(sample) == expected_median
    assert modes(sample) == expected_modes
    assert standard_deviation(sample) == pytest.approx(expected_std, rel=1e-6)


def test_documented_examples_are_exact() -> None:
    assert mean([1, 2, 3, 4, 5]) == 3
    assert median([1, 2, 3, 4, 5]) == 3
    assert modes([1, 2, 2, 3, 4, 5]) == [2]
    assert mean([0.1, 0.2]) == 0.15


def test_modes_count_negative_and_fractional_values() -> None:
    assert modes([-1.5, -1.5, 2, 0.25, 0.25]) == [-1.5, 0.25]
    assert modes([3, -7, 3, -7, 1]) == [-7, 3]


def test_inputs_are_not_reordered() -> None:
    data = [3, 1, 2]
    median(data)
    standard_deviation(data)
    assert data == [3, 1, 2]


def test_accepts_any_iterable() -> None:
    assert mean(x for x in (2, 4)) == 3
    assert median((5, 1, 3)) == 3


@pytest.mark.parametrize("func", [mean, median, modes, standard_deviation])
def test_empty_or_non_numeric_samples_raise(func) -> None:
    with pytest.raises(InvalidInputError):
        func([])
    with pytest.raises(InvalidInputError):
        func([1, "2"])


def test_standard_deviation_needs_positive_maximum() -> None:
    with pytest.raises(DomainError):
        standard_deviation([0, 0, 0])
