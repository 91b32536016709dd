"""Tests for floating point correction and the scale/clip/round helpers."""

from __future__ import annotations

import math

import pytest

from kdroll.exceptions import DomainError, InvalidInputError
from kdroll.numeric import Scaled, clip, fix, round_to, scale


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.1 + 0.2, 0.3),
        (0.3 - 0.1, 0.2),
        (-(0.1 + 0.2), -0.3),
        (1.0000001, 1.0),
        (0.1234000000789, 0.1234),
        (0.123456789, 0.123456789),
        (45.00000000000001, 45.0),
    ],
)
def test_fix_removes_noise_runs_only(value: float, expected: float) -> None:
    assert fix(value) == expected


def test_fix_passes_through_inapplicable_values() -> None:
    assert fix(0) == 0
    assert fix(5) == 5
    assert fix("abc") == "abc"
    assert fix(math.inf) == math.inf
    assert math.isnan(fix(math.nan))
    assert fix(1e-300) == 1e-300


def test_fix_respects_repeat_length() -> None:
    noisy = 0.1 + 0.2
    assert fix(noisy, repeat=20) == noisy
    assert fix(noisy, repeat=3) == 0.3


@pytest.mark.parametrize(
    "value, initial_range, target_range, expected",
    [
        (0, [-1, 1], [0, 1], 0.5),
        (0.5, [0, 1], [-1, 1], 0),
        (0.45, [0, 1], [0, 100], 45),
        (45, [0, 100], [0, 1], 0.45),
        (12, [0, 1000], [0, 10], 0.12),
        (0.5, [0, 1], [5, 72], 38.5),
    ],
)
def test_scale_maps_between_ranges(value, initial_range, target_range, expected) -> None:
    assert scale(value, initial_range, target_range) == expected


def test_scale_irregular_ranges() -> None:
    assert scale(12975.2123, [0, 9001], [0, 1]) == pytest.approx(1.4415300855460504)
    assert scale(55, [2.3, 98.6], [33.42, 87.55]) == pytest.approx(63.04254413291797)


def test_scale_does_not_clamp() -> None:
    assert scale(2, [0, 1], [0, 10]) == 20


def test_scale_round_trip() -> None:
    cases = [
        (3.75, (0, 10), (0, 1)),
        (-4.2, (-10, 3), (100, 250)),
        (0.3337, (0, 1), (-1, 1)),
        (17.0, (5, 20), (20, 5)),
    ]
    for x, r1, r2 in cases:
        assert scale(scale(x, r1, r2), r2, r1) == pytest.approx(x, abs=1e-9)


def test_scale_zero_width_source_range_raises() -> None:
    with pytest.raises(DomainError):
        scale(0.5, [3, 3], [0, 1])


def test_clip_limits_and_is_idempotent() -> None:
    assert clip(3.75, [0, 3]) == 3
    assert clip(-2, [0, 3]) == 0
    assert clip(1.5, [0, 3]) == 1.5
    for x in (-10, 0.55, 0.8, 12.5):
        once = clip(x, [0.3, 0.8])
        assert clip(once, [0.3, 0.8]) == once
        assert 0.3 <= once <= 0.8


@pytest.mark.parametrize(
    "value, places, expected",
    [
        (0.5, 0, 1),
        (0.4, 0, 0),
        (0.149, 1, 0.1),
        (0.15, 1, 0.2),
        (0.123456, 3, 0.123),
        (0.456789, 3, 0.457),
        (11.298317, 1, 11.3),
        (1928.9998, 0, 1929),
        (-1.000007, 5, -1.00001),
        (-2.5, 0, -3),
        (3.753, 2, 3.75),
    ],
)
def test_round_half_away_from_zero(value: float, places: int, expected: float) -> None:
    assert round_to(value, places) == expected


def test_round_integers_and_invalid_input() -> None:
    assert round_to(5) == 5
    assert round_to(1234, -1) == 1230
    assert round_to(1.5, 3) == 1.5
    with pytest.raises(InvalidInputError):
        round_to("1.5")
    with pytest.raises(InvalidInputError):
        round_to(1.5, 1.5)


def test_scaled_chains_transforms() -> None:
    n = Scaled(100, (0, 1))
    assert n.scale(0, 10).clip(0, 999.424).round(0).value == 999
    assert n.known_range == (0, 10)

    m = Scaled(0.5)
    m.scale(-1, 1)
    assert m.value == 0
    assert m.known_range == (-1, 1)


def test_scaled_accepts_text_and_other_instances() -> None:
    assert Scaled("0.25").value == 0.25
    assert Scaled(Scaled(0.3)).value == 0.3
    n = Scaled(1)
    n.value = 4
    n.known_range = [0, 8]
    assert n.scale(0, 1).value == 0.5
    with pytest.raises(InvalidInputError):
        Scaled("not a number")
    with pytest.raises(InvalidInputError):
        Scaled(object())
