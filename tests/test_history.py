"""Tests for the bounded history buffer."""

from __future__ import annotations

import logging
import math

import pytest

from kdroll.exceptions import HistoryCapacityError
from kdroll.history import History


def test_defaults_to_unbounded() -> None:
    history = History()
    assert history.max() == math.inf
    for i in range(5000):
        history.push(i)
    assert len(history) == 5000


def test_push_returns_length_and_evicts_oldest_first() -> None:
    history = History(3)
    assert [history.push(v) for v in (1, 2, 3)] == [1, 2, 3]
    assert history.push(4) == 3
    assert history.push(5) == 3
    assert history.snapshot() == [3, 4, 5]


def test_keeps_exactly_the_last_k_in_order() -> None:
    k, m = 10, 25
    history = History(k)
    for i in range(k + m):
        history.push(i)
    assert history.snapshot() == list(range(m, k + m))


def test_shrinking_truncates_from_the_front() -> None:
    history = History()
    for i in range(10):
        history.push(i)
    assert history.max(4) == 4
    assert history.snapshot() == [6, 7, 8, 9]
    history.push(10)
    assert history.snapshot() == [7, 8, 9, 10]


def test_growing_and_unbounding_keep_contents() -> None:
    history = History(2)
    history.push(1)
    history.push(2)
    history.max(5)
    history.push(3)
    assert history.snapshot() == [1, 2, 3]
    assert history.max(math.inf) == math.inf


@pytest.mark.parametrize("size", [0, -1, 2.5, "10", True, 2**53])
def test_invalid_capacity_is_ignored(size, caplog) -> None:
    history = History(7)
    with caplog.at_level(logging.WARNING, logger="kdroll.history"):
        assert history.max(size) == 7
    assert "positive safe integer" in caplog.text


def test_invalid_capacity_raises_in_strict_mode() -> None:
    with pytest.raises(HistoryCapacityError):
        History(7, strict=True).max(0)


def test_snapshot_is_independent() -> None:
    history = History()
    history.push(0.25)
    snapshot = history.snapshot()
    snapshot.append(99)
    snapshot[0] = -1
    assert history.snapshot() == [0.25]
    assert list(history) == [0.25]


@pytest.mark.parametrize("size", [10, 10.0])
def test_whole_number_floats_are_valid_capacities(size) -> None:
    history = History()
    for i in range(15):
        history.push(i)
    assert history.max(size) == 10
    assert isinstance(history.max(), int)
    assert history.snapshot() == list(range(5, 15))
