"""
Roll Elementary Statistics
==========================

Mean, median, modes and normalized standard deviation of a sample.

Every function works on a private copy of its input and never reorders or
mutates the caller's sequence.

Standard deviation is normalized by scaling the population standard
deviation from [0, max(sample)] to [0, 1]. This is not a general
statistical convention: it is sensitive to the largest sample and fails
with DomainError when that maximum is 0. It is kept for compatibility with
existing results.

Author: Roll Development Team
License: MIT
"""

import math
import numbers
from collections import Counter
from typing import Iterable, List, Union

from .exceptions import InvalidInputError
from .numeric import fix, scale

Number = Union[int, float]


def _sample(values: Iterable[Number]) -> List[Number]:
    sample = list(values)
    if not sample:
        raise InvalidInputError("Cannot compute statistics of an empty sample")
    for value in sample:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidInputError(f"Samples must be numbers, got {value!r}")
    return sample


def mean(values: Iterable[Number]) -> float:
    """Arithmetic mean of a sample."""
    sample = _sample(values)
    return fix(sum(sample) / len(sample))


def median(values: Iterable[Number]) -> float:
    """Median of a sample; the average of the two middle values for even sizes."""
    ordered = sorted(_sample(values))
    n = len(ordered)
    return fix((ordered[(n - 1) // 2] + ordered[n // 2]) / 2)


def modes(values: Iterable[Number]) -> List[Number]:
    """
    All values tied for the highest frequency, ascending.

    Counts are keyed by value, so negative and fractional samples are
    counted like any other.
    """
    counts = Counter(_sample(values))
    highest = max(counts.values())
    return [fix(value) for value in sorted(counts) if counts[value] == highest]


def standard_deviation(values: Iterable[Number]) -> float:
    """
    Population standard deviation scaled from [0, max(sample)] to [0, 1].

    Raises:
        InvalidInputError: If the sample is empty or holds non-numbers
        DomainError: If the largest sample is 0
    """
    sample = _sample(values)
    average = mean(sample)
    squared_diffs = []
    for value in sample:
        diff = fix(value - average)
        squared_diffs.append(fix(diff * diff))
    deviation = fix(math.sqrt(mean(squared_diffs)))
    return scale(deviation, (0, max(sample)), (0, 1))
