"""
Roll History
============

Capacity-limited, insertion-ordered record of generated samples.

Pushing past capacity evicts the oldest sample first (FIFO). Shrinking the
capacity truncates eagerly from the front, so the length never exceeds the
capacity, even between insertions.

Author: Roll Development Team
License: MIT
"""

import logging
import math
from collections import deque
from typing import Deque, Iterator, List, Optional, Union

from .config import is_safe_capacity
from .exceptions import HistoryCapacityError

Number = Union[int, float]


class History:
    """Bounded sequence of samples with FIFO eviction."""

    def __init__(self, max_size: Optional[Number] = None, strict: bool = False):
        """
        Initialize an empty history.

        Args:
            max_size: Maximum number of samples kept. `None` or `math.inf`
                means unbounded.
            strict: Raise HistoryCapacityError for invalid capacities
        """
        self.strict = strict
        self.logger = logging.getLogger(__name__)
        self._items: Deque[Number] = deque()
        self._max: Number = math.inf
        if max_size is not None:
            self.max(max_size)

    def push(self, value: Number) -> int:
        """
        Append a sample, evicting the oldest one if the history is full.

        Args:
            value: The sample to record

        Returns:
            The new length
        """
        if len(self._items) >= self._max:
            self._items.popleft()
        self._items.append(value)
        return len(self._items)

    def max(self, size: Optional[Number] = None) -> Number:
        """
        Get or set the capacity.

        Invalid capacities (anything but a positive whole number up to
        2**53 - 1, such as 10 or 10.0, or `math.inf`) leave the capacity
        unchanged and log a warning.

        Args:
            size: New capacity. If None, nothing changes.

        Returns:
            The current capacity (`math.inf` when unbounded)

        Raises:
            HistoryCapacityError: In strict mode, for an invalid capacity
        """
        if size is None:
            return self._max

        if size == math.inf:
            self._max = math.inf
        elif is_safe_capacity(size):
            self._max = int(size)
            while len(self._items) > self._max:
                self._items.popleft()
        else:
            message = f"max_history(size) must be a positive safe integer, got {size!r}"
            if self.strict:
                raise HistoryCapacityError(message)
            self.logger.warning(message)

        return self._max

    def snapshot(self) -> List[Number]:
        """Return an independent copy of the samples, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Number]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        """Developer representation."""
        return f"History(size={len(self._items)}, max={self._max})"
