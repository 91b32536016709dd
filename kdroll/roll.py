"""
Roll Manager
============

Pseudorandom number manager combining the uniform generator, the gaussian
transform, a bounded history, elementary statistics and the scale/clip/round
helpers behind one object.

This module provides:
- Seeded, reproducible uniform and (skewed) gaussian reals in [0, 1]
- n-sided die rolling over either distribution
- History of variable max size, cleared on every reseed
- Mean, median, modes and normalized standard deviation over the history
  or any sample
- Static scale/clip/round and random seed helpers

Example:
    roll = Roll(seed=[1, 2, 3], max_history=1000)
    save = roll.d(20)
    weighted = roll.d(20, skew=0.5)
    average = roll.mean()

Author: Roll Development Team
License: MIT
"""

import dataclasses
import logging
import math
import numbers
from typing import Iterable, List, Optional, Sequence, Union

from . import elemstats, numeric
from .config import RollConfig, is_safe_capacity
from .exceptions import InvalidInputError, InvalidSidesError
from .gaussian import gaussian as gaussian_sample
from .history import History
from .numeric import Scaled
from .uniform import Seed, Uniform, create_random_seed

Number = Union[int, float]


class Roll:
    """
    Random number manager.

    Operations are fixed on the class: instances carry no `__dict__`, so a
    method cannot be reassigned or shadowed on an instance.

    For one-off draws without keeping a manager, use the module-level
    `kdroll.random(skew)` and `kdroll.d(sides, skew)`; `Roll.d` and
    `Roll.random` are instance methods.
    """

    __slots__ = ("_config", "_uniform", "_history", "logger")

    def __init__(
        self,
        seed: Seed = None,
        max_history: Optional[Number] = None,
        *,
        strict: Optional[bool] = None,
        config: Optional[RollConfig] = None
    ):
        """
        Initialize the manager.

        Args:
            seed: Unsigned 32-bit integer or sequence of them. If None, a
                random seed array is generated.
            max_history: Maximum history size. Defaults to unbounded. An
                invalid size is logged and ignored, like `max_history(size)`.
            strict: Raise typed errors instead of logging and substituting
            config: Base configuration; explicit arguments override it

        Raises:
            ConfigError: In strict mode, for an invalid `max_history`
        """
        config = config or RollConfig()
        is_strict = config.strict if strict is None else strict
        overrides = {}
        rejected = None
        if max_history is not None:
            if max_history == math.inf:
                overrides["max_history"] = None
            elif is_strict or is_safe_capacity(max_history):
                overrides["max_history"] = max_history
            else:
                rejected = max_history
        if strict is not None:
            overrides["strict"] = strict
        self._config = dataclasses.replace(config, **overrides) if overrides else config

        self.logger = logging.getLogger(__name__)
        self._uniform = Uniform(seed, strict=self._config.strict)
        self._history = History(self._config.capacity, strict=self._config.strict)
        if rejected is not None:
            self._history.max(rejected)

    # ==========================================
    # SEED AND HISTORY
    # ==========================================

    @property
    def config(self) -> RollConfig:
        """The configuration this manager was built with."""
        return self._config

    def seed(self, seed: Seed = None) -> Union[int, List[int]]:
        """
        Get the current seed, or reseed when one is given.

        Reseeding clears the history, since stored samples belong to the
        previous stream. The history capacity is kept.

        Args:
            seed: New seed. If None, nothing changes.

        Returns:
            The seed now in use (an int or a copy of the array)
        """
        if seed is not None:
            self._uniform.seed(seed)
            self.clear_history()
            self.logger.debug("Reseeded; history cleared")
        return self._uniform.seed()

    def history(self) -> List[Number]:
        """Return a copy of the recorded samples, oldest first."""
        return self._history.snapshot()

    def max_history(self, size: Optional[Number] = None) -> Number:
        """
        Get or set the maximum history size.

        Args:
            size: New maximum. If None, return the current one.

        Returns:
            The current maximum (`math.inf` when unbounded)
        """
        return self._history.max(size)

    def clear_history(self):
        """Reset the history but retain the current maximum size."""
        self._history = History(self._history.max(), strict=self._config.strict)

    # ==========================================
    # SAMPLING
    # ==========================================

    def uniform(self) -> float:
        """Generate a random real in [0, 1] with uniform distribution."""
        value = self._uniform.random()
        self._history.push(value)
        return value

    def gaussian(self, skew: float = 0) -> float:
        """
        Generate a random real in [0, 1] with gaussian distribution.

        Args:
            skew: In the range [-1, 1]. Negative values skew the data RIGHT,
                positive values skew it LEFT.

        Returns:
            Float in [0, 1]
        """
        value = gaussian_sample(self._uniform, skew, strict=self._config.strict)
        self._history.push(value)
        return value

    def random(self, skew: Optional[float] = None) -> float:
        """
        Generate a random real in [0, 1].

        Args:
            skew: If None, use uniform distribution. Any number, including
                0, selects gaussian distribution with that skew.
        """
        if skew is None:
            return self.uniform()
        return self.gaussian(skew)

    def d(self, sides: Number, skew: Optional[float] = None) -> Union[int, float]:
        """
        Roll an n-sided die.

        A uniform (or gaussian, when `skew` is given) draw is scaled to
        [1, floor(sides)] and rounded to a whole number. The rounded face is
        what gets recorded in history.

        Args:
            sides: Number of sides. Decimals are allowed but ignored.
            skew: If None, use uniform distribution. Pass 0 for gaussian
                distribution without skew.

        Returns:
            The face rolled, or `nan` when `sides` is not a number

        Raises:
            InvalidSidesError: In strict mode, when `sides` is not a number
        """
        if (isinstance(sides, bool) or not isinstance(sides, numbers.Real)
                or not math.isfinite(sides)):
            message = f"Sides must be a number, got {sides!r}"
            if self._config.strict:
                raise InvalidSidesError(message)
            self.logger.error(message)
            return math.nan

        if skew is None:
            draw = self._uniform.random()
        else:
            draw = gaussian_sample(self._uniform, skew, strict=self._config.strict)

        face = int(Scaled(draw).scale(1, math.floor(sides)).round(0).value)
        self._history.push(face)
        return face

    # ==========================================
    # STATISTICS
    # ==========================================

    def _sample(self, values: Optional[Iterable[Number]]) -> List[Number]:
        return self.history() if values is None else list(values)

    def mean(self, values: Optional[Iterable[Number]] = None) -> float:
        """Mean of `values`, or of the current history."""
        return elemstats.mean(self._sample(values))

    def median(self, values: Optional[Iterable[Number]] = None) -> float:
        """Median of `values`, or of the current history."""
        return elemstats.median(self._sample(values))

    def modes(self, values: Optional[Iterable[Number]] = None) -> List[Number]:
        """Modes of `values`, or of the current history."""
        return elemstats.modes(self._sample(values))

    def standard_deviation(self, values: Optional[Iterable[Number]] = None) -> float:
        """Standard deviation of `values`, or of the current history, normalized to [0, 1]."""
        return elemstats.standard_deviation(self._sample(values))

    std_dev = standard_deviation

    # ==========================================
    # STATIC HELPERS
    # ==========================================

    create_random_seed = staticmethod(create_random_seed)

    @staticmethod
    def scale(
        value: Number,
        initial_range: Sequence[Number],
        target_range: Optional[Sequence[Number]] = None
    ) -> float:
        """
        Scale a value from a known range to a new range.

        Shorthand: when `target_range` is omitted and `initial_range` is
        neither 0-based nor 1-topped, `initial_range` is taken as the target
        and the value is assumed to be in [0, 1].

        Raises:
            InvalidInputError: If `target_range` is omitted for a range that
                does not qualify for the shorthand
        """
        anchored = initial_range[0] == 0 or initial_range[1] == 1
        if target_range is None:
            if anchored:
                raise InvalidInputError(f"A target range is required to scale from {list(initial_range)}")
            return numeric.scale(value, (0, 1), initial_range)
        return numeric.scale(value, initial_range, target_range)

    @staticmethod
    def clip(value: Number, bounds: Sequence[Number]) -> Number:
        """Limit a value to a hard minimum and maximum."""
        return numeric.clip(value, bounds)

    @staticmethod
    def round(value: Number, places: int = 0) -> Number:
        """Round a value to a number of places, halves away from zero."""
        return numeric.round_to(value, places)

    def __str__(self) -> str:
        """String representation of the manager."""
        return f"Roll(samples={len(self._history)}, max_history={self._history.max()})"

    def __repr__(self) -> str:
        """Developer representation of the manager."""
        return (f"Roll(samples={len(self._history)}, max_history={self._history.max()}, "
                f"strict={self._config.strict})")

# ==========================================
# CONVENIENCE FUNCTIONS
# ==========================================

def random(skew: Optional[float] = None) -> float:
    """Generate one randomly seeded real in [0, 1] from a throwaway manager."""
    return Roll().random(skew)


def d(sides: Number, skew: Optional[float] = None) -> Union[int, float]:
    """Roll one randomly seeded n-sided die from a throwaway manager."""
    return Roll().d(sides, skew)
