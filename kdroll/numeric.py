"""
Roll Numeric Helpers
====================

Floating point noise correction and the scale/clip/round transforms used by
the generator, the gaussian transform, the die path and the statistics.

This module provides:
- `fix`: heuristic removal of binary floating point artifacts
  (0.1 + 0.2 -> 0.3, 0.3 - 0.1 -> 0.2)
- `scale`: linear map of a value from one range to another
- `clip`: hard clamp to a [min, max] range
- `round_to`: round half away from zero to a number of decimal places
- `Scaled`: chainable wrapper over a value and its known range

Every arithmetic step is passed through `fix`, so results compare equal to
the decimal values a reader would expect.

Author: Roll Development Team
License: MIT
"""

import math
import numbers
import re
from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache
from typing import Pattern, Sequence, Tuple, Union

from .exceptions import DomainError, InvalidInputError

Number = Union[int, float]
Range = Sequence[Number]

# ==========================================
# FLOATING POINT FIX
# ==========================================

# Doubles outside this magnitude band print in exponent notation, which
# never carries a noise run in its decimal part.
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


@lru_cache(maxsize=None)
def _noise_pattern(repeat: int) -> Pattern:
    return re.compile(rf"(?:9{{{repeat},}}|0{{{repeat},}})\d*$")


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _decimal_text(value: float) -> str:
    """Shortest round-trip text of a double, positional where it fits."""
    magnitude = abs(value)
    if magnitude < _POSITIONAL_MIN or magnitude >= _POSITIONAL_MAX:
        return repr(value)
    return format(Decimal(repr(value)), "f")


def _to_fixed(value: float, places: int) -> float:
    """Round the exact binary value half away from zero to `places` digits."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def fix(value, repeat: int = 6):
    """
    Correct floating point representation noise.

    Looks for a run of at least `repeat` consecutive 9's or 0's in the
    decimal part of `value`. When one is found, the value is rounded to
    the decimal place just before the run. Values that are zero, not
    numbers, non-finite, integral or free of such a run are returned
    unchanged.

    Args:
        value: The value or arithmetic result to correct
        repeat: Minimum run length treated as noise

    Returns:
        The corrected value

    Example:
        >>> fix(0.1 + 0.2)
        0.3
        >>> fix(0.3 - 0.1)
        0.2
    """
    if not _is_number(value) or isinstance(value, numbers.Integral):
        return value
    value = float(value)
    if not value or not math.isfinite(value):
        return value

    text = _decimal_text(value)
    if "." not in text:
        return value
    decimal_part = text.split(".", 1)[1]

    match = _noise_pattern(repeat).search(decimal_part)
    if match is None:
        return value

    places = len(decimal_part) - len(match.group(0))
    return _to_fixed(value, places)

# ==========================================
# STATELESS TRANSFORMS
# ==========================================

def scale(value: Number, initial_range: Range, target_range: Range) -> float:
    """
    Scale a value from one range to another.

    No bounds are enforced: a value outside `initial_range` maps outside
    `target_range`.

    Args:
        value: The original value
        initial_range: The `[min, max]` the value is measured in
        target_range: The `[min, max]` to map onto

    Returns:
        The scaled value

    Raises:
        DomainError: If `initial_range` has zero width
    """
    r1_size = fix(initial_range[1] - initial_range[0])
    r2_size = fix(target_range[1] - target_range[0])
    if r1_size == 0:
        raise DomainError(f"Cannot scale from a zero-width range: {list(initial_range)}")

    x = fix(value - initial_range[0])
    y = fix(x * r2_size)
    z = fix(y / r1_size)
    return fix(z + target_range[0])


def clip(value: Number, bounds: Range) -> Number:
    """Limit a value to a hard `[min, max]`."""
    clipped = fix(max(bounds[0], value))
    return fix(min(clipped, bounds[1]))


def round_to(value: Number, places: int = 0) -> Number:
    """
    Round a value to a number of decimal places.

    Halves round away from zero (0.5 -> 1, -2.5 -> -3, 0.15 -> 0.2). The
    value is rounded as written, not as its binary approximation, so 0.15
    is treated as exactly 0.15.

    Args:
        value: The original value
        places: Decimal places to keep; `0` gives a whole number

    Returns:
        The rounded value

    Raises:
        InvalidInputError: If `value` is not a number or `places` not an int
    """
    if not _is_number(value):
        raise InvalidInputError(f"Cannot round a non-number: {value!r}")
    if isinstance(places, bool) or not isinstance(places, numbers.Integral):
        raise InvalidInputError(f"places must be an integer, got {places!r}")

    if isinstance(value, numbers.Integral):
        if places >= 0:
            return value
        written = Decimal(int(value))
    else:
        if not math.isfinite(value):
            return value
        written = Decimal(repr(float(value)))

    # Already within the requested precision
    if written.as_tuple().exponent >= -places:
        return fix(float(written))

    quantum = Decimal(1).scaleb(-places)
    return fix(float(written.quantize(quantum, rounding=ROUND_HALF_UP)))

# ==========================================
# CHAINABLE WRAPPER
# ==========================================

class Scaled:
    """
    A mutable number with a known range, transformed by chaining.

    Each transform updates the held value and returns the instance.

    Example:
        >>> Scaled(0.55).scale(0, 10).clip(0, 4.5).round(0).value
        5.0
    """

    def __init__(self, value: Union[Number, str, 'Scaled'], known_range: Range = (0, 1)):
        """
        Initialize the wrapper.

        Args:
            value: A number, numeric text, or another `Scaled`
            known_range: The `[min, max]` the value is currently measured in
        """
        if isinstance(value, Scaled):
            value = value.value
        elif isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                raise InvalidInputError(f"Cannot parse a number from {value!r}")
        elif not _is_number(value):
            raise InvalidInputError(f"Scaled needs a number, got {value!r}")

        self._value: Number = value
        self._range: Tuple[Number, Number] = (known_range[0], known_range[1])

    @property
    def value(self) -> Number:
        """The current value."""
        return self._value

    @value.setter
    def value(self, value: Number):
        self._value = value

    @property
    def known_range(self) -> Tuple[Number, Number]:
        """The range the current value is measured in."""
        return self._range

    @known_range.setter
    def known_range(self, bounds: Range):
        self._range = (bounds[0], bounds[1])

    def scale(self, minimum: Number = 0, maximum: Number = 1) -> 'Scaled':
        """Scale from the known range to `[minimum, maximum]`, which becomes the known range."""
        self._value = scale(self._value, self._range, (minimum, maximum))
        self._range = (minimum, maximum)
        return self

    def clip(self, minimum: Number, maximum: Number) -> 'Scaled':
        """Limit the value to `[minimum, maximum]`."""
        self._value = clip(self._value, (minimum, maximum))
        return self

    def round(self, places: int = 0) -> 'Scaled':
        """Round the value to `places` decimal places."""
        self._value = round_to(self._value, places)
        return self

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        """Developer representation."""
        return f"Scaled(value={self._value!r}, known_range={list(self._range)})"
