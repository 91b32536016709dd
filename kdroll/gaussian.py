"""
Roll Gaussian Transform
=======================

Gaussian distributed reals in [0, 1] built from two uniform draws with the
Box-Muller transform, optionally skewed toward 0 or 1.

Skew is applied as an exponent on the [0, 1] result:
- skew == 0: exponent 1, no skew
- skew < 0: exponent 1 - |skew|, mass moves toward 1
- skew > 0: exponent |skew| scaled from [0, 1] to [0, 4], mass moves toward 0

Draws whose Box-Muller result falls outside [0, 1] are discarded and the
whole sample is redrawn from a freshly seeded Uniform rather than the
caller's source. Streams are therefore reproducible except in that rare
case (roughly one draw in two million).

Author: Roll Development Team
License: MIT
"""

import logging
import math
from typing import Any

from .exceptions import GeneratorMisuseError
from .numeric import Scaled, fix
from .uniform import Uniform

logger = logging.getLogger(__name__)


def skew_exponent(skew: float) -> float:
    """
    Convert a skew in [-1, 1] into the exponent applied to a sample.

    Values outside [-1, 1] are clipped by magnitude.
    """
    if skew == 0:
        return 1
    magnitude = Scaled(abs(skew)).clip(0, 1)
    if skew < 0:
        return 1 - magnitude.value
    return magnitude.scale(0, 4).value


def _draw_nonzero(source: Any) -> float:
    value = 0
    while value == 0:
        value = source.random()
    return value


def _box_muller(source: Any) -> float:
    u = _draw_nonzero(source)
    v = _draw_nonzero(source)
    num = fix(math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v))
    return fix(num / 10.0 + 0.5)


def gaussian(source: Any, skew: float = 0, strict: bool = False) -> float:
    """
    Generate a random real in [0, 1] with (skewed) gaussian distribution.

    Args:
        source: A uniform generator exposing `random()` (Uniform,
            random.Random, ...)
        skew: In the range [-1, 1]. Negative values skew the data RIGHT,
            positive values skew it LEFT.
        strict: Raise when `source` cannot produce samples

    Returns:
        Float in [0, 1]

    Raises:
        GeneratorMisuseError: In strict mode, if `source` has no callable `random()`
    """
    exponent = skew_exponent(skew)

    if not callable(getattr(source, "random", None)):
        message = f"Must provide a valid prng generator object, got {type(source).__name__}"
        if strict:
            raise GeneratorMisuseError(message)
        logger.error(f"{message}; sampling from a freshly seeded generator instead")
        source = Uniform()

    num = _box_muller(source)
    while num < 0 or num > 1:
        logger.debug(f"Gaussian sample {num} out of range; resampling from a fresh generator")
        num = _box_muller(Uniform())

    return fix(num ** exponent)
