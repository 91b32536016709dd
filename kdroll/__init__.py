"""
kdroll
======

Seedable pseudorandom number manager: Mersenne Twister uniform
distribution, skewed Box-Muller gaussian distribution, n-sided die rolling,
bounded history, elementary statistics, and scale/clip/round helpers.

Author: Roll Development Team
License: MIT
"""

from .config import MAX_SAFE_INTEGER, RollConfig
from .elemstats import mean, median, modes, standard_deviation
from .exceptions import (
    ConfigError,
    DomainError,
    GeneratorMisuseError,
    HistoryCapacityError,
    InvalidInputError,
    InvalidSidesError,
    RollError,
    SeedError,
)
from .gaussian import gaussian, skew_exponent
from .history import History
from .numeric import Scaled, clip, fix, round_to, scale
from .roll import Roll, d, random
from .uniform import (
    EntropySource,
    FallbackEntropy,
    SeedKind,
    SeedValue,
    SystemEntropy,
    Uniform,
    create_random_seed,
    normalize_seed,
)

__version__ = "1.0.0"

__all__ = [
    "MAX_SAFE_INTEGER",
    "ConfigError",
    "DomainError",
    "EntropySource",
    "FallbackEntropy",
    "GeneratorMisuseError",
    "History",
    "HistoryCapacityError",
    "InvalidInputError",
    "InvalidSidesError",
    "Roll",
    "RollConfig",
    "RollError",
    "Scaled",
    "SeedError",
    "SeedKind",
    "SeedValue",
    "SystemEntropy",
    "Uniform",
    "clip",
    "create_random_seed",
    "d",
    "fix",
    "gaussian",
    "mean",
    "median",
    "modes",
    "normalize_seed",
    "random",
    "round_to",
    "scale",
    "skew_exponent",
    "standard_deviation",
]
