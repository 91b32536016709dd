"""
Roll Configuration
==================

Construction-time settings for a `Roll` manager.

Author: Roll Development Team
License: MIT
"""

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .exceptions import ConfigError

# Largest integer a double represents exactly (2**53 - 1).
MAX_SAFE_INTEGER = 9007199254740991


def is_safe_capacity(size: Any) -> bool:
    """True for a positive whole number no larger than MAX_SAFE_INTEGER, e.g. 10 or 10.0."""
    if isinstance(size, bool) or not isinstance(size, numbers.Real):
        return False
    if not isinstance(size, numbers.Integral) and not float(size).is_integer():
        return False
    return 0 < size <= MAX_SAFE_INTEGER

# ==========================================
# DATA CLASSES
# ==========================================

@dataclass(frozen=True)
class RollConfig:
    """
    Settings shared by a manager and the components it owns.

    Attributes:
        max_history: Maximum number of samples kept in history. `None`
            means unbounded.
        strict: Raise typed errors instead of logging and substituting
            a fallback value.
    """
    max_history: Optional[int] = None
    strict: bool = False

    def __post_init__(self):
        """Validate the configuration after initialization."""
        if self.max_history is not None:
            if not is_safe_capacity(self.max_history):
                raise ConfigError(f"max_history must be a positive safe integer or None, got {self.max_history!r}")
            object.__setattr__(self, "max_history", int(self.max_history))
        if not isinstance(self.strict, bool):
            raise ConfigError(f"strict must be a bool, got {self.strict!r}")

    @property
    def capacity(self) -> float:
        """History capacity with `math.inf` standing in for unbounded."""
        return math.inf if self.max_history is None else self.max_history

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary for serialization."""
        return {
            "max_history": self.max_history,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RollConfig':
        """Create a RollConfig from a dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)
