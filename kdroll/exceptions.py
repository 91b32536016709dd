"""
Roll Exceptions
===============

Error hierarchy shared by every kdroll component.

By default the generator, the die path and the history buffer are
self-healing: invalid input is logged and replaced with a usable value.
These exceptions are raised when a manager runs in strict mode, plus the
few conditions that have no sensible substitute (zero-width ranges,
statistics over nothing).

Author: Roll Development Team
License: MIT
"""

# ==========================================
# EXCEPTIONS
# ==========================================

class RollError(Exception):
    """Base exception for kdroll errors."""
    pass

class SeedError(RollError, ValueError):
    """Raised in strict mode when a seed cannot be normalized."""
    pass

class InvalidSidesError(RollError, TypeError):
    """Raised in strict mode when a die is given non-numeric sides."""
    pass

class DomainError(RollError, ArithmeticError):
    """Raised when a range transform would divide by a zero-width range."""
    pass

class GeneratorMisuseError(RollError, TypeError):
    """Raised in strict mode when a uniform source has no random() method."""
    pass

class InvalidInputError(RollError, ValueError):
    """Raised when a statistic or transform receives unusable input."""
    pass

class HistoryCapacityError(RollError, ValueError):
    """Raised in strict mode when a history capacity is not a safe integer."""
    pass

class ConfigError(RollError):
    """Raised when a RollConfig holds invalid values."""
    pass
