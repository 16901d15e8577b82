"""
invariants.py
-------------
Fatal bookkeeping errors.

A lookup miss in the sprite registry, enemy directory or text display means
the simulation's own records went out of sync. Nothing outside the program
can cause that, so it is reported as an assertion failure instead of being
recovered from.
"""

from car_shoot.core.debug.debug_logger import DebugLogger


class InvariantViolation(AssertionError):
    """Raised when internal game bookkeeping is inconsistent."""


def violation(message: str, category: str = "system") -> InvariantViolation:
    """Log a failure and build the exception for the caller to raise."""
    DebugLogger.fail(message, category=category)
    return InvariantViolation(message)
