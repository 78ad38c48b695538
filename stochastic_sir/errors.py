"""Exception types raised for invalid simulation parameters."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Caller passed an out-of-range probability, bound or collection."""
