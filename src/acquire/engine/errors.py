"""
Exception hierarchy for the Acquire engine.

Rule violations during play are reported as ``Failure`` results, not raised.
These exceptions cover bad construction input and the raising ``apply_action``
entry point.
"""

from __future__ import annotations

from typing import Sequence


class AcquireError(Exception):
    """Base exception for all engine errors."""


class InvalidTileError(AcquireError, ValueError):
    """Coordinate or label does not name a tile on the board."""


class InvalidPlayerError(AcquireError, ValueError):
    """Player index is outside the seated players."""


class InsufficientTilesError(AcquireError, ValueError):
    """Tile pool cannot cover the requested draw."""


class ConfigError(AcquireError, ValueError):
    """Game configuration failed validation."""


class IllegalActionError(AcquireError, ValueError):
    """Action is not legal in the current state."""

    def __init__(self, violations: Sequence[object]):
        self.violations = tuple(violations)
        reasons = ", ".join(getattr(v, "reason", str(v)) for v in self.violations)
        super().__init__(f"Illegal action: {reasons}")
