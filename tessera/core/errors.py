"""
Error taxonomy for Tessera.

All failures raised by the library derive from TesseraError so callers can
catch them in one place. Terminal exploration states (stuck, exhausted) are
not errors and never raise.
"""

from __future__ import annotations
from typing import Optional


class TesseraError(Exception):
    """Base class for all Tessera errors."""


class InvalidStateError(TesseraError):
    """Raised when a tile without attributes is used."""


class CardinalityMismatchError(TesseraError, ValueError):
    """Raised when comparing tiles with different attribute counts."""
    def __init__(self, left: int, right: int, message: Optional[str] = None):
        self.left = left
        self.right = right
        super().__init__(message or f"Tiles have different cardinalities: {left} != {right}")
