"""
Core module for Tessera.

Contains:
- Tile: ordered-attribute record with structural equality
- similarity: floored fraction of matching attribute positions
- Domain / Codomain: finite input set / finite set of tiles
- ProceduralTileFunction: element → Tile mapping with classifier predicates
- Error taxonomy (InvalidStateError, CardinalityMismatchError)
"""

from .errors import TesseraError, InvalidStateError, CardinalityMismatchError
from .tile import Tile, similarity, tiles_equal, matching_positions
from .classifier import (
    Domain, Codomain, ProceduralTileFunction,
    is_deterministic, is_onto, is_one_to_one, is_bijective,
)

__all__ = [
    "TesseraError",
    "InvalidStateError",
    "CardinalityMismatchError",
    "Tile",
    "similarity",
    "tiles_equal",
    "matching_positions",
    # Classifier
    "Domain",
    "Codomain",
    "ProceduralTileFunction",
    "is_deterministic",
    "is_onto",
    "is_one_to_one",
    "is_bijective",
]
