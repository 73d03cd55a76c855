"""
Tile model for procedural tile functions.

A tile is a structured record with a finite sequence of ordered attributes:
    t = (a_0, a_1, ..., a_{n-1}),   n = |t| (cardinality)

Key concepts:
- Equality: same cardinality and attribute-wise equal, order sensitive
- Similarity: fraction of matching positions, floored to 0.01
- Index: the grid identity a tile was derived from (not part of equality)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional, Sequence, Tuple

from .errors import InvalidStateError, CardinalityMismatchError


# Similarity is quantized to multiples of 1/SIMILARITY_SCALE
SIMILARITY_SCALE = 100


@dataclass(frozen=True, eq=False)
class Tile:
    """
    Immutable ordered-attribute record.

    Attributes:
        attributes: Ordered attribute values
        index: Identity of the grid cell this tile describes (optional)

    Example:
        a = Tile.from_string("8844d072a3fffff")
        b = Tile(("8", "8", "4"), index="cell-b")
        a.cardinality()  # 15
    """
    attributes: Tuple[Any, ...]
    index: Optional[Hashable] = field(default=None)

    def __post_init__(self):
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))
        if len(self.attributes) == 0:
            raise InvalidStateError("Tile has no attributes")

    @classmethod
    def from_string(cls, text: str, index: Optional[Hashable] = None) -> "Tile":
        """Build a tile with one attribute per character of text."""
        return cls(tuple(text), index=index)

    def cardinality(self) -> int:
        """Number of attributes."""
        length = len(self.attributes)
        if length == 0:
            raise InvalidStateError("Tile has no attributes")
        return length

    def __len__(self) -> int:
        return len(self.attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return tiles_equal(self, other)

    def __hash__(self) -> int:
        return hash(self.attributes)

    def equals(self, other: "Tile") -> bool:
        return tiles_equal(self, other)

    def similarity(self, other: "Tile") -> float:
        return similarity(self, other)

    def to_string(self) -> str:
        return "".join(str(a) for a in self.attributes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'attributes': list(self.attributes),
        }


def tiles_equal(a: Tile, b: Tile) -> bool:
    """Same cardinality and the same attributes in the same order."""
    if len(a.attributes) != len(b.attributes):
        return False
    for x, y in zip(a.attributes, b.attributes):
        if x != y:
            return False
    return True


def matching_positions(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Count positions where both sequences hold equal values."""
    return sum(1 for x, y in zip(a, b) if x == y)


def similarity(a: Tile, b: Tile) -> float:
    """
    Compute attribute similarity between two tiles.

        S(a, b) = floor(100 * matches / n) / 100

    The result is truncated, not rounded: 7 matches out of 9 gives 0.77.
    Integer arithmetic keeps the quantization exact.

    Args:
        a: First tile
        b: Second tile

    Returns:
        Similarity in [0.0, 1.0], a multiple of 0.01

    Raises:
        InvalidStateError: Either tile has no attributes
        CardinalityMismatchError: Tiles have different cardinalities
    """
    n_a = a.cardinality()
    n_b = b.cardinality()
    if n_a != n_b:
        raise CardinalityMismatchError(n_a, n_b)

    matches = matching_positions(a.attributes, b.attributes)
    return (SIMILARITY_SCALE * matches // n_a) / SIMILARITY_SCALE
