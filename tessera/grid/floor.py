"""
Adjacency builder ("Floor").

A floor is an anchor tile together with every neighbor the grid provider
reports for it, each scored by similarity to the anchor:

    Floor(t) = { t, [(t_0, S(t, t_0), 0), (t_1, S(t, t_1), 1), ...] }

Tile attributes come from the canonical cell string, one character per
attribute, so cells sharing more leading characters (hierarchically closer
cells in H3) score higher.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging

from ..core.tile import Tile, similarity
from .provider import GridProvider, H3GridProvider

logger = logging.getLogger(__name__)


def tile_for_cell(cell: Any, provider: GridProvider) -> Tile:
    """Derive a tile from a grid cell: one attribute per serialized character."""
    return Tile(tuple(provider.serialize(cell)), index=provider.identity(cell))


@dataclass(frozen=True)
class Neighbor:
    """A tile reached from an anchor, with its score and edge index."""
    tile: Tile
    similarity: float
    edge_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tile': self.tile.to_dict(),
            'similarity': self.similarity,
            'edge_index': self.edge_index,
        }


@dataclass(frozen=True)
class Floor:
    """Anchor tile and its neighbors in provider edge order."""
    anchor: Tile
    neighbors: Tuple[Neighbor, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.neighbors)

    def neighbor(self, edge_index: int) -> Neighbor:
        """Look up a neighbor by edge index."""
        if not 0 <= edge_index < len(self.neighbors):
            raise IndexError(f"Edge index {edge_index} out of bounds [0, {len(self.neighbors)})")
        return self.neighbors[edge_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'anchor': self.anchor.to_dict(),
            'neighbors': [n.to_dict() for n in self.neighbors],
        }


class FloorBuilder:
    """
    Builds floors by expanding tiles through a grid provider.

    Provider failures (e.g. an invalid cell) propagate unchanged.
    """

    def __init__(self, provider: Optional[GridProvider] = None):
        self.provider = provider if provider is not None else H3GridProvider()

    def tile(self, cell: Any) -> Tile:
        return tile_for_cell(cell, self.provider)

    def neighbors(self, tile: Tile) -> List[Neighbor]:
        """
        Expand a tile into scored neighbors.

        Args:
            tile: Anchor tile (its index must be a provider identity)

        Returns:
            Neighbors ordered by edge index; edge_index equals list position
        """
        edges = self.provider.directed_neighbors(tile.index)
        neighbors = []
        for i, (_, cell) in enumerate(edges):
            neighbor_tile = tile_for_cell(cell, self.provider)
            neighbors.append(Neighbor(
                tile=neighbor_tile,
                similarity=similarity(tile, neighbor_tile),
                edge_index=i,
            ))
        logger.debug(f"Floor of {tile.index}: {len(neighbors)} neighbors")
        return neighbors

    def floor(self, tile: Tile) -> Floor:
        return Floor(anchor=tile, neighbors=tuple(self.neighbors(tile)))
