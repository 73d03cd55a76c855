"""
Grid module for Tessera.

Provides:
- GridProvider: contract for cell identity, serialization and neighbor topology
- H3GridProvider: hexagonal grid backed by h3
- TableGridProvider: explicit adjacency table
- FloorBuilder / Floor / Neighbor: scored neighbor expansion of a tile
"""

from .provider import GridProvider, ProviderFailure, H3GridProvider, TableGridProvider
from .floor import Neighbor, Floor, FloorBuilder, tile_for_cell

__all__ = [
    "GridProvider",
    "ProviderFailure",
    "H3GridProvider",
    "TableGridProvider",
    "Neighbor",
    "Floor",
    "FloorBuilder",
    "tile_for_cell",
]
