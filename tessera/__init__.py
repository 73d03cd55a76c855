"""
Tessera

Classification and greedy traversal of procedural tile functions (PTF):
deterministic mappings from elements of a finite domain to ordered-attribute
records called tiles.

Main components:
- core: Tile model, similarity, function classifier
- grid: grid cell providers (H3, adjacency table), Floor builder
- exploration: greedy explorer producing traceable paths
- domains: H3 base-cell domain and the simple PTF
"""

__version__ = "0.1.0"
__author__ = "Tessera Team"

from .core import (
    Tile, similarity, Domain, Codomain, ProceduralTileFunction,
    TesseraError, InvalidStateError, CardinalityMismatchError,
)
from .grid import (
    GridProvider, H3GridProvider, TableGridProvider, ProviderFailure,
    Neighbor, Floor, FloorBuilder,
)
from .exploration import Explorer, ExplorationState, Path, Step
from .config import ExplorerConfig

__all__ = [
    "Tile",
    "similarity",
    "Domain",
    "Codomain",
    "ProceduralTileFunction",
    "TesseraError",
    "InvalidStateError",
    "CardinalityMismatchError",
    "GridProvider",
    "H3GridProvider",
    "TableGridProvider",
    "ProviderFailure",
    "Neighbor",
    "Floor",
    "FloorBuilder",
    "Explorer",
    "ExplorationState",
    "Path",
    "Step",
    "ExplorerConfig",
]
