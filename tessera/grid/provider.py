"""
Grid cell providers.

The exploration core consumes a single external capability: something that
can name a cell, serialize it, and list its neighbors in a stable edge order.

    identity(cell)            → stable, totally ordered token
    serialize(cell)           → canonical string
    directed_neighbors(cell)  → [(0, c_0), (1, c_1), ...]

Identities are accepted back by the provider, so a tile only needs to keep
its identity to be expanded again.

Providers are read-only. Running several explorations concurrently is safe
only if the provider's read operations are safe for concurrent use.
"""

from __future__ import annotations
from typing import Any, Hashable, List, Mapping, Optional, Protocol, Sequence, Tuple

import h3
import numpy as np

from ..core.errors import TesseraError


class ProviderFailure(TesseraError):
    """
    Raised when the provider cannot resolve a cell.

    Attributes:
        cell: Cell that could not be resolved
        partial_path: Path accumulated before the failure (set by the explorer)
    """
    def __init__(self, cell: Any, message: str = ""):
        self.cell = cell
        self.partial_path = None
        super().__init__(message or f"Cannot resolve neighbors of cell {cell!r}")


class GridProvider(Protocol):
    """Contract for grid topology providers."""

    def identity(self, cell: Any) -> Hashable:
        ...

    def serialize(self, cell: Any) -> str:
        ...

    def directed_neighbors(self, cell: Any) -> List[Tuple[int, Any]]:
        ...


class H3GridProvider:
    """
    Hexagonal grid provider backed by Uber's H3 index.

    Cells are H3 indexes in their canonical hex string form
    (e.g. "8844d072a3fffff"); integer indexes are converted on entry.
    Neighbors follow the order of the cell's outgoing directed edges,
    6 for hexagons and 5 for pentagons.
    """

    def identity(self, cell: Any) -> str:
        if isinstance(cell, (int, np.integer)):
            return h3.int_to_str(int(cell))
        return str(cell).lower()

    def serialize(self, cell: Any) -> str:
        return self.identity(cell)

    def directed_neighbors(self, cell: Any) -> List[Tuple[int, str]]:
        index = self.identity(cell)
        try:
            if not h3.is_valid_cell(index):
                raise ProviderFailure(index, f"Invalid H3 cell: {index!r}")
            edges = h3.origin_to_directed_edges(index)
            return [
                (i, h3.get_directed_edge_destination(edge))
                for i, edge in enumerate(edges)
            ]
        except (h3.H3BaseException, ValueError) as e:
            raise ProviderFailure(index, f"H3 failed for cell {index!r}: {e}") from e

    def resolution(self, cell: Any) -> int:
        """H3 resolution of the cell."""
        return h3.get_resolution(self.identity(cell))


class TableGridProvider:
    """
    Provider over an explicit adjacency table.

    Example:
        provider = TableGridProvider(
            {"a": ["b", "c"], "b": ["a"], "c": ["a"]},
            labels={"a": "xx", "b": "xy", "c": "yy"},
        )
        provider.directed_neighbors("a")  # [(0, "b"), (1, "c")]
    """

    def __init__(
        self,
        adjacency: Mapping[Hashable, Sequence[Hashable]],
        labels: Optional[Mapping[Hashable, str]] = None,
    ):
        """
        Args:
            adjacency: Neighbor list per cell, in edge order
            labels: Canonical string per cell (defaults to str(cell))
        """
        self.adjacency = {cell: list(neighbors) for cell, neighbors in adjacency.items()}
        self.labels = dict(labels) if labels else {}

    def __contains__(self, cell: Hashable) -> bool:
        return cell in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)

    def identity(self, cell: Hashable) -> Hashable:
        return cell

    def serialize(self, cell: Hashable) -> str:
        return self.labels.get(cell, str(cell))

    def directed_neighbors(self, cell: Hashable) -> List[Tuple[int, Hashable]]:
        if cell not in self.adjacency:
            raise ProviderFailure(cell, f"Unknown cell: {cell!r}")
        return list(enumerate(self.adjacency[cell]))
