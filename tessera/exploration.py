"""
Greedy exploration of the tile adjacency graph.

Starting from a cell, the explorer repeatedly expands the current tile into
its floor and moves to the most similar admissible neighbor:

    t_{k+1} = argmax_{n ∈ Floor(t_k), S(t_k, n) ≥ s_min} S(t_k, n)

with ties going to the lowest edge index and immediate backtracking to
t_{k-1} avoided whenever another admissible neighbor exists.

States:
- RUNNING:   walk in progress
- COMPLETED: returned to the start (stop_on_return)
- EXHAUSTED: step budget reached
- STUCK:     no admissible neighbor
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple
import logging

import numpy as np

from tessera.config import ExplorerConfig
from tessera.core import Tile
from tessera.grid import FloorBuilder, Floor, GridProvider, Neighbor, ProviderFailure

logger = logging.getLogger(__name__)


class ExplorationState(Enum):
    """States of the explorer state machine."""
    RUNNING = "running"
    COMPLETED = "completed"
    EXHAUSTED = "exhausted"
    STUCK = "stuck"


@dataclass(frozen=True)
class Step:
    """One transition: edge taken, tile reached, score that justified it."""
    edge_index: int
    index: Hashable
    similarity: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'edge_index': self.edge_index,
            'index': self.index,
            'similarity': self.similarity,
        }


@dataclass
class Path:
    """
    Record of a walk: the start tile and the steps taken from it.

    An empty step list means no move was possible (or allowed) from the start.
    The terminal state is kept for inspection but is not part of the record.
    """
    start: Tile
    steps: List[Step] = field(default_factory=list)
    state: ExplorationState = field(default=ExplorationState.RUNNING, compare=False)

    def __len__(self) -> int:
        return len(self.steps)

    def is_complete(self) -> bool:
        """True if the last step lands on the start tile."""
        return len(self.steps) > 0 and self.steps[-1].index == self.start.index

    def indices(self) -> List[Hashable]:
        """Start identity followed by the identity reached at each step."""
        return [self.start.index] + [step.index for step in self.steps]

    def similarities(self) -> np.ndarray:
        return np.array([step.similarity for step in self.steps], dtype=float)

    def completion_stats(self) -> Dict[str, Any]:
        """
        Summary statistics of the walk.

        Returns:
            Dict with is_complete and path_length; for non-empty paths also
            average/min/max similarity, and completion_similarity when the
            path is complete
        """
        complete = self.is_complete()
        stats: Dict[str, Any] = {
            'is_complete': complete,
            'path_length': len(self.steps),
        }

        if self.steps:
            sims = self.similarities()
            stats['average_similarity'] = float(np.mean(sims))
            stats['min_similarity'] = float(np.min(sims))
            stats['max_similarity'] = float(np.max(sims))

            if complete:
                stats['completion_similarity'] = self.steps[-1].similarity

        return stats

    def to_string(self) -> str:
        """Human readable listing of the walk."""
        status = "complete" if self.is_complete() else "open"
        lines = [f"Path from {self.start.index} ({len(self.steps)} steps, {status})"]
        for i, step in enumerate(self.steps, start=1):
            lines.append(
                f"  {i:3d}. edge {step.edge_index} -> {step.index} (sim {step.similarity:.2f})"
            )
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'start': self.start.to_dict(),
            'steps': [step.to_dict() for step in self.steps],
        }


def best_neighbor(
    neighbors: Sequence[Neighbor],
    min_similarity: float,
    exclude: Optional[Hashable] = None,
) -> Optional[Neighbor]:
    """
    Highest-scoring neighbor at or above min_similarity.

    Ties keep the first neighbor in edge order.

    Args:
        neighbors: Neighbors in edge order
        min_similarity: Admission threshold
        exclude: Identity to skip (the previous tile when avoiding backtracking)

    Returns:
        Best neighbor, or None if nothing qualifies
    """
    best = None
    for neighbor in neighbors:
        if neighbor.similarity < min_similarity:
            continue
        if exclude is not None and neighbor.tile.index == exclude:
            continue
        if best is None or neighbor.similarity > best.similarity:
            best = neighbor
    return best


class Explorer:
    """
    Greedy best-first walker over the tile adjacency graph.

    The explorer owns only its configuration; every call to explore() builds
    a fresh Path, so one explorer can be reused for many starting cells.

    Example:
        explorer = (Explorer()
                    .with_max_steps(10)
                    .with_min_similarity(0.1)
                    .with_stop_on_return(True))
        path = explorer.explore("8844d072a3fffff")
        path.completion_stats()
    """

    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        provider: Optional[GridProvider] = None,
    ):
        """
        Args:
            config: Stopping policy (defaults to ExplorerConfig())
            provider: Grid cell provider (defaults to H3GridProvider)

        Raises:
            ValueError: The configuration has validation issues
        """
        self.config = config if config is not None else ExplorerConfig()
        issues = self.config.validate()
        if issues:
            raise ValueError(f"Invalid explorer config: {'; '.join(issues)}")

        self.floors = FloorBuilder(provider)
        self.provider = self.floors.provider

    def with_config(self, config: ExplorerConfig) -> "Explorer":
        return Explorer(config, self.provider)

    def with_max_steps(self, max_steps: int) -> "Explorer":
        return self.with_config(self.config.with_max_steps(max_steps))

    def with_min_similarity(self, min_similarity: float) -> "Explorer":
        return self.with_config(self.config.with_min_similarity(min_similarity))

    def with_stop_on_return(self, stop_on_return: bool) -> "Explorer":
        return self.with_config(self.config.with_stop_on_return(stop_on_return))

    def floor(self, cell: Any) -> Floor:
        """Floor of the tile derived from cell."""
        return self.floors.floor(self.floors.tile(cell))

    def explore(self, start_cell: Any) -> Path:
        """
        Walk the grid from start_cell.

        With max_steps == 0 the walk ends EXHAUSTED before the provider
        expands any cell, so an invalid start cell is not reported.

        Args:
            start_cell: Any cell the provider understands

        Returns:
            Path with its terminal state set

        Raises:
            ProviderFailure: The provider could not expand a cell; the path
                accumulated so far is attached as partial_path
        """
        path = Path(start=self.floors.tile(start_cell))
        try:
            self._walk(path)
        except ProviderFailure as e:
            e.partial_path = path
            raise
        return path

    def _select(
        self,
        floor: Floor,
        previous: Optional[Tile],
        anchor: Tile,
    ) -> Tuple[ExplorationState, Optional[Neighbor]]:
        """Transition function for one step; returns (next state, chosen neighbor)."""
        config = self.config

        chosen = best_neighbor(floor.neighbors, config.min_similarity)
        if chosen is None:
            return ExplorationState.STUCK, None

        if config.stop_on_return and chosen.tile.index == anchor.index:
            return ExplorationState.COMPLETED, chosen

        if previous is not None and chosen.tile.index == previous.index:
            chosen = best_neighbor(floor.neighbors, config.min_similarity, exclude=previous.index)
            if chosen is None:
                return ExplorationState.STUCK, None

        return ExplorationState.RUNNING, chosen

    def _walk(self, path: Path) -> None:
        config = self.config
        start = path.start
        visited: Dict[Hashable, int] = {start.index: 1}

        current = start
        previous: Optional[Tile] = None
        state = ExplorationState.RUNNING if config.max_steps > 0 else ExplorationState.EXHAUSTED

        while state is ExplorationState.RUNNING:
            floor = self.floors.floor(current)
            state, chosen = self._select(floor, previous, start)
            if chosen is None:
                break

            path.steps.append(Step(
                edge_index=chosen.edge_index,
                index=chosen.tile.index,
                similarity=chosen.similarity,
            ))
            logger.debug(f"Step {len(path.steps)}: edge {chosen.edge_index} -> {chosen.tile.index} "
                         f"(sim {chosen.similarity:.2f})")

            previous, current = current, chosen.tile
            visited[current.index] = visited.get(current.index, 0) + 1

            if state is ExplorationState.RUNNING and len(path.steps) >= config.max_steps:
                state = ExplorationState.EXHAUSTED

        path.state = state
        logger.info(f"Exploration from {start.index}: {state.value} after {len(path.steps)} steps, "
                    f"visited {len(visited)} unique tiles")
