"""
Configuration module for Tessera.

Contains the explorer stopping policy and preset configurations.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List
import json
from pathlib import Path


@dataclass(frozen=True)
class ExplorerConfig:
    """
    Stopping policy for the greedy explorer.

    Configurations are immutable; the with_* builders return new values.

    Example:
        config = ExplorerConfig().with_max_steps(20).with_stop_on_return(True)
        config.save("explorer.json")
    """
    max_steps: int = 100            # Step budget (0 = no moves)
    min_similarity: float = 0.0     # Neighbors below this score are ignored
    stop_on_return: bool = False    # Finish when the walk reaches the start again

    def with_max_steps(self, max_steps: int) -> "ExplorerConfig":
        return replace(self, max_steps=max_steps)

    def with_min_similarity(self, min_similarity: float) -> "ExplorerConfig":
        return replace(self, min_similarity=min_similarity)

    def with_stop_on_return(self, stop_on_return: bool) -> "ExplorerConfig":
        return replace(self, stop_on_return=stop_on_return)

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str | Path) -> "ExplorerConfig":
        """Load configuration from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls._from_dict(data)

    def to_dict(self) -> dict:
        return {
            'max_steps': self.max_steps,
            'min_similarity': self.min_similarity,
            'stop_on_return': self.stop_on_return,
        }

    @classmethod
    def _from_dict(cls, data: dict) -> "ExplorerConfig":
        """Reconstruct from dictionary, ignoring unknown keys."""
        known = {k: data[k] for k in ('max_steps', 'min_similarity', 'stop_on_return') if k in data}
        return cls(**known)

    def validate(self) -> List[str]:
        """Validate configuration, return list of issues."""
        issues = []

        if not isinstance(self.max_steps, int) or isinstance(self.max_steps, bool):
            issues.append("max_steps must be an integer")
        elif self.max_steps < 0:
            issues.append("max_steps must be non-negative")

        if not self.min_similarity >= 0.0:
            issues.append("min_similarity must be a non-negative number")

        return issues


# Preset configurations
def default_config() -> ExplorerConfig:
    """Defaults: 100 steps, any similarity, no stop on return."""
    return ExplorerConfig()


def round_trip_config() -> ExplorerConfig:
    """Look for a walk that comes back to its start."""
    return ExplorerConfig(max_steps=50, min_similarity=0.1, stop_on_return=True)


def strict_config() -> ExplorerConfig:
    """Only follow strongly similar neighbors."""
    return ExplorerConfig(max_steps=20, min_similarity=0.85, stop_on_return=True)
