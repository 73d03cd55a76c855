"""
Tessera - procedural tile functions over the H3 grid.

Main entry point for explorations and classifier runs.
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path as FilePath
from typing import List, Optional

from tessera.config import ExplorerConfig
from tessera.core import TesseraError
from tessera.domains import base_cell_domain, simple_codomain, simple_ptf
from tessera.exploration import Explorer, Path
from tessera.grid import GridProvider, H3GridProvider
from tessera.serialization import to_json


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEFAULT_CELL = "8844d072a3fffff"


def run_exploration(
    cell: str,
    config: ExplorerConfig,
    provider: Optional[GridProvider] = None,
) -> Path:
    """
    Explore from a single cell and log the summary.

    Args:
        cell: Starting cell
        config: Explorer configuration
        provider: Grid provider (H3 by default)

    Returns:
        Explored path
    """
    logger.info(f"Exploring from {cell}: max_steps={config.max_steps}, "
                f"min_similarity={config.min_similarity}, stop_on_return={config.stop_on_return}")

    explorer = Explorer(config, provider)
    path = explorer.explore(cell)

    stats = path.completion_stats()
    logger.info(f"Path length: {stats['path_length']}, complete: {stats['is_complete']}")
    if stats['path_length'] > 0:
        logger.info(f"Similarity avg={stats['average_similarity']:.3f} "
                    f"min={stats['min_similarity']:.3f} max={stats['max_similarity']:.3f}")
    return path


def run_classification(provider: Optional[GridProvider] = None) -> dict:
    """Classify the simple PTF over the H3 base cells."""
    provider = provider if provider is not None else H3GridProvider()
    domain = base_cell_domain()
    f = simple_ptf(provider)
    codomain = simple_codomain(domain, provider)

    logger.info(f"Domain: {domain.cardinality()} base cells, codomain: {codomain.cardinality()} tiles")

    results = {'deterministic': f.is_deterministic(domain.elements[0], 10)}
    results.update(f.classify(domain, codomain))
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tessera H3 Explorer")

    parser.add_argument('--mode', choices=['explore', 'floor', 'classify'], default='explore',
                        help='What to run (default: explore)')
    parser.add_argument('--cell', type=str, default=DEFAULT_CELL,
                        help=f'Starting H3 cell (default: {DEFAULT_CELL})')
    parser.add_argument('--config', type=str, default=None,
                        help='Explorer configuration JSON file')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='Maximum number of steps (default: 100)')
    parser.add_argument('--min-similarity', type=float, default=None,
                        help='Minimum neighbor similarity (default: 0.0)')
    parser.add_argument('--stop-on-return', action='store_true',
                        help='Stop when the walk returns to the starting cell')
    parser.add_argument('--json', action='store_true',
                        help='Print records as JSON')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every step')
    return parser


def config_from_args(args: argparse.Namespace) -> ExplorerConfig:
    """Configuration file first, command line flags on top."""
    config = ExplorerConfig.load(FilePath(args.config)) if args.config else ExplorerConfig()

    if args.max_steps is not None:
        config = config.with_max_steps(args.max_steps)
    if args.min_similarity is not None:
        config = config.with_min_similarity(args.min_similarity)
    if args.stop_on_return:
        config = config.with_stop_on_return(True)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger("tessera").setLevel(logging.DEBUG)

    try:
        if args.mode == 'classify':
            results = run_classification()
            print(to_json(results) if args.json else
                  "\n".join(f"{name}: {value}" for name, value in results.items()))

        elif args.mode == 'floor':
            floor = Explorer().floor(args.cell)
            if args.json:
                print(to_json(floor))
            else:
                print(f"Anchor: {floor.anchor.index}")
                for neighbor in floor.neighbors:
                    print(f"  Edge {neighbor.edge_index}: {neighbor.tile.index} (sim: {neighbor.similarity:.2f})")

        else:
            config = config_from_args(args)
            path = run_exploration(args.cell, config)
            if args.json:
                print(to_json({'config': config, 'path': path, 'stats': path.completion_stats()}))
            else:
                print(path.to_string())

    except (TesseraError, ValueError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
