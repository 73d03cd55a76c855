"""
H3 base-cell domain and the simple tile function over it.

The 122 resolution-0 cells form a small, fixed domain. The simple PTF maps a
cell to the tile of its canonical string, one attribute per character, which
is the same derivation the explorer uses for grid tiles.
"""

from __future__ import annotations
from typing import Optional

import h3

from ..core import Codomain, Domain, ProceduralTileFunction, Tile
from ..grid import GridProvider, H3GridProvider, tile_for_cell


def base_cell_domain() -> Domain:
    """All H3 resolution-0 cells, sorted by index."""
    return Domain(tuple(sorted(h3.get_res0_cells())))


def simple_ptf(provider: Optional[GridProvider] = None) -> ProceduralTileFunction:
    """Cell → tile of its serialized characters."""
    provider = provider if provider is not None else H3GridProvider()

    def cell_tile(cell) -> Tile:
        return tile_for_cell(cell, provider)

    return ProceduralTileFunction(cell_tile, name="simple_ptf")


def simple_codomain(domain: Domain, provider: Optional[GridProvider] = None) -> Codomain:
    """Image of the domain under the simple PTF."""
    return Codomain.from_function(simple_ptf(provider), domain)
