"""
Sample domains for procedural tile functions.
"""

from .h3_cells import base_cell_domain, simple_ptf, simple_codomain

__all__ = [
    "base_cell_domain",
    "simple_ptf",
    "simple_codomain",
]
