"""
Formal classification of procedural tile functions (PTF).

A PTF maps elements of a finite domain D to tiles:
    f: D → T,   C = codomain (finite set of tiles)

Properties checked here:
- Deterministic: repeated calls on one input give equal tiles
- Onto: every tile in C is the image of some element of D
- One-to-one: every tile in C is the image of exactly one element
- Bijective: one-to-one and onto

The onto and one-to-one checks are independent linear scans that stop at
the first matching domain element, O(|C| * |D|) each.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, Iterator, Tuple
import logging

from .tile import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Domain:
    """Finite ordered set of opaque elements."""
    elements: Tuple[Hashable, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    def cardinality(self) -> int:
        return len(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.elements)


@dataclass(frozen=True)
class Codomain:
    """Finite ordered set of tiles."""
    elements: Tuple[Tile, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    @classmethod
    def from_function(cls, f: Callable[[Any], Tile], domain: Iterable[Hashable]) -> "Codomain":
        """Image of the domain under f, in domain order."""
        return cls(tuple(f(element) for element in domain))

    def cardinality(self) -> int:
        return len(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.elements)


def is_deterministic(f: Callable[[Any], Tile], value: Any, num_tests: int) -> bool:
    """
    Check that f gives the same tile for the same input.

    Args:
        f: Tile function
        value: Input to repeat
        num_tests: Number of evaluations (fewer than 2 is trivially True)

    Returns:
        True if every result equals the first
    """
    if num_tests < 2:
        return True

    first = f(value)
    for _ in range(1, num_tests):
        if not first.equals(f(value)):
            logger.debug(f"Non-deterministic result for {value!r}")
            return False
    return True


def is_onto(f: Callable[[Any], Tile], domain: Domain, codomain: Codomain) -> bool:
    """Every codomain tile is reached by some domain element."""
    for tile in codomain:
        found = False
        for element in domain:
            if f(element).equals(tile):
                found = True
                break
        if not found:
            logger.debug(f"Tile {tile.to_string()} is not covered by the domain")
            return False
    return True


def is_one_to_one(f: Callable[[Any], Tile], domain: Domain, codomain: Codomain) -> bool:
    """Every codomain tile is reached by exactly one domain element."""
    # a function that is not onto is not one-to-one
    if not is_onto(f, domain, codomain):
        return False

    for tile in codomain:
        count = 0
        for element in domain:
            if f(element).equals(tile):
                count += 1
                break
        if count != 1:
            logger.debug(f"Tile {tile.to_string()} has {count} preimages")
            return False
    return True


def is_bijective(f: Callable[[Any], Tile], domain: Domain, codomain: Codomain) -> bool:
    """One-to-one and onto."""
    return is_one_to_one(f, domain, codomain) and is_onto(f, domain, codomain)


class ProceduralTileFunction:
    """
    Callable wrapper around an element → Tile mapping.

    Purity is a property to be tested, not assumed:

        f = ProceduralTileFunction(lambda cell: Tile.from_string(cell))
        f.is_deterministic("abc", 5)
        f.is_bijective(domain, codomain)
    """

    def __init__(self, func: Callable[[Any], Tile], name: str = ""):
        self.func = func
        self.name = name or getattr(func, "__name__", "ptf")

    def __call__(self, element: Any) -> Tile:
        return self.func(element)

    def __repr__(self) -> str:
        return f"ProceduralTileFunction({self.name})"

    def is_deterministic(self, value: Any, num_tests: int) -> bool:
        return is_deterministic(self, value, num_tests)

    def is_onto(self, domain: Domain, codomain: Codomain) -> bool:
        return is_onto(self, domain, codomain)

    def is_one_to_one(self, domain: Domain, codomain: Codomain) -> bool:
        return is_one_to_one(self, domain, codomain)

    def is_bijective(self, domain: Domain, codomain: Codomain) -> bool:
        return is_bijective(self, domain, codomain)

    def classify(self, domain: Domain, codomain: Codomain) -> dict:
        """Run the set-theoretic predicates and collect the verdicts."""
        result = {
            'onto': self.is_onto(domain, codomain),
            'one_to_one': self.is_one_to_one(domain, codomain),
            'bijective': self.is_bijective(domain, codomain),
        }
        logger.info(f"{self.name}: |D|={domain.cardinality()}, |C|={codomain.cardinality()}, {result}")
        return result
