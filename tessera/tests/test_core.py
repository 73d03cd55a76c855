"""
Tests for core module.
"""

import pytest
import numpy as np
from tessera.core import (
    Tile, similarity, tiles_equal,
    Domain, Codomain, ProceduralTileFunction,
    is_deterministic, is_onto, is_one_to_one, is_bijective,
    InvalidStateError, CardinalityMismatchError, TesseraError,
)


class TestTile:
    """Tests for Tile class."""

    def test_create_from_string(self):
        """One attribute per character, in order."""
        tile = Tile.from_string("8844d", index="cell")
        assert tile.attributes == ("8", "8", "4", "4", "d")
        assert tile.cardinality() == 5
        assert tile.index == "cell"

    def test_list_attributes_become_tuple(self):
        """Attributes are stored as an immutable tuple."""
        tile = Tile([1, 2, 3])
        assert isinstance(tile.attributes, tuple)
        assert len(tile) == 3

    def test_zero_attributes_rejected(self):
        """A tile must have at least one attribute."""
        with pytest.raises(InvalidStateError):
            Tile(())

    def test_cardinality_guard(self):
        """Cardinality of an emptied tile is an invalid state."""
        tile = Tile(("a",))
        object.__setattr__(tile, "attributes", ())
        with pytest.raises(InvalidStateError):
            tile.cardinality()

    def test_equality_is_order_sensitive(self):
        """Same attributes in a different order are different tiles."""
        assert Tile(("a", "b")) == Tile(("a", "b"))
        assert Tile(("a", "b")) != Tile(("b", "a"))

    def test_equality_requires_same_cardinality(self):
        """Prefix tiles are not equal."""
        assert not tiles_equal(Tile(("a", "b")), Tile(("a", "b", "c")))

    def test_equality_ignores_index(self):
        """Index is identity metadata, not an attribute."""
        a = Tile.from_string("abc", index=1)
        b = Tile.from_string("abc", index=2)
        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b)

    def test_immutable(self):
        """Tiles are frozen."""
        tile = Tile(("a",))
        with pytest.raises(AttributeError):
            tile.attributes = ("b",)

    def test_to_dict(self):
        """Serialized form carries index and attributes."""
        tile = Tile.from_string("ab", index="x")
        assert tile.to_dict() == {'index': 'x', 'attributes': ['a', 'b']}


class TestSimilarity:
    """Tests for the similarity metric."""

    def test_identical(self):
        """A tile is fully similar to itself."""
        tile = Tile.from_string("8844d072a3fffff")
        assert similarity(tile, tile) == 1.0

    def test_floor_not_round(self):
        """7 matches out of 9 is 0.77, not 0.78."""
        a = Tile.from_string("abcdefghi")
        b = Tile.from_string("abcdefgXY")
        assert similarity(a, b) == 0.77

    def test_two_thirds(self):
        """2 of 3 truncates to 0.66."""
        assert similarity(Tile.from_string("abc"), Tile.from_string("abX")) == 0.66

    def test_no_matches(self):
        """Disjoint tiles score zero."""
        assert similarity(Tile.from_string("aaa"), Tile.from_string("bbb")) == 0.0

    def test_positional(self):
        """Only equal positions count, not shared values."""
        assert similarity(Tile.from_string("ab"), Tile.from_string("ba")) == 0.0

    def test_cardinality_mismatch(self):
        """Tiles of different sizes cannot be compared."""
        with pytest.raises(CardinalityMismatchError) as info:
            similarity(Tile.from_string("abc"), Tile.from_string("abcd"))
        assert info.value.left == 3
        assert info.value.right == 4
        assert isinstance(info.value, TesseraError)

    def test_method_form(self):
        """Tile.similarity delegates to the module function."""
        a = Tile.from_string("abcd")
        b = Tile.from_string("abXX")
        assert a.similarity(b) == 0.5

    def test_properties_random_tiles(self):
        """Symmetric, in [0, 1], and a multiple of 0.01."""
        rng = np.random.default_rng(42)
        for _ in range(200):
            n = int(rng.integers(1, 40))
            a = Tile(tuple(rng.integers(0, 3, size=n).tolist()))
            b = Tile(tuple(rng.integers(0, 3, size=n).tolist()))

            s = similarity(a, b)
            assert s == similarity(b, a)
            assert 0.0 <= s <= 1.0
            assert s == int(s * 100 + 1e-9) / 100

            matches = int(np.sum(np.array(a.attributes) == np.array(b.attributes)))
            assert s == (100 * matches // n) / 100
            assert s <= matches / n


def identity_tile(x):
    return Tile((x,))


class TestClassifier:
    """Tests for the function classifier."""

    def test_deterministic_trivial(self):
        """Fewer than two tests is always deterministic."""
        rng = np.random.default_rng(0)
        f = lambda x: Tile((int(rng.integers(0, 10**9)),))
        assert is_deterministic(f, "x", 0)
        assert is_deterministic(f, "x", 1)

    def test_deterministic_pure(self):
        """A pure function passes the repeatability check."""
        assert is_deterministic(identity_tile, 7, 10)

    def test_nondeterministic(self):
        """A function driven by randomness fails the check."""
        rng = np.random.default_rng(0)
        f = lambda x: Tile((int(rng.integers(0, 10**9)),))
        assert not is_deterministic(f, "x", 5)

    def test_bijective(self):
        """Identity onto its own image is bijective."""
        domain = Domain(range(4))
        codomain = Codomain.from_function(identity_tile, domain)
        assert codomain.cardinality() == 4
        assert is_onto(identity_tile, domain, codomain)
        assert is_one_to_one(identity_tile, domain, codomain)
        assert is_bijective(identity_tile, domain, codomain)

    def test_constant_not_onto(self):
        """A constant function cannot cover two distinct tiles."""
        constant = lambda x: Tile(("c",))
        domain = Domain(("a", "b", "c"))
        codomain = Codomain((Tile(("c",)), Tile(("d",))))
        assert not is_onto(constant, domain, codomain)
        assert not is_one_to_one(constant, domain, codomain)
        assert not is_bijective(constant, domain, codomain)

    def test_uncovered_tile(self):
        """A codomain tile outside the image breaks onto."""
        domain = Domain((1, 2))
        codomain = Codomain((Tile((1,)), Tile((2,)), Tile((3,))))
        assert not is_onto(identity_tile, domain, codomain)
        assert not is_one_to_one(identity_tile, domain, codomain)

    def test_uniqueness_scan_stops_at_first_match(self):
        """The preimage count stops at the first match, so duplicates pass."""
        half = lambda x: Tile((x // 2,))
        domain = Domain((0, 1, 2))
        codomain = Codomain((Tile((0,)), Tile((1,))))
        assert is_onto(half, domain, codomain)
        assert is_one_to_one(half, domain, codomain)
        assert is_bijective(half, domain, codomain)

    def test_empty_codomain(self):
        """Nothing to cover is vacuously onto."""
        assert is_onto(identity_tile, Domain((1,)), Codomain())

    def test_bijective_implies_both(self):
        """Bijective implies onto and one-to-one."""
        f = lambda x: Tile.from_string(f"{x:03d}")
        domain = Domain(range(0, 50, 5))
        codomain = Codomain.from_function(f, domain)
        assert is_bijective(f, domain, codomain)
        assert is_onto(f, domain, codomain)
        assert is_one_to_one(f, domain, codomain)


class TestProceduralTileFunction:
    """Tests for the PTF wrapper."""

    def test_callable(self):
        """Wrapper forwards calls."""
        f = ProceduralTileFunction(identity_tile)
        assert f(3) == Tile((3,))
        assert f.name == "identity_tile"

    def test_methods(self):
        """Predicates are available as methods."""
        f = ProceduralTileFunction(identity_tile, name="id")
        domain = Domain((1, 2, 3))
        codomain = Codomain.from_function(f, domain)
        assert f.is_deterministic(1, 3)
        assert f.is_onto(domain, codomain)
        assert f.is_one_to_one(domain, codomain)
        assert f.is_bijective(domain, codomain)

    def test_classify(self):
        """classify collects the three set-theoretic verdicts."""
        f = ProceduralTileFunction(lambda x: Tile(("c",)), name="constant")
        domain = Domain((1, 2))
        codomain = Codomain((Tile(("c",)), Tile(("d",))))
        assert f.classify(domain, codomain) == {
            'onto': False,
            'one_to_one': False,
            'bijective': False,
        }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
