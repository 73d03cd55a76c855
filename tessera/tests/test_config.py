"""
Tests for configuration and serialization.
"""

import json
import dataclasses
import pytest
import numpy as np
from tessera.config import ExplorerConfig, default_config, round_trip_config, strict_config
from tessera.core import Tile
from tessera.exploration import Explorer, Path, Step, ExplorationState
from tessera.grid import FloorBuilder, TableGridProvider
from tessera.serialization import to_json


class TestExplorerConfig:
    """Tests for ExplorerConfig."""

    def test_defaults(self):
        """Default policy: 100 steps, no threshold, no stop on return."""
        config = ExplorerConfig()
        assert config.max_steps == 100
        assert config.min_similarity == 0.0
        assert config.stop_on_return is False
        assert config.validate() == []

    def test_builders_are_pure(self):
        """Builders return new configurations."""
        base = ExplorerConfig()
        tuned = base.with_max_steps(7).with_min_similarity(0.3).with_stop_on_return(True)

        assert base == ExplorerConfig()
        assert (tuned.max_steps, tuned.min_similarity, tuned.stop_on_return) == (7, 0.3, True)

    def test_frozen(self):
        """Configurations cannot be modified in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ExplorerConfig().max_steps = 5

    def test_validate(self):
        """Negative values are reported."""
        issues = ExplorerConfig(max_steps=-1, min_similarity=-0.5).validate()
        assert len(issues) == 2

    def test_nan_threshold_rejected(self):
        """A NaN threshold is reported and refused by the explorer."""
        config = ExplorerConfig(max_steps=3, min_similarity=float("nan"))
        assert config.validate() == ["min_similarity must be a non-negative number"]

        provider = TableGridProvider({"S": ["B"], "B": ["S"]}, labels={"S": "00", "B": "01"})
        with pytest.raises(ValueError):
            Explorer(config, provider)

    def test_threshold_above_one_is_valid(self):
        """A threshold above 1.0 is allowed; it just admits nothing."""
        assert ExplorerConfig(min_similarity=1.5).validate() == []

    def test_save_load(self, tmp_path):
        """JSON round trip."""
        config = ExplorerConfig(max_steps=12, min_similarity=0.25, stop_on_return=True)
        path = tmp_path / "nested" / "explorer.json"
        config.save(path)

        assert ExplorerConfig.load(path) == config
        assert json.loads(path.read_text()) == config.to_dict()

    def test_load_ignores_unknown_keys(self, tmp_path):
        """Extra keys in the file are ignored."""
        path = tmp_path / "explorer.json"
        path.write_text(json.dumps({'max_steps': 3, 'comment': 'short walk'}))
        assert ExplorerConfig.load(path) == ExplorerConfig(max_steps=3)

    def test_presets(self):
        """Presets are valid."""
        for config in (default_config(), round_trip_config(), strict_config()):
            assert config.validate() == []
        assert round_trip_config().stop_on_return
        assert strict_config().min_similarity == 0.85


class TestSerialization:
    """Tests for JSON rendering."""

    def test_tile(self):
        """Tile renders index and attributes."""
        data = json.loads(to_json(Tile.from_string("ab", index="x")))
        assert data == {'index': 'x', 'attributes': ['a', 'b']}

    def test_floor(self):
        """Floor nests neighbors under the anchor."""
        provider = TableGridProvider({"a": ["b"], "b": ["a"]}, labels={"a": "xy", "b": "xz"})
        builder = FloorBuilder(provider)
        data = json.loads(to_json(builder.floor(builder.tile("a"))))

        assert data['anchor']['index'] == 'a'
        assert data['neighbors'] == [{
            'tile': {'index': 'b', 'attributes': ['x', 'z']},
            'similarity': 0.5,
            'edge_index': 0,
        }]

    def test_path(self):
        """Path renders start and steps, without derived fields."""
        path = Path(
            start=Tile.from_string("ab", index="s"),
            steps=[Step(2, "t", 0.5)],
            state=ExplorationState.EXHAUSTED,
        )
        data = json.loads(to_json(path))
        assert set(data) == {'start', 'steps'}
        assert set(data['steps'][0]) == {'edge_index', 'index', 'similarity'}

    def test_config(self):
        """Configuration renders its three fields."""
        data = json.loads(to_json(ExplorerConfig(max_steps=5)))
        assert data == {'max_steps': 5, 'min_similarity': 0.0, 'stop_on_return': False}

    def test_numpy_and_enum(self):
        """numpy scalars and enums are converted."""
        data = json.loads(to_json({
            'mean': np.float64(0.5),
            'count': np.int64(3),
            'values': np.array([1, 2]),
            'state': ExplorationState.STUCK,
        }))
        assert data == {'mean': 0.5, 'count': 3, 'values': [1, 2], 'state': 'stuck'}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
