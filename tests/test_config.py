"""
Tests for configuration loading and generated weight sequences.
"""

import pytest

from boxgame.core.config_loader import load_config, get_config, reload_config
from boxgame.core.rng import WeightSequence, generate_weights


@pytest.fixture
def config():
    return load_config()


def _write_config(tmp_path, text):
    path = tmp_path / "game_config.yaml"
    path.write_text(text)
    return str(path)


class TestConfigLoader:
    """Test game_config.yaml parsing and validation."""

    def test_default_config_loads(self, config):
        assert config.rng.sequence_length > 0
        assert 0 <= config.rng.min_weight <= config.rng.max_weight
        assert config.display.score_precision >= 0

    def test_bundled_scenarios(self, config):
        assert config.get_scenario("fibonacci4") == (1, 1, 2, 3)
        assert config.get_scenario("fibonacci8") == (1, 1, 2, 3, 5, 8, 13, 21)
        assert "single" in config.scenario_names

    def test_unknown_scenario(self, config):
        with pytest.raises(ValueError):
            config.get_scenario("does_not_exist")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_defaults_for_missing_sections(self, tmp_path):
        config = load_config(_write_config(tmp_path, "scenarios:\n  one: [1]\n"))

        assert config.rng.sequence_length == 16
        assert config.rng.max_weight == 100
        assert config.scenarios == {"one": (1,)}

    def test_max_below_min_rejected(self, tmp_path):
        path = _write_config(tmp_path, "rng:\n  min_weight: 10\n  max_weight: 5\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_negative_length_rejected(self, tmp_path):
        path = _write_config(tmp_path, "rng:\n  sequence_length: -1\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_negative_scenario_weight_rejected(self, tmp_path):
        path = _write_config(tmp_path, "scenarios:\n  bad: [1, -2]\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_non_integer_scenario_weight_rejected(self, tmp_path):
        path = _write_config(tmp_path, "scenarios:\n  bad: [1.5]\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_config_is_immutable(self, config):
        with pytest.raises(Exception):
            config.rng.max_weight = 1

    def test_cached_config(self, tmp_path):
        path = _write_config(tmp_path, "rng:\n  max_weight: 7\n")

        try:
            assert reload_config(path).rng.max_weight == 7
            assert get_config().rng.max_weight == 7
        finally:
            reload_config()


class TestWeightSequence:
    """Test seeded input generation."""

    def test_deterministic_with_seed(self, config):
        """Same seed should produce same sequence."""
        assert generate_weights(42, 50, config) == generate_weights(42, 50, config)

    def test_different_seeds_differ(self, config):
        assert generate_weights(42, 50, config) != generate_weights(123, 50, config)

    def test_weights_within_bounds(self, config):
        for w in generate_weights(42, 500, config):
            assert config.rng.min_weight <= w <= config.rng.max_weight
            assert isinstance(w, int)

    def test_default_length(self, config):
        assert len(WeightSequence(config, seed=1).generate()) == config.rng.sequence_length

    def test_zero_length(self, config):
        assert WeightSequence(config, seed=1).generate(0) == []

    def test_negative_length_rejected(self, config):
        with pytest.raises(ValueError):
            WeightSequence(config, seed=1).generate(-1)

    def test_reset_restores_sequence(self, config):
        seq = WeightSequence(config, seed=9)
        initial = seq.generate(10)

        seq.reset()

        assert seq.generate(10) == initial

    def test_reset_with_new_seed(self, config):
        seq = WeightSequence(config, seed=9)
        seq.reset(seed=10)

        assert seq.seed == 10
        assert seq.generate(10) == generate_weights(10, 10, config)
