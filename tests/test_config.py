"""Tests for configuration handling"""
import pytest

from git_springclean.config import Config


class TestConfig:
    """Test Config defaults and validation."""

    def test_defaults(self):
        config = Config()

        assert config.root == "."
        assert config.check_modified and config.check_untracked and config.check_unpushed
        assert config.only_issues is False
        assert config.use_parallel is True

    @pytest.mark.parametrize("workers", [0, -3])
    def test_invalid_workers(self, workers):
        with pytest.raises(ValueError, match="workers must be positive"):
            Config(workers=workers)

    def test_empty_root(self):
        with pytest.raises(ValueError, match="root cannot be empty"):
            Config(root="  ")

    @pytest.mark.parametrize("option", ["sequential", "debug"])
    def test_sequential_modes(self, option):
        assert Config(**{option: True}).use_parallel is False

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"root": "src", "verbose": True, "stale_days": 30})

        assert config.root == "src"
        assert config.verbose is True

    def test_get_with_default(self):
        config = Config()

        assert config.get("check_unpushed") is True
        assert config.get("missing", 42) == 42

    def test_round_trip_through_dict(self):
        config = Config(root="x", workers=3, only_issues=True)

        assert Config.from_dict(config.to_dict()) == config
