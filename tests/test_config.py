"""Tests for configuration management system."""

import pytest
import tempfile
import shutil
from pathlib import Path
from omegaconf import DictConfig, OmegaConf

from splitsolver.config import (
    ConfigManager, load_config, default_config_dir, validate_config, ConfigValidationError
)
from splitsolver.config.config_manager import CONFIG_DIR_ENV, PACKAGE_CONFIG_DIR
from splitsolver.config.validators import (
    validate_search_config, validate_scaling_config, validate_parameter_ranges
)


class TestConfigManager:
    """Test ConfigManager functionality."""

    @pytest.fixture
    def temp_config_dir(self):
        """Create temporary configuration directory."""
        temp_dir = tempfile.mkdtemp()
        config_dir = Path(temp_dir) / "conf"
        config_dir.mkdir()

        config_content = """
solver:
  name: "test-solver"

scaling:
  factor: 1000

search:
  max_depth: 4
  statistics_tracking: true
"""

        config_file = config_dir / "config.yaml"
        with open(config_file, 'w') as f:
            f.write(config_content)

        yield config_dir

        shutil.rmtree(temp_dir)

    def test_config_manager_initialization(self, temp_config_dir):
        """Test ConfigManager initialization."""
        manager = ConfigManager(temp_config_dir)
        assert manager.config_dir.resolve() == temp_config_dir.resolve()
        assert manager.config is None

    def test_missing_config_dir(self, tmp_path):
        """Test that a missing directory is reported."""
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "does-not-exist")

    def test_load_config_basic(self, temp_config_dir):
        """Test basic configuration loading."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()

        assert isinstance(config, DictConfig)
        assert config.solver.name == "test-solver"
        assert config.search.max_depth == 4
        assert manager.config is config

    def test_load_config_with_overrides(self, temp_config_dir):
        """Test configuration loading with overrides."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config(overrides=["search.max_depth=2", "scaling.factor=100"])

        assert config.search.max_depth == 2
        assert config.scaling.factor == 100

    def test_load_config_invalid_override(self, temp_config_dir):
        """Test that validation rejects out-of-range overrides."""
        manager = ConfigManager(temp_config_dir)
        with pytest.raises(ConfigValidationError):
            manager.load_config(overrides=["search.max_depth=-1"])

    def test_load_config_without_validation(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config(overrides=["search.max_depth=-1"], validate=False)
        assert config.search.max_depth == -1

    def test_module_load_config(self, temp_config_dir):
        """Test the module-level loader with an explicit directory."""
        config = load_config(config_dir=temp_config_dir, overrides=["search.max_depth=1"])

        assert config.search.max_depth == 1
        assert config.solver.name == "test-solver"

    def test_env_dir_used_by_default(self, temp_config_dir, monkeypatch):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(temp_config_dir))
        assert load_config().solver.name == "test-solver"

    def test_default_config_dir_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        assert default_config_dir() == tmp_path

    def test_default_config_dir_is_packaged(self, monkeypatch):
        """Test that the fallback directory lives inside the installed package."""
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)

        config_dir = default_config_dir()
        assert config_dir == PACKAGE_CONFIG_DIR
        assert config_dir.parent.name == "splitsolver"
        assert (config_dir / "config.yaml").is_file()


class TestShippedConfig:
    """Test the configuration shipped inside the package."""

    def test_shipped_config_is_valid(self, monkeypatch):
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
        config = load_config()

        assert config.search.max_depth == 6
        assert config.scaling.factor == 1000
        assert config.search.statistics_tracking is True


class TestValidators:
    """Test configuration validators."""

    def test_valid_config(self):
        config = OmegaConf.create({
            'solver': {'name': 'split-solver'},
            'scaling': {'factor': 1000},
            'search': {'max_depth': 6, 'statistics_tracking': True},
        })
        validate_config(config)

    def test_empty_sections_allowed(self):
        validate_config(OmegaConf.create({}))

    @pytest.mark.parametrize("max_depth", [-1, 13, 2.5, True, "6"])
    def test_invalid_max_depth(self, max_depth):
        with pytest.raises(ConfigValidationError):
            validate_search_config(OmegaConf.create({'max_depth': max_depth}))

    def test_invalid_statistics_tracking(self):
        with pytest.raises(ConfigValidationError):
            validate_search_config(OmegaConf.create({'max_depth': 6, 'statistics_tracking': 'yes'}))

    @pytest.mark.parametrize("factor", [0, -10, 1.5])
    def test_invalid_factor(self, factor):
        with pytest.raises(ConfigValidationError):
            validate_scaling_config(OmegaConf.create({'factor': factor}))

    def test_invalid_solver_name(self):
        with pytest.raises(ConfigValidationError):
            validate_config(OmegaConf.create({'solver': {'name': ''}}))

    def test_parameter_range_warnings(self):
        config = OmegaConf.create({
            'scaling': {'factor': 10},
            'search': {'max_depth': 9},
        })
        warnings = validate_parameter_ranges(config)

        assert len(warnings) == 2
        assert any('max_depth' in w for w in warnings)
        assert any('scaling.factor' in w for w in warnings)

    def test_no_warnings_for_defaults(self):
        config = OmegaConf.create({
            'scaling': {'factor': 1000},
            'search': {'max_depth': 6},
        })
        assert validate_parameter_ranges(config) == []
