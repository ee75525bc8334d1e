"""
Tests for blueprints.core.config
==================================

These tests verify that the configuration system works correctly:
    - Default values allow zero-config startup
    - Environment variables override defaults
    - YAML files are parsed correctly
    - Validation catches invalid values
"""

import pytest
import yaml
from pydantic import ValidationError

from blueprints.core.config import (
    BlueprintsConfig,
    PersistenceConfig,
    get_default_config,
    load_config,
)
from blueprints.core.enums import FilterType, PersistenceBackend
from blueprints.core.exceptions import ConfigurationError


# =============================================================================
# Test: Default Configuration
# =============================================================================
class TestDefaultConfig:
    """Tests for default configuration values."""

    def test_default_filter_is_identity(self) -> None:
        """Zero-config startup serves unfiltered blueprints."""
        assert BlueprintsConfig().filter_type == FilterType.IDENTITY

    def test_default_persistence_is_in_memory(self) -> None:
        """Default storage is the seeded in-memory store."""
        config = BlueprintsConfig()
        assert config.persistence.backend == PersistenceBackend.IN_MEMORY
        assert config.persistence.seed_sample_data is True
        assert config.persistence.database_path == "blueprints.db"

    def test_default_environment_and_log_level(self) -> None:
        config = BlueprintsConfig()
        assert config.environment == "dev"
        assert config.log_level == "INFO"

    def test_get_default_config(self) -> None:
        assert isinstance(get_default_config(), BlueprintsConfig)


# =============================================================================
# Test: Explicit Values and Validation
# =============================================================================
class TestExplicitConfig:
    """Tests for constructor arguments and validation."""

    def test_filter_from_string(self) -> None:
        """A plain string is coerced to FilterType."""
        config = BlueprintsConfig(filter_type="undersampling")
        assert config.filter_type == FilterType.UNDERSAMPLING

    def test_unknown_filter_rejected(self) -> None:
        """An unknown filter name fails validation."""
        with pytest.raises(ValidationError):
            BlueprintsConfig(filter_type="smoothing")

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PersistenceConfig(backend="mongodb")

    def test_invalid_environment_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BlueprintsConfig(environment="qa")

    def test_nested_persistence(self) -> None:
        """PersistenceConfig nests under the persistence field."""
        config = BlueprintsConfig(
            persistence=PersistenceConfig(backend="relational", database_path=":memory:")
        )
        assert config.persistence.backend == PersistenceBackend.RELATIONAL
        assert config.persistence.database_path == ":memory:"


# =============================================================================
# Test: Environment Variables
# =============================================================================
class TestEnvironmentConfig:
    """Tests for BLUEPRINTS_* environment variable loading."""

    def test_filter_from_env(self, monkeypatch) -> None:
        """BLUEPRINTS_FILTER_TYPE selects the filter."""
        monkeypatch.setenv("BLUEPRINTS_FILTER_TYPE", "redundancy")
        assert BlueprintsConfig().filter_type == FilterType.REDUNDANCY

    def test_nested_backend_from_env(self, monkeypatch) -> None:
        """Double underscore reaches nested persistence fields."""
        monkeypatch.setenv("BLUEPRINTS_PERSISTENCE__BACKEND", "relational")
        monkeypatch.setenv("BLUEPRINTS_PERSISTENCE__DATABASE_PATH", "/tmp/bp.db")
        config = BlueprintsConfig()
        assert config.persistence.backend == PersistenceBackend.RELATIONAL
        assert config.persistence.database_path == "/tmp/bp.db"

    def test_log_level_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("BLUEPRINTS_LOG_LEVEL", "DEBUG")
        assert BlueprintsConfig().log_level == "DEBUG"


# =============================================================================
# Test: YAML Loading
# =============================================================================
class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_from_yaml(self, tmp_path) -> None:
        """Values in a YAML file override the defaults."""
        path = tmp_path / "blueprints.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "filter_type": "undersampling",
                    "persistence": {"backend": "relational", "database_path": "x.db"},
                }
            )
        )
        config = load_config(str(path))
        assert config.filter_type == FilterType.UNDERSAMPLING
        assert config.persistence.backend == PersistenceBackend.RELATIONAL
        assert config.persistence.database_path == "x.db"

    def test_missing_explicit_file(self, tmp_path) -> None:
        """An explicit path that does not exist is an error, not a silent default."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_non_mapping_yaml_rejected(self, tmp_path) -> None:
        """A YAML list is not a valid configuration."""
        path = tmp_path / "blueprints.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))
        assert exc_info.value.error_code == "INVALID_CONFIG_FILE"

    def test_empty_yaml_uses_defaults(self, tmp_path) -> None:
        """An empty file behaves like no file."""
        path = tmp_path / "blueprints.yaml"
        path.write_text("")
        assert load_config(str(path)).filter_type == FilterType.IDENTITY

    def test_auto_detects_file_in_cwd(self, tmp_path, monkeypatch) -> None:
        """blueprints.yaml in the working directory is picked up without a path."""
        (tmp_path / "blueprints.yaml").write_text("filter_type: redundancy\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().filter_type == FilterType.REDUNDANCY

    def test_no_file_in_cwd_uses_defaults(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_config().filter_type == FilterType.IDENTITY
