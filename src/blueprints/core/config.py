"""
blueprints.core.config - Configuration Management
===================================================

Configuration can be loaded from multiple sources with the following
priority (highest first):

    1. Explicit constructor arguments (including values read from YAML)
    2. Environment variables (prefixed with BLUEPRINTS_)
    3. Default values defined in the models below

Architecture Context:
    The configuration is read once at startup by the facade, which uses it
    to pick the persistence backend and the active filter. Neither choice
    changes for the lifetime of the process:

        BlueprintsConfig
            ├── filter_type        → filters.create_filter()
            ├── PersistenceConfig  → persistence.create_persistence()
            └── log_level          → configure_logging()

Usage:
    # Load from environment variables:
    config = BlueprintsConfig()

    # Load from YAML file:
    config = load_config("blueprints.yaml")

    # Explicit overrides:
    config = BlueprintsConfig(filter_type="redundancy")

Environment Variables:
    BLUEPRINTS_LOG_LEVEL=DEBUG
    BLUEPRINTS_FILTER_TYPE=undersampling
    BLUEPRINTS_PERSISTENCE__BACKEND=relational
    BLUEPRINTS_PERSISTENCE__DATABASE_PATH=/var/lib/blueprints/blueprints.db
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from blueprints.core.enums import FilterType, PersistenceBackend
from blueprints.core.exceptions import ConfigurationError


# =============================================================================
# Persistence Configuration
# =============================================================================
class PersistenceConfig(BaseModel):
    """Configuration for blueprint storage.

    Attributes:
        backend: Which BlueprintPersistence implementation to build.
        database_path: SQLite database file used by the relational backend.
            ":memory:" gives a throwaway database (useful in tests).
        seed_sample_data: Whether the in-memory backend starts with the
            john/house, john/garage and jane/garden starter blueprints.
    """

    backend: PersistenceBackend = Field(
        default=PersistenceBackend.IN_MEMORY,
        description="Storage backend: 'in_memory' or 'relational'",
    )
    database_path: str = Field(
        default="blueprints.db",
        min_length=1,
        description="SQLite database path for the relational backend",
    )
    seed_sample_data: bool = Field(
        default=True,
        description="Pre-load the starter dataset into the in-memory backend",
    )


# =============================================================================
# Main Configuration
# =============================================================================
# Environment Variable Mapping:
#   BLUEPRINTS_LOG_LEVEL               → config.log_level
#   BLUEPRINTS_FILTER_TYPE             → config.filter_type
#   BLUEPRINTS_PERSISTENCE__BACKEND    → config.persistence.backend
# =============================================================================
class BlueprintsConfig(BaseSettings):
    """Top-level configuration for the blueprints service.

    Attributes:
        environment: Deployment environment.
        log_level: Logging level for structlog output.
        filter_type: The filter applied to every blueprint read. Chosen
            once here, never switched while the process runs.
        persistence: Storage configuration (see PersistenceConfig).

    Example:
        >>> config = BlueprintsConfig(
        ...     filter_type=FilterType.REDUNDANCY,
        ...     persistence=PersistenceConfig(backend="relational"),
        ... )
    """

    environment: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    filter_type: FilterType = Field(
        default=FilterType.IDENTITY,
        description="Active read filter: identity, redundancy or undersampling",
    )
    persistence: PersistenceConfig = Field(
        default_factory=PersistenceConfig,
        description="Blueprint storage configuration",
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------
    #   - env_prefix: All env vars start with "BLUEPRINTS_"
    #   - env_nested_delimiter: "__" reaches into nested configs
    # -------------------------------------------------------------------------
    model_config = {
        "env_prefix": "BLUEPRINTS_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }


# =============================================================================
# Configuration Loader
# =============================================================================
def load_config(path: Optional[str] = None) -> BlueprintsConfig:
    """Load configuration from a YAML file and/or environment variables.

    Args:
        path: Path to a YAML configuration file. If None, looks for
            'blueprints.yaml' in the current directory and falls back to
            defaults plus environment variables when it isn't there.

    Returns:
        A fully validated BlueprintsConfig instance.

    Raises:
        FileNotFoundError: If an explicit path is provided but doesn't exist.
        ConfigurationError: If the YAML document is not a mapping.
    """
    if path is None:
        default_path = Path("blueprints.yaml")
        if default_path.exists():
            path = str(default_path)

    yaml_data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(config_path) as f:
            raw_data = yaml.safe_load(f)

        if isinstance(raw_data, dict):
            yaml_data = raw_data
        elif raw_data is not None:
            raise ConfigurationError(
                message=f"Configuration file must contain a mapping: {path}",
                error_code="INVALID_CONFIG_FILE",
                details={"path": str(path), "type": type(raw_data).__name__},
            )

    return BlueprintsConfig(**yaml_data)


def get_default_config() -> BlueprintsConfig:
    """Create a BlueprintsConfig from defaults and environment variables."""
    return BlueprintsConfig()
