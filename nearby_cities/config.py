"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- NC_GRAPH_SOURCE=csv
- NC_GRAPH_DATA_DIR=/path/to/data
- NC_GRAPH_DEFAULT_MAX_DISTANCE_KM=100
- NC_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """City graph data configuration.

    Environment variables prefixed with NC_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="NC_GRAPH_")

    source: Literal["sample", "csv"] = "sample"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    cities_file: str = "cities.csv"
    edges_file: str = "edges.csv"
    default_max_distance_km: float = Field(default=250.0, ge=0)

    @property
    def cities_path(self) -> Path:
        """Full path to cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with NC_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="NC_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.source)
        print(config.graph.default_max_distance_km)

    Environment variables prefixed with NC_.
    """

    model_config = SettingsConfigDict(env_prefix="NC_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
