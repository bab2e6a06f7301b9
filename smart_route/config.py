"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- SRF_GRAPH_DIRECTED=true
- SRF_HISTORY_RECENT_LIMIT=20
- SRF_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road network configuration.

    Environment variables prefixed with SRF_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SRF_GRAPH_")

    directed: bool = False


class HistoryConfig(BaseSettings):
    """Route history configuration.

    Environment variables prefixed with SRF_HISTORY_.
    """

    model_config = SettingsConfigDict(env_prefix="SRF_HISTORY_")

    recent_limit: int = Field(default=10, ge=1)
    max_entries: Optional[int] = Field(default=None, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SRF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SRF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.directed)
        print(config.history.recent_limit)

    Environment variables prefixed with SRF_.
    """

    model_config = SettingsConfigDict(env_prefix="SRF_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
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
