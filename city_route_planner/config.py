"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.

Configuration can be overridden via environment variables:
- CRP_GRAPH_REJECT_NEGATIVE_WEIGHTS=false
- CRP_LOG_LEVEL=DEBUG
- CRP_LOG_STRUCTURED=true
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Road network configuration.

    Environment variables prefixed with CRP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CRP_GRAPH_")

    # Dijkstra's result is meaningless with negative distances
    reject_negative_weights: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with CRP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CRP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.reject_negative_weights)
        print(config.observability.level)

    Environment variables prefixed with CRP_.
    """

    model_config = SettingsConfigDict(env_prefix="CRP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
