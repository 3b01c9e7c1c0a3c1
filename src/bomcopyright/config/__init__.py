"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .github import GitHubConfig, get_github_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .spdx import SpdxConfig, get_spdx_config
from .storage import (
    DEFAULT_MISSING_VALUES_FILENAME,
    DEFAULT_OUTPUT_DIR,
    StorageConfig,
    get_http_cache_path,
    get_storage_config,
)

__all__ = [
    "DEFAULT_MISSING_VALUES_FILENAME",
    "DEFAULT_OUTPUT_DIR",
    "CacheConfig",
    "ConfigurationError",
    "GitHubConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpdxConfig",
    "StorageConfig",
    "configure_logging",
    "get_github_config",
    "get_http_cache_path",
    "get_spdx_config",
    "get_storage_config",
    "optional_env_var",
    "require_env_vars",
]
