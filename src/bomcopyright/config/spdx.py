"""SPDX license list configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

SPDX_LICENSE_LIST_URL = "https://spdx.org/licenses/licenses.json"
SPDX_TIMEOUT_SECONDS = 20.0
SPDX_CACHE_TTL_SECONDS = 7 * 24 * 60 * 60.0


@dataclass(frozen=True, slots=True)
class SpdxConfig:
    license_list_url: str
    resilience: ResilienceConfig


def get_spdx_config(*, resilience: ResilienceConfig | None = None) -> SpdxConfig:
    return SpdxConfig(
        license_list_url=SPDX_LICENSE_LIST_URL,
        resilience=resilience
        or ResilienceConfig(
            name="spdx",
            timeout_seconds=SPDX_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            retry=RetryPolicy(total=4),
            cache=CacheConfig(
                enabled=True,
                backend="sqlite",
                default_ttl_seconds=SPDX_CACHE_TTL_SECONDS,
            ),
        ),
    )
