"""GitHub configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_TIMEOUT_SECONDS = 20.0


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    token: str
    resilience: ResilienceConfig


def get_github_config(*, resilience: ResilienceConfig | None = None) -> GitHubConfig:
    values = require_env_vars(("GITHUB_TOKEN",))
    token = values["GITHUB_TOKEN"]

    return GitHubConfig(
        token=token,
        resilience=resilience
        or ResilienceConfig(
            name="github",
            base_url=GITHUB_API_BASE_URL,
            timeout_seconds=GITHUB_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            retry=RetryPolicy(total=3),
            # quota reads must never be served from a cache
            cache=None,
            default_headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
        ),
    )
