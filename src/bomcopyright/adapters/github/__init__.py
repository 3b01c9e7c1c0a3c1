"""GitHub adapter for license and readme downloads."""

from __future__ import annotations

from .client import GitHubAPIError, GitHubDownloader
from .schema import ContentResponse, RateLimitResponse
from .translator import decode_content, parse_repository_url

__all__ = [
    "ContentResponse",
    "GitHubAPIError",
    "GitHubDownloader",
    "RateLimitResponse",
    "decode_content",
    "parse_repository_url",
]
