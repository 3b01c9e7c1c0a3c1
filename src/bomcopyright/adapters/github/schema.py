"""Pydantic models describing the GitHub REST payloads we consume."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GitHubBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RateResource(GitHubBaseModel):
    limit: int
    remaining: int
    reset: int
    used: int | None = None


class RateLimitResources(GitHubBaseModel):
    core: RateResource


class RateLimitResponse(GitHubBaseModel):
    resources: RateLimitResources


class ContentLicense(GitHubBaseModel):
    key: str | None = None
    spdx_id: str | None = None
    name: str | None = None


class ContentResponse(GitHubBaseModel):
    """Shared shape of the ``/license`` and ``/readme`` endpoints."""

    name: str | None = None
    path: str | None = None
    content: str = ""
    encoding: str = "base64"
    license: ContentLicense | None = None
