"""GitHub downloader for license and readme text."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from bomcopyright.adapters.http_resilience import ResilientClient, default_client_factory
from bomcopyright.config.github import GitHubConfig, get_github_config
from bomcopyright.domain.ports.downloading import Downloader, DownloadError, RateLimitStatus

from .schema import ContentResponse, GitHubBaseModel, RateLimitResponse
from .translator import ContentDecodingError, decode_content, parse_repository_url

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from bomcopyright.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class GitHubAPIError(DownloadError):
    """Raised when the GitHub API fails or returns an unexpected payload."""


@dataclass(slots=True)
class GitHubDownloader:
    """Fetch repository license and readme text through the GitHub REST API.

    One HTTP client is shared by all concurrent requests so that the client-side
    rate limiter sees every call. Use as an async context manager, or call
    ``aclose`` once done.
    """

    config: GitHubConfig = field(default_factory=get_github_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=default_client_factory
    )
    _client: ResilientClient | None = field(default=None, init=False)

    async def __aenter__(self) -> GitHubDownloader:
        self._open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def remaining_quota(self) -> RateLimitStatus:
        response = await self._get("/rate_limit")
        payload = self._validate(RateLimitResponse, response)
        core = payload.resources.core
        return RateLimitStatus(remaining=core.remaining, reset_epoch_seconds=core.reset)

    async def fetch_license_and_readme(self, url: str) -> tuple[str, str]:
        repository = parse_repository_url(url)
        if repository is None:
            log.debug("Not a GitHub repository URL: %s", url)
            return "", ""
        owner, repo = repository
        license_text = await self._fetch_content(f"/repos/{owner}/{repo}/license")
        readme_text = await self._fetch_content(f"/repos/{owner}/{repo}/readme")
        return license_text, readme_text

    async def _fetch_content(self, path: str) -> str:
        response = await self._get(path, allow_missing=True)
        if response.status_code == httpx.codes.NOT_FOUND:
            log.debug("GitHub resource not found: %s", path)
            return ""
        payload = self._validate(ContentResponse, response)
        try:
            return decode_content(payload)
        except ContentDecodingError as exc:
            raise GitHubAPIError(str(exc)) from exc

    async def _get(self, path: str, *, allow_missing: bool = False) -> httpx.Response:
        client = self._open()
        try:
            response = await client.get(path)
        except httpx.HTTPError as exc:
            raise GitHubAPIError(f"GitHub request {path} failed: {exc}") from exc
        if allow_missing and response.status_code == httpx.codes.NOT_FOUND:
            return response
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise GitHubAPIError(
                f"GitHub request {path} failed with status {response.status_code}"
            ) from exc
        return response

    def _open(self) -> ResilientClient:
        if self._client is None:
            self._client = self.client_factory(self.config.resilience)
        return self._client

    @staticmethod
    def _validate[T: GitHubBaseModel](model: type[T], response: httpx.Response) -> T:
        try:
            return model.model_validate(response.json())
        except ValueError as exc:  # includes pydantic.ValidationError
            raise GitHubAPIError(f"Unexpected GitHub response payload for {response.url}") from exc


if TYPE_CHECKING:
    _downloader_check: Downloader = GitHubDownloader()
