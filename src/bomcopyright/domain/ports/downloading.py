"""Ports for downloading license and readme text from remote repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class RateLimitStatus:
    """Remaining request quota and the epoch second at which it resets."""

    remaining: int
    reset_epoch_seconds: int

    @property
    def exhausted(self) -> bool:
        return self.remaining < 1


class DownloadError(RuntimeError):
    """Raised by downloaders when a reference cannot be fetched."""


@runtime_checkable
class Downloader(Protocol):
    async def remaining_quota(self) -> RateLimitStatus: ...

    async def fetch_license_and_readme(self, url: str) -> tuple[str, str]:
        """Return ``(license_text, readme_text)``; either is ``""`` when not found."""
        ...


__all__ = ["DownloadError", "Downloader", "RateLimitStatus"]
