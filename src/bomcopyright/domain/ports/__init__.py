"""Domain port definitions for adapters."""

from __future__ import annotations

from .downloading import Downloader, DownloadError, RateLimitStatus
from .licenses import LicenseCatalog
from .reporting import ReportSink

__all__ = [
    "DownloadError",
    "Downloader",
    "LicenseCatalog",
    "RateLimitStatus",
    "ReportSink",
]
