"""Resolve missing copyright notices by mining remote license and readme text.

Every record without a copyright gets its own task; all tasks run concurrently
and each mutates only its own record. Inside one record the external references
are tried strictly in order and the first notice found ends the scan.

The only shared state is the downloader's request quota. ``RateLimitGate`` reads
it before every request and, when it is exhausted, starts one process-wide
pause that every other task waits behind. The gate does not enforce the quota
itself; concurrent tasks may all see remaining quota and proceed.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from bomcopyright.domain.copyright import CopyrightExtractor
from bomcopyright.domain.ports.downloading import DownloadError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bomcopyright.domain.model import PackageRecord
    from bomcopyright.domain.ports.downloading import Downloader, RateLimitStatus

log = getLogger(__name__)

QUOTA_GRACE_SECONDS = 10.0

type ProgressCallback = Callable[[int, int], None]
type Sleep = Callable[[float], Awaitable[None]]


@dataclass(slots=True)
class RateLimitGate:
    """Process-wide read-then-wait gate in front of remote requests."""

    downloader: Downloader
    clock: Callable[[], float] = time.time
    sleep: Sleep = asyncio.sleep
    grace_seconds: float = QUOTA_GRACE_SECONDS
    _resume: asyncio.Event | None = field(default=None, init=False)

    @property
    def paused(self) -> bool:
        return self._resume is not None

    def wait_seconds(self, status: RateLimitStatus) -> float:
        return abs(status.reset_epoch_seconds - self.clock()) + self.grace_seconds

    async def acquire(self) -> None:
        """Return once a request may be sent, pausing everyone if the quota is spent."""

        while self._resume is not None:
            await self._resume.wait()

        status = await self.downloader.remaining_quota()
        if not status.exhausted:
            return

        if self._resume is not None:
            await self._resume.wait()
            return

        wait = self.wait_seconds(status)
        log.warning("Request limit reached. Waiting for %.0f seconds.", wait)
        resume = asyncio.Event()
        self._resume = resume
        try:
            await self.sleep(wait)
        finally:
            self._resume = None
            resume.set()


@dataclass(slots=True)
class CopyrightResolutionResult:
    attempted: int
    resolved: list[PackageRecord] = field(default_factory=list["PackageRecord"])
    unresolved: list[PackageRecord] = field(default_factory=list["PackageRecord"])


@dataclass(slots=True)
class CopyrightResolver:
    downloader: Downloader
    extractor: CopyrightExtractor = field(default_factory=CopyrightExtractor)
    gate: RateLimitGate | None = None
    on_progress: ProgressCallback | None = None
    _gate: RateLimitGate = field(init=False)

    def __post_init__(self) -> None:
        self._gate = self.gate or RateLimitGate(self.downloader)

    def __call__(self, records: Iterable[PackageRecord]) -> CopyrightResolutionResult:
        return asyncio.run(self.resolve_all(records))

    async def resolve_all(self, records: Iterable[PackageRecord]) -> CopyrightResolutionResult:
        pending = [record for record in records if not record.copyright]
        total = len(pending)
        log.info("Retrieving license information for %s packages", total)

        tasks = [asyncio.create_task(self.resolve_record(record)) for record in pending]
        done = 0
        for finished in asyncio.as_completed(tasks):
            await finished
            done += 1
            if self.on_progress is not None:
                self.on_progress(done, total)

        resolved = [record for record in pending if record.copyright]
        unresolved = [record for record in pending if not record.copyright]
        log.info(
            "Copyright resolution finished: attempted=%s, resolved=%s, unresolved=%s",
            total,
            len(resolved),
            len(unresolved),
        )
        return CopyrightResolutionResult(attempted=total, resolved=resolved, unresolved=unresolved)

    async def resolve_record(self, record: PackageRecord) -> None:
        if not record.has_external_references:
            log.info("No external references found for: %s", record)
            return

        for url in record.external_references:
            if record.copyright:
                break
            try:
                await self._gate.acquire()
                license_text, readme_text = await self.downloader.fetch_license_and_readme(url)
            except DownloadError as exc:
                log.warning("Skipping %s for %s: %s", url, record, exc)
                continue
            self._absorb(record, license_text=license_text, readme_text=readme_text)

        if not record.copyright:
            log.info("Unable to extract copyright notice for: %s", record)

    def _absorb(self, record: PackageRecord, *, license_text: str, readme_text: str) -> None:
        if license_text:
            record.raw_license_texts.append(license_text)
            record.resolve_copyright(self.extractor.parse(license_text))
        if readme_text:
            record.readme_text = readme_text
            if not record.copyright:
                record.resolve_copyright(self.extractor.parse(readme_text))
