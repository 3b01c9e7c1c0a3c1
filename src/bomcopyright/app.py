"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from bomcopyright.adapters.cyclonedx import JsonReportWriter, read_local_records, read_records
from bomcopyright.adapters.github import GitHubDownloader
from bomcopyright.adapters.pdf import PdfReportWriter
from bomcopyright.adapters.spdx import SpdxLicenseCatalog
from bomcopyright.config.storage import DEFAULT_MISSING_VALUES_FILENAME, DEFAULT_OUTPUT_DIR
from bomcopyright.domain.copyright_resolution import CopyrightResolutionResult, CopyrightResolver
from bomcopyright.domain.licenses import collect_license_texts
from bomcopyright.domain.reconciliation import reconcile

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bomcopyright.domain.copyright_resolution import ProgressCallback
    from bomcopyright.domain.model import PackageRecord
    from bomcopyright.domain.ports import Downloader, LicenseCatalog, ReportSink


log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class BomReconciliationRequest:
    bom_path: Path
    local_path: Path | None = None
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    missing_values_path: Path | None = None
    pdf_path: Path | None = None
    download: bool = True
    license_texts: bool = False

    @property
    def effective_missing_values_path(self) -> Path:
        return self.missing_values_path or self.output_dir / DEFAULT_MISSING_VALUES_FILENAME


@dataclass(slots=True)
class BomReconciliationReport:
    components: int
    resolved_copyrights: int
    appended: list[PackageRecord] = field(default_factory=list["PackageRecord"])
    conflicts: list[str] = field(default_factory=list[str])
    unresolved: list[PackageRecord] = field(default_factory=list["PackageRecord"])
    written: tuple[Path, ...] = ()


def resolve_copyrights(
    records: Sequence[PackageRecord],
    *,
    downloader: Downloader | None = None,
    on_progress: ProgressCallback | None = None,
) -> CopyrightResolutionResult:
    """Mine copyright notices for every record that does not have one yet."""

    return asyncio.run(
        _resolve_copyrights_async(records, downloader=downloader, on_progress=on_progress)
    )


async def _resolve_copyrights_async(
    records: Sequence[PackageRecord],
    *,
    downloader: Downloader | None,
    on_progress: ProgressCallback | None,
) -> CopyrightResolutionResult:
    if downloader is not None:
        resolver = CopyrightResolver(downloader, on_progress=on_progress)
        return await resolver.resolve_all(records)
    async with GitHubDownloader() as github:
        resolver = CopyrightResolver(github, on_progress=on_progress)
        return await resolver.resolve_all(records)


def collect_unresolved(records: Sequence[PackageRecord]) -> list[PackageRecord]:
    unresolved: list[PackageRecord] = []
    for record in records:
        if record.copyright:
            continue
        log.warning("Failed to collect the necessary information for %s", record)
        unresolved.append(record)
    return unresolved


def reconcile_bom(
    request: BomReconciliationRequest,
    *,
    downloader: Downloader | None = None,
    catalog: LicenseCatalog | None = None,
    writer: ReportSink | None = None,
    on_progress: ProgressCallback | None = None,
) -> BomReconciliationReport:
    """Run the full pipeline: read, mine copyrights, merge local data, write reports.

    Malformed input aborts before anything is written. Missing local override files
    are ignored, and records whose copyright cannot be resolved are reported rather
    than treated as errors.
    """

    raw_bom, generated = read_records(request.bom_path)
    local = read_local_records(request.local_path)
    log.info(
        "Starting reconciliation: bom=%s, components=%s, local=%s, download=%s",
        request.bom_path,
        len(generated),
        len(local),
        request.download,
    )

    if request.download:
        resolve_copyrights(generated, downloader=downloader, on_progress=on_progress)

    result = reconcile(local, generated)
    unresolved = collect_unresolved(result.merged)

    license_texts: dict[str, str] = {}
    if request.license_texts:
        license_texts = collect_license_texts(
            [*result.merged, *result.appended],
            catalog or SpdxLicenseCatalog(),
        )

    sinks: list[ReportSink] = [
        writer
        or JsonReportWriter(
            raw_bom=raw_bom,
            output_dir=request.output_dir,
            missing_values_path=request.effective_missing_values_path,
        )
    ]
    if request.pdf_path is not None:
        sinks.append(PdfReportWriter(path=request.pdf_path))

    written: tuple[Path, ...] = ()
    for sink in sinks:
        written += sink(result, unresolved=unresolved, license_texts=license_texts)

    report = BomReconciliationReport(
        components=len(result.merged),
        resolved_copyrights=len(result.merged) - len(unresolved),
        appended=list(result.appended),
        conflicts=list(result.conflicts),
        unresolved=unresolved,
        written=written,
    )
    log.info(
        "Finished reconciliation: components=%s, with_copyright=%s, appended=%s, "
        "conflicts=%s, unresolved=%s",
        report.components,
        report.resolved_copyrights,
        len(report.appended),
        len(report.conflicts),
        len(report.unresolved),
    )
    return report
