"""Ports for rendering reconciliation output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from bomcopyright.domain.model import PackageRecord
    from bomcopyright.domain.reconciliation import ReconciliationResult


class ReportSink(Protocol):
    """Consume a reconciliation result and write output artifacts."""

    def __call__(
        self,
        result: ReconciliationResult,
        *,
        unresolved: Sequence[PackageRecord],
        license_texts: Mapping[str, str],
    ) -> tuple[Path, ...]: ...


__all__ = ["ReportSink"]
