"""Write reconciliation output as JSON files."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Any

from .translator import apply_records_to_bom, record_summary

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from bomcopyright.domain.model import PackageRecord
    from bomcopyright.domain.reconciliation import ReconciliationResult

log = getLogger(__name__)

UPDATED_BOM_FILENAME = "updatedBom.json"
LICENSE_TEXTS_FILENAME = "licenseTexts.json"
JSON_INDENT = 4


def _write_json(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False), encoding="utf-8")
    log.info("Wrote %s", path)
    return path


class JsonReportWriter:
    """Writes the updated BOM, the missing-values list and optional license texts."""

    def __init__(
        self,
        *,
        raw_bom: dict[str, Any],
        output_dir: Path,
        missing_values_path: Path,
    ) -> None:
        self.raw_bom = raw_bom
        self.output_dir = output_dir
        self.missing_values_path = missing_values_path

    def __call__(
        self,
        result: ReconciliationResult,
        *,
        unresolved: Sequence[PackageRecord],
        license_texts: Mapping[str, str],
    ) -> tuple[Path, ...]:
        updated = apply_records_to_bom(self.raw_bom, result.merged, result.appended)
        written = [
            _write_json(self.output_dir / UPDATED_BOM_FILENAME, updated),
            _write_json(self.missing_values_path, [record_summary(r) for r in unresolved]),
        ]
        if license_texts:
            written.append(
                _write_json(self.output_dir / LICENSE_TEXTS_FILENAME, dict(license_texts))
            )
        return tuple(written)
