"""Read CycloneDX JSON documents from disk."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .schema import Bom
from .translator import records_from_bom

if TYPE_CHECKING:
    from pathlib import Path

    from bomcopyright.domain.model import PackageRecord

log = getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({".json"})


class MalformedBomError(ValueError):
    """Raised when a BOM file is missing, not JSON, or not CycloneDX-shaped."""


def read_bom(path: Path) -> tuple[dict[str, Any], Bom]:
    """Return the raw document and its validated model."""

    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise MalformedBomError(
            f"Invalid file format of {path}. Currently only JSON files are supported."
        )
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MalformedBomError(f"BOM file {path} not found.") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedBomError(f"Unable to parse {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise MalformedBomError(f"Unable to parse {path}: top-level value is not an object.")

    try:
        bom = Bom.model_validate(raw)
    except ValidationError as exc:
        raise MalformedBomError(
            f"Unable to parse {path}. Please ensure that it has the correct format (CycloneDX)."
        ) from exc
    return raw, bom


def read_records(path: Path) -> tuple[dict[str, Any], list[PackageRecord]]:
    raw, bom = read_bom(path)
    records = records_from_bom(bom)
    log.info("Read %s components from %s", len(records), path)
    return raw, records


def read_local_records(path: Path | None) -> list[PackageRecord]:
    """Read user-supplied overrides; a missing file is ignored with a warning."""

    if path is None:
        return []
    if not path.exists():
        log.warning("Defaults file %s not found. Default values will be ignored.", path)
        return []
    _raw, records = read_records(path)
    return records
