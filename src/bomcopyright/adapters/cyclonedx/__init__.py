"""CycloneDX adapter: read BOM JSON into records and write updated documents."""

from __future__ import annotations

from .reader import MalformedBomError, read_bom, read_local_records, read_records
from .schema import Bom, Component
from .translator import (
    apply_records_to_bom,
    parse_component,
    record_summary,
    record_to_component,
    records_from_bom,
)
from .writer import JsonReportWriter

__all__ = [
    "Bom",
    "Component",
    "JsonReportWriter",
    "MalformedBomError",
    "apply_records_to_bom",
    "parse_component",
    "read_bom",
    "read_local_records",
    "read_records",
    "record_summary",
    "record_to_component",
    "records_from_bom",
]
