"""PDF adapter for human-readable reconciliation reports."""

from __future__ import annotations

from .writer import PdfReportWriter, component_row

__all__ = ["PdfReportWriter", "component_row"]
