"""Render the reconciled component list and license texts as a PDF report.

The first page holds a grid table of every merged and appended component. Each
collected license text follows on its own page, titled with its SPDX id. The
built-in PDF fonts only cover Latin-1, so other characters are replaced.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.enums import XPos, YPos

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from bomcopyright.domain.model import PackageRecord
    from bomcopyright.domain.reconciliation import ReconciliationResult

log = getLogger(__name__)

TABLE_HEADINGS = ("Group", "Name", "Version", "License", "Copyright")
COLUMN_WIDTHS = (3, 4, 2, 3, 7)
MARGIN_MM = 10
TABLE_FONT_SIZE = 8
TITLE_FONT_SIZE = 12
TEXT_FONT_SIZE = 10
LINE_HEIGHT_MM = 5
FONT_FAMILY = "helvetica"


def _latin1(text: str) -> str:
    return text.encode("latin-1", errors="replace").decode("latin-1")


def component_row(record: PackageRecord) -> tuple[str, ...]:
    license_label = record.licenses[0].label if record.licenses else ""
    return (
        record.group or "no group",
        record.name or "no name",
        record.version or "no version",
        license_label or "no license",
        record.copyright or "no copyright",
    )


class PdfReportWriter:
    """Writes the component table and license text pages to ``path``."""

    def __init__(self, *, path: Path) -> None:
        self.path = path

    def __call__(
        self,
        result: ReconciliationResult,
        *,
        unresolved: Sequence[PackageRecord],
        license_texts: Mapping[str, str],
    ) -> tuple[Path, ...]:
        pdf = FPDF(format="A4")
        pdf.set_margins(MARGIN_MM, MARGIN_MM, MARGIN_MM)
        pdf.set_auto_page_break(auto=True, margin=MARGIN_MM)

        pdf.add_page()
        pdf.set_font(FONT_FAMILY, size=TABLE_FONT_SIZE)
        with pdf.table(col_widths=COLUMN_WIDTHS, text_align="LEFT") as table:
            heading = table.row()
            for title in TABLE_HEADINGS:
                heading.cell(title)
            for record in [*result.merged, *result.appended]:
                row = table.row()
                for value in component_row(record):
                    row.cell(_latin1(value))

        for license_id, text in license_texts.items():
            pdf.add_page()
            pdf.set_font(FONT_FAMILY, style="B", size=TITLE_FONT_SIZE)
            pdf.cell(
                0,
                LINE_HEIGHT_MM * 2,
                _latin1(license_id),
                align="C",
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )
            pdf.set_font(FONT_FAMILY, size=TEXT_FONT_SIZE)
            pdf.multi_cell(0, LINE_HEIGHT_MM, _latin1(text))

        self.path.parent.mkdir(parents=True, exist_ok=True)
        pdf.output(str(self.path))
        log.info(
            "Wrote %s (%s components, %s license texts)",
            self.path,
            len(result.merged) + len(result.appended),
            len(license_texts),
        )
        return (self.path,)
