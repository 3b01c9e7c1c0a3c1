from __future__ import annotations

from typing import TYPE_CHECKING

from pypdf import PdfReader

from bomcopyright.adapters.pdf import PdfReportWriter, component_row
from bomcopyright.domain.model import LicenseDescriptor, PackageRecord
from bomcopyright.domain.reconciliation import ReconciliationResult

if TYPE_CHECKING:
    from pathlib import Path


def _result() -> ReconciliationResult:
    return ReconciliationResult(
        merged=[
            PackageRecord.create(
                name="left-pad",
                version="1.3.0",
                licenses=[LicenseDescriptor(id="MIT")],
                copyright="Copyright © 2018 left-pad authors",
            ),
            PackageRecord.create(group="@types", name="node", version="20.1.0"),
        ],
        appended=[PackageRecord.create(name="vendored", version="0.0.1", copyright="(c) Vendor")],
    )


def test_component_row_fills_placeholders() -> None:
    record = PackageRecord.create(name="bare", version="")

    assert component_row(record) == ("no group", "bare", "no version", "no license", "no copyright")


def test_pdf_has_table_page_and_one_page_per_license(tmp_path: Path) -> None:
    path = tmp_path / "reports" / "bom.pdf"
    writer = PdfReportWriter(path=path)

    written = writer(
        _result(),
        unresolved=[],
        license_texts={
            "MIT": "Permission is hereby granted",
            "ISC": "Permission to use “freely”",
        },
    )

    assert written == (path,)
    assert path.read_bytes().startswith(b"%PDF")
    reader = PdfReader(path)
    assert len(reader.pages) == 3
    table = reader.pages[0].extract_text()
    assert "left-pad" in table
    assert "vendored" in table
    assert "no copyright" in table
    assert "MIT" in reader.pages[1].extract_text()
    assert "Permission is hereby granted" in reader.pages[1].extract_text()
    assert "ISC" in reader.pages[2].extract_text()


def test_pdf_without_license_texts_has_only_the_table(tmp_path: Path) -> None:
    path = tmp_path / "bom.pdf"

    PdfReportWriter(path=path)(_result(), unresolved=[], license_texts={})

    assert len(PdfReader(path).pages) == 1
