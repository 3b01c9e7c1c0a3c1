from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from bomcopyright.app import BomReconciliationReport, BomReconciliationRequest
from bomcopyright.ui import cli

if TYPE_CHECKING:
    from collections.abc import Callable


def _capture(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_reconcile(
        request: BomReconciliationRequest, **kwargs: object
    ) -> BomReconciliationReport:
        captured["request"] = request
        captured.update(kwargs)
        return BomReconciliationReport(components=0, resolved_copyrights=0)

    monkeypatch.setattr(cli, "reconcile_bom", fake_reconcile)
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)
    return captured


def test_cli_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture(monkeypatch)

    cli.main(["bom.json"])

    request = captured["request"]
    assert isinstance(request, BomReconciliationRequest)
    assert request.bom_path == Path("bom.json")
    assert request.local_path is None
    assert request.output_dir == Path("out")
    assert request.effective_missing_values_path == Path("out") / "missingValues.json"
    assert request.download is True
    assert request.license_texts is False
    assert request.pdf_path is None
    assert callable(captured["on_progress"])


def test_cli_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture(monkeypatch)

    cli.main(
        [
            "bom.json",
            "--local",
            "defaults.json",
            "--missing-values",
            "reports/missing.json",
            "--output-dir",
            "build",
            "--no-download",
            "--license-texts",
            "--pdf",
            "out/bom.pdf",
        ]
    )

    request = captured["request"]
    assert isinstance(request, BomReconciliationRequest)
    assert request.local_path == Path("defaults.json")
    assert request.effective_missing_values_path == Path("reports/missing.json")
    assert request.output_dir == Path("build")
    assert request.download is False
    assert request.license_texts is True
    assert request.pdf_path == Path("out/bom.pdf")


def test_cli_rejects_non_json_bom(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bom.xml"])

    assert excinfo.value.code == 2


def test_cli_exits_with_one_on_fatal_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing(*_: object, **__: object) -> BomReconciliationReport:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "reconcile_bom", failing)
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bom.json"])

    assert excinfo.value.code == 1


def test_progress_logger_logs_each_tenth(caplog: pytest.LogCaptureFixture) -> None:
    progress = cli._ProgressLogger()  # noqa: SLF001  # type: ignore[reportPrivateUsage]

    with caplog.at_level("INFO", logger="bomcopyright.ui.cli"):
        for done in range(1, 101):
            progress(done, 100)

    assert caplog.text.count("Copyright resolution progress") == 10


def test_cli_logs_each_written_report_once(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    tmp_path: Path,
    write_json: Callable[[str, object], Path],
    generated_bom: dict[str, Any],
) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)
    bom_path = write_json("bom.json", generated_bom)

    with caplog.at_level("INFO"):
        cli.main([str(bom_path), "--no-download", "--output-dir", str(tmp_path / "out")])

    messages = [record.getMessage() for record in caplog.records]
    assert sum("updatedBom.json" in message for message in messages) == 1
    assert sum("missingValues.json" in message for message in messages) == 1
