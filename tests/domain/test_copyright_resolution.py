from __future__ import annotations

import asyncio
import logging

import pytest

from bomcopyright.domain.copyright_resolution import CopyrightResolver, RateLimitGate
from bomcopyright.domain.model import PackageRecord
from bomcopyright.domain.ports.downloading import DownloadError, RateLimitStatus
from tests.helpers.downloading import FakeDownloader, RecordingSleep

MIT_TEXT = "MIT License\n\nCopyright (c) 2018 Jane Doe <jane@example.com>\n\nPermission..."
README_TEXT = "# project\n\nCopyright 2017 Readme Author\n"


def _record(name: str, *urls: str, copyright: str = "") -> PackageRecord:  # noqa: A002
    return PackageRecord.create(
        name=name,
        version="1.0.0",
        copyright=copyright,
        external_references=list(urls),
    )


def test_resolver_takes_notice_from_license_text() -> None:
    record = _record("pkg", "https://github.com/a/pkg")
    downloader = FakeDownloader({"https://github.com/a/pkg": (MIT_TEXT, README_TEXT)})

    result = CopyrightResolver(downloader)([record])

    assert record.copyright == "Copyright (c) 2018 Jane Doe"
    assert record.raw_license_texts == [MIT_TEXT]
    assert record.readme_text == README_TEXT
    assert result.attempted == 1
    assert result.resolved == [record]
    assert result.unresolved == []


@pytest.mark.parametrize("license_text", ["", "No notice here"])
def test_resolver_falls_back_to_readme(license_text: str) -> None:
    record = _record("pkg", "https://github.com/a/pkg")
    downloader = FakeDownloader({"https://github.com/a/pkg": (license_text, README_TEXT)})

    CopyrightResolver(downloader)([record])

    assert record.copyright == "Copyright 2017 Readme Author"


def test_resolver_stops_after_first_notice() -> None:
    record = _record("pkg", "https://github.com/a/first", "https://github.com/a/second")
    downloader = FakeDownloader(
        {
            "https://github.com/a/first": (MIT_TEXT, ""),
            "https://github.com/a/second": ("Copyright 1999 Other", ""),
        }
    )

    CopyrightResolver(downloader)([record])

    assert downloader.fetched == ["https://github.com/a/first"]
    assert record.copyright == "Copyright (c) 2018 Jane Doe"


def test_resolver_tries_next_reference_after_download_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    record = _record("pkg", "https://github.com/a/broken", "https://github.com/a/pkg")
    downloader = FakeDownloader(
        {
            "https://github.com/a/broken": DownloadError("boom"),
            "https://github.com/a/pkg": (MIT_TEXT, ""),
        }
    )

    with caplog.at_level(logging.WARNING):
        CopyrightResolver(downloader)([record])

    assert record.copyright == "Copyright (c) 2018 Jane Doe"
    assert "Skipping https://github.com/a/broken" in caplog.text


def test_resolver_skips_records_with_copyright_or_without_references(
    caplog: pytest.LogCaptureFixture,
) -> None:
    known = _record("known", "https://github.com/a/known", copyright="(c) Known")
    bare = _record("bare")
    downloader = FakeDownloader()

    with caplog.at_level(logging.INFO):
        result = CopyrightResolver(downloader)([known, bare])

    assert downloader.fetched == []
    assert result.attempted == 1
    assert result.unresolved == [bare]
    assert "No external references found for: bare@1.0.0" in caplog.text


def test_resolver_reports_progress_per_record() -> None:
    records = [_record(f"pkg{i}", f"https://github.com/a/pkg{i}") for i in range(3)]
    progress: list[tuple[int, int]] = []

    resolver = CopyrightResolver(
        FakeDownloader(), on_progress=lambda done, total: progress.append((done, total))
    )
    resolver(records)

    assert progress == [(1, 3), (2, 3), (3, 3)]


def test_gate_waits_until_quota_reset_plus_grace() -> None:
    sleep = RecordingSleep()
    downloader = FakeDownloader(quotas=[RateLimitStatus(remaining=0, reset_epoch_seconds=1_000)])
    gate = RateLimitGate(downloader, clock=lambda: 900.0, sleep=sleep)

    asyncio.run(gate.acquire())

    assert sleep.calls == [110.0]
    assert not gate.paused


def test_gate_passes_through_when_quota_remains() -> None:
    sleep = RecordingSleep()
    gate = RateLimitGate(FakeDownloader(), sleep=sleep)

    asyncio.run(gate.acquire())

    assert sleep.calls == []


def test_exhausted_quota_pauses_all_tasks_once() -> None:
    sleep = RecordingSleep()
    downloader = FakeDownloader(
        {
            "https://github.com/a/one": (MIT_TEXT, ""),
            "https://github.com/a/two": ("Copyright 2001 Two", ""),
        },
        quotas=[RateLimitStatus(remaining=0, reset_epoch_seconds=100)],
    )
    gate = RateLimitGate(downloader, clock=lambda: 100.0, sleep=sleep)
    records = [
        _record("one", "https://github.com/a/one"),
        _record("two", "https://github.com/a/two"),
    ]

    CopyrightResolver(downloader, gate=gate)(records)

    assert sleep.calls == [10.0]
    assert [record.copyright for record in records] == [
        "Copyright (c) 2018 Jane Doe",
        "Copyright 2001 Two",
    ]
