from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("BOMCOPYRIGHT_DATA_DIR", str(tmp_path / "data"))


@pytest.fixture
def generated_bom() -> dict[str, Any]:
    return {
        "bomFormat": "CycloneDX",
        "specVersion": "1.4",
        "components": [
            {
                "type": "library",
                "name": "left-pad",
                "version": "1.3.0",
                "licenses": [{"license": {"id": "MIT"}}],
                "externalReferences": [
                    {"type": "vcs", "url": "git+https://github.com/left-pad/left-pad.git"}
                ],
            },
            {
                "type": "library",
                "group": "@types",
                "name": "node",
                "version": "20.1.0",
                "licenses": [{"expression": "(MIT OR Apache-2.0)"}],
            },
        ],
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    def _write(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
