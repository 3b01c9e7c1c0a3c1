"""Ports for looking up canonical license texts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LicenseCatalog(Protocol):
    """Catalog of license identifiers with retrievable full texts."""

    def license_ids(self) -> set[str]: ...

    def license_text(self, license_id: str) -> str: ...


__all__ = ["LicenseCatalog"]
