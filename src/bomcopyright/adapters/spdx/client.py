"""SPDX license list client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from bomcopyright.adapters.http_resilience import ResilientClient, default_client_factory
from bomcopyright.config.spdx import SpdxConfig, get_spdx_config
from bomcopyright.domain.ports.licenses import LicenseCatalog

from .schema import LicenseDetails, LicenseList, LicenseListEntry

if TYPE_CHECKING:
    from collections.abc import Callable

    from bomcopyright.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class SpdxAPIError(RuntimeError):
    """Raised when the SPDX license list cannot be retrieved or parsed."""


class SpdxLicenseCatalog:
    """License catalog backed by the public SPDX license list."""

    def __init__(
        self,
        *,
        config: SpdxConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config or get_spdx_config()
        self._client_factory = client_factory or default_client_factory
        self._entries: dict[str, LicenseListEntry] | None = None

    def license_ids(self) -> set[str]:
        return set(self._load_entries())

    def license_text(self, license_id: str) -> str:
        entry = self._load_entries().get(license_id)
        if entry is None:
            log.warning("License %s is not part of the SPDX license list", license_id)
            return ""
        details = asyncio.run(self._fetch(entry.details_url, LicenseDetails))
        return details.license_text

    def _load_entries(self) -> dict[str, LicenseListEntry]:
        if self._entries is None:
            license_list = asyncio.run(self._fetch(self._config.license_list_url, LicenseList))
            self._entries = {entry.license_id: entry for entry in license_list.licenses}
            log.info(
                "Loaded %s SPDX licenses (list version %s)",
                len(self._entries),
                license_list.license_list_version,
            )
        return self._entries

    async def _fetch[T: (LicenseList, LicenseDetails)](self, url: str, model: type[T]) -> T:
        async with self._client_factory(self._config.resilience) as client:
            response = await client.get(url)
            response.raise_for_status()
            payload = response.json()

        if not isinstance(payload, dict):
            raise SpdxAPIError(f"Unexpected SPDX response payload from {url}")
        return model.model_validate(payload)


if TYPE_CHECKING:
    _catalog_check: LicenseCatalog = SpdxLicenseCatalog()
