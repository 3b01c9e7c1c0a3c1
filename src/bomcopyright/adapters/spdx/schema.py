"""Pydantic models for the SPDX license list JSON."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpdxBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LicenseListEntry(SpdxBaseModel):
    license_id: str = Field(alias="licenseId")
    name: str | None = None
    details_url: str = Field(alias="detailsUrl")
    is_deprecated: bool = Field(default=False, alias="isDeprecatedLicenseId")


class LicenseList(SpdxBaseModel):
    license_list_version: str | None = Field(default=None, alias="licenseListVersion")
    licenses: list[LicenseListEntry] = Field(default_factory=list[LicenseListEntry])


class LicenseDetails(SpdxBaseModel):
    license_id: str = Field(alias="licenseId")
    license_text: str = Field(default="", alias="licenseText")
