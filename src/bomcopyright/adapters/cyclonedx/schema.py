"""Pydantic models for the subset of CycloneDX JSON that carries package data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class CycloneDXBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LicensePayload(CycloneDXBaseModel):
    id: str | None = None
    name: str | None = None
    url: str | None = None

    @field_validator("id", "name", "url", mode="before")
    @classmethod
    def normalize_blanks(cls, value: object) -> object:
        return _blank_to_none(value)


class LicenseChoice(CycloneDXBaseModel):
    license: LicensePayload | None = None
    expression: str | None = None

    @field_validator("expression", mode="before")
    @classmethod
    def normalize_expression(cls, value: object) -> object:
        return _blank_to_none(value)


class ExternalReference(CycloneDXBaseModel):
    type: str | None = None
    url: str


class Component(CycloneDXBaseModel):
    type: str | None = None
    group: str | None = None
    name: str
    version: str = ""
    licenses: list[LicenseChoice] = Field(default_factory=list[LicenseChoice])
    copyright: str | None = None
    external_references: list[ExternalReference] = Field(
        default_factory=list[ExternalReference], alias="externalReferences"
    )

    @field_validator("group", mode="before")
    @classmethod
    def normalize_group(cls, value: object) -> object:
        return _blank_to_none(value)


class Bom(CycloneDXBaseModel):
    bom_format: str | None = Field(default=None, alias="bomFormat")
    spec_version: str | None = Field(default=None, alias="specVersion")
    components: list[Component] = Field(default_factory=list[Component])
