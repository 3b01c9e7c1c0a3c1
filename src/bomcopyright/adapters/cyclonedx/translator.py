"""Translate between CycloneDX payloads and domain package records."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from bomcopyright.domain.model import LicenseDescriptor, PackageRecord

from .schema import Component, LicenseChoice

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .schema import Bom

type ComponentPayload = dict[str, Any]


def parse_license_choice(choice: LicenseChoice) -> LicenseDescriptor | None:
    if choice.expression is not None:
        return LicenseDescriptor(expression=choice.expression)
    if choice.license is None:
        return None
    payload = choice.license
    if payload.id is None and payload.name is None:
        return None
    return LicenseDescriptor(id=payload.id, name=payload.name, url=payload.url)


def parse_component(component: Component, *, index: int | None = None) -> PackageRecord:
    licenses = [
        descriptor
        for descriptor in (parse_license_choice(choice) for choice in component.licenses)
        if descriptor is not None
    ]
    return PackageRecord.create(
        group=component.group,
        name=component.name,
        version=component.version,
        licenses=licenses,
        copyright=(component.copyright or "").strip(),
        external_references=[reference.url for reference in component.external_references],
        bom_index=index,
    )


def records_from_bom(bom: Bom) -> list[PackageRecord]:
    return [
        parse_component(component, index=index) for index, component in enumerate(bom.components)
    ]


def license_to_payload(descriptor: LicenseDescriptor) -> dict[str, Any]:
    if descriptor.expression is not None:
        return {"expression": descriptor.expression}
    fields = (("id", descriptor.id), ("name", descriptor.name), ("url", descriptor.url))
    license_payload = {key: value for key, value in fields if value is not None}
    return {"license": license_payload}


def record_to_component(record: PackageRecord) -> ComponentPayload:
    component: ComponentPayload = {"type": "library"}
    if record.group:
        component["group"] = record.group
    component["name"] = record.name
    component["version"] = record.version
    if record.has_licenses:
        component["licenses"] = [license_to_payload(license_) for license_ in record.licenses]
    if record.copyright:
        component["copyright"] = record.copyright
    if record.external_references:
        component["externalReferences"] = [
            {"type": "other", "url": url} for url in record.external_references
        ]
    return component


def record_summary(record: PackageRecord) -> ComponentPayload:
    """Identity and license summary used in the missing-values report."""

    return {
        "group": record.group or "",
        "name": record.name,
        "version": record.version,
        "licenses": [license_to_payload(license_) for license_ in record.licenses],
        "externalReferences": list(record.external_references),
    }


def apply_records_to_bom(
    raw_bom: dict[str, Any],
    merged: Sequence[PackageRecord],
    appended: Sequence[PackageRecord],
) -> dict[str, Any]:
    """Return a copy of ``raw_bom`` carrying resolved copyrights and appended components."""

    updated = copy.deepcopy(raw_bom)
    components: list[ComponentPayload] = updated.setdefault("components", [])

    for record in merged:
        if record.bom_index is None or record.bom_index >= len(components):
            continue
        component = components[record.bom_index]
        if record.copyright:
            component["copyright"] = record.copyright
        original = Component.model_validate(component)
        if parse_component(original).licenses != record.licenses:
            component["licenses"] = [license_to_payload(license_) for license_ in record.licenses]

    components.extend(record_to_component(record) for record in appended)
    return updated
