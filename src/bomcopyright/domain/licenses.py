"""Collect canonical license texts for the licenses referenced by a BOM."""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bomcopyright.domain.model import PackageRecord
    from bomcopyright.domain.ports.licenses import LicenseCatalog

log = getLogger(__name__)

_OR = re.compile(r" or ", re.IGNORECASE)
_AND = re.compile(r" and ", re.IGNORECASE)
_PARENS = re.compile(r"[()]")


def primary_license_id(expression: str) -> str:
    """Reduce a compound expression such as ``(MIT OR Apache-2.0)`` to its first id."""

    for separator in (_OR, _AND):
        if separator.search(expression):
            return separator.split(_PARENS.sub("", expression))[0].strip()
    return expression.strip()


def collect_license_texts(
    records: Iterable[PackageRecord],
    catalog: LicenseCatalog,
) -> dict[str, str]:
    known_ids = catalog.license_ids()
    wanted: dict[str, None] = {}

    for record in records:
        if not record.licenses:
            continue
        label = record.licenses[0].label
        if not label:
            continue
        license_id = primary_license_id(label)
        if license_id not in known_ids:
            log.warning(
                "Unable to retrieve license text for package %s with license %s",
                record.name,
                label,
            )
            continue
        wanted[license_id] = None

    texts: dict[str, str] = {}
    for license_id in wanted:
        texts[license_id] = catalog.license_text(license_id)
    return texts
