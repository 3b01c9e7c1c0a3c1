"""Merge locally supplied package records into the generated BOM records.

The generated records are owned by the reconciler for the duration of the call:
matching records are overwritten in place and the same list is handed back as
``ReconciliationResult.merged``. Local records are either absorbed into a
generated record or moved into ``appended``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .matching import same_identity, version_in_range

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bomcopyright.domain.model import PackageRecord

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReconciliationResult:
    merged: list[PackageRecord] = field(default_factory=list["PackageRecord"])
    appended: list[PackageRecord] = field(default_factory=list["PackageRecord"])
    conflicts: list[str] = field(default_factory=list[str])


def conflict_message(local: PackageRecord, generated: PackageRecord) -> str:
    return (
        f"Version of package did not match in the given local file: {local} "
        f"and the generated file: {generated}, possible duplicate created."
    )


def reconcile(
    local: Sequence[PackageRecord],
    generated: list[PackageRecord],
) -> ReconciliationResult:
    """Overwrite generated records with matching local data; collect the rest.

    The local version is read as the range. A local record whose range admits a
    generated record's version overwrites that record's licenses and copyright
    (every such generated record, duplicates included) and is never appended. A
    local record without any such match is appended exactly once; each generated
    record that shares its identity at another version adds one conflict.
    """

    appended: list[PackageRecord] = []
    conflicts: list[str] = []

    for local_record in local:
        matched = False
        mismatched: list[PackageRecord] = []
        for generated_record in generated:
            if not same_identity(generated_record, local_record):
                continue
            if version_in_range(local_record, generated_record):
                generated_record.apply_override(local_record)
                matched = True
            else:
                mismatched.append(generated_record)

        if matched:
            continue
        for generated_record in mismatched:
            message = conflict_message(local_record, generated_record)
            log.warning(message)
            conflicts.append(message)
        appended.append(local_record)

    log.info(
        "Reconciled %s local records against %s generated records: appended=%s, conflicts=%s",
        len(local),
        len(generated),
        len(appended),
        len(conflicts),
    )
    return ReconciliationResult(merged=generated, appended=appended, conflicts=conflicts)
