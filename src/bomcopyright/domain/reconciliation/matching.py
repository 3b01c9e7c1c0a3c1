"""Pairwise predicates comparing two package records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from semantic_version import NpmSpec, Version

if TYPE_CHECKING:
    from bomcopyright.domain.model import PackageRecord


def same_identity(a: PackageRecord, b: PackageRecord) -> bool:
    """Exact, case-sensitive comparison of group and name; a missing group equals ``""``."""

    return (a.group or "") == (b.group or "") and a.name == b.name


def version_in_range(a: PackageRecord, b: PackageRecord) -> bool:
    """Whether ``b``'s concrete version satisfies ``a``'s version read as an npm range.

    Falls back to exact string equality when either side does not parse.
    """

    spec = _parse_range(a.version)
    version = _parse_version(b.version)
    if spec is None or version is None:
        return a.version == b.version
    return version in spec


def _parse_range(value: str) -> NpmSpec | None:
    if not value.strip():
        return None
    try:
        return NpmSpec(value.strip())
    except ValueError:
        return None


def _parse_version(value: str) -> Version | None:
    try:
        return Version(value.strip())
    except ValueError:
        return None
