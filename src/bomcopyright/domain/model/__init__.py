"""Domain model for BOM package records."""

from __future__ import annotations

from .package import LicenseDescriptor, PackageIdentity, PackageRecord

__all__ = [
    "LicenseDescriptor",
    "PackageIdentity",
    "PackageRecord",
]
