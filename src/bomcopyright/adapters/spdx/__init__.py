"""SPDX adapter providing canonical license texts."""

from __future__ import annotations

from .client import SpdxAPIError, SpdxLicenseCatalog

__all__ = ["SpdxAPIError", "SpdxLicenseCatalog"]
