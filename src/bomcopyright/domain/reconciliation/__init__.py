"""Reconciliation of locally supplied package data with generated BOM records."""

from __future__ import annotations

from .matching import same_identity, version_in_range
from .merge import ReconciliationResult, conflict_message, reconcile

__all__ = [
    "ReconciliationResult",
    "conflict_message",
    "reconcile",
    "same_identity",
    "version_in_range",
]
