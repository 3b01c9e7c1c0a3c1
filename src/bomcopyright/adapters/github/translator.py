"""Translate GitHub URLs and payloads into plain values."""

from __future__ import annotations

import base64
import binascii
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schema import ContentResponse

_REPOSITORY_URL = re.compile(r"github\.com[/:]([^/#?:]+)/([^/#?]+)", re.IGNORECASE)


class ContentDecodingError(ValueError):
    """Raised when a content payload cannot be decoded into text."""


def parse_repository_url(url: str) -> tuple[str, str] | None:
    """Return ``(owner, repo)`` for any GitHub URL form, ignoring subpaths and fragments."""

    match = _REPOSITORY_URL.search(url)
    if match is None:
        return None
    owner, repo = match.group(1), match.group(2)
    repo = repo.removesuffix(".git")
    if not owner or not repo:
        return None
    return owner, repo


def decode_content(payload: ContentResponse) -> str:
    if payload.encoding != "base64":
        return payload.content
    try:
        raw = base64.b64decode(payload.content, validate=False)
    except (binascii.Error, ValueError) as exc:
        raise ContentDecodingError(f"Invalid base64 content in {payload.path}") from exc
    return raw.decode("utf-8", errors="replace")
