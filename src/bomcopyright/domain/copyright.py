"""Heuristic extraction of copyright notices from license and readme text.

Rules are tried in order of confidence. The first rule that matches anywhere in
the text wins, even if a later rule would match earlier in the text. Matches
run from the notice to the end of its line.
"""

from __future__ import annotations

import re
from logging import getLogger
from typing import Final

log = getLogger(__name__)

_SYMBOL = r"(?:©|\(c\))"

COPYRIGHT_RULES: Final[tuple[re.Pattern[str], ...]] = (
    re.compile(rf"{_SYMBOL}? ?copyright {_SYMBOL}? ?[0-9]+.*", re.IGNORECASE),
    re.compile(rf"{_SYMBOL} copyright.*", re.IGNORECASE),
    re.compile(rf"copyright {_SYMBOL}.*", re.IGNORECASE),
    re.compile(r"copyright [0-9]+.*", re.IGNORECASE),
)

_MENTION = re.compile(r"copyright.*", re.IGNORECASE)
_BRACKETED = re.compile(r"\([^)]*\)|<[^>]*>")
_WHITESPACE_RUN = re.compile(r"\s\s+")
_PRESERVED_SPAN = "(c)"


def extract_copyright(text: str) -> str:
    """Return the first notice matched by the rule list, or an empty string."""

    for rule in COPYRIGHT_RULES:
        match = rule.search(text)
        if match is not None:
            return match.group(0)

    mention = _MENTION.search(text)
    if mention is not None:
        log.debug("Unmatched copyright mention: %s", mention.group(0))
    return ""


def normalize_copyright(copyright: str) -> str:  # noqa: A002
    """Strip bracketed annotations except ``(c)`` and collapse whitespace."""

    def _strip(match: re.Match[str]) -> str:
        span = match.group(0)
        return span if span.lower() == _PRESERVED_SPAN else ""

    stripped = _BRACKETED.sub(_strip, copyright)
    return _WHITESPACE_RUN.sub(" ", stripped).strip()


def parse_copyright(text: str) -> str:
    notice = extract_copyright(text)
    if not notice:
        return ""
    return normalize_copyright(notice)


class CopyrightExtractor:
    """Injectable facade over the extraction functions."""

    def extract(self, text: str) -> str:
        return extract_copyright(text)

    def normalize(self, copyright: str) -> str:  # noqa: A002
        return normalize_copyright(copyright)

    def parse(self, text: str) -> str:
        return parse_copyright(text)
