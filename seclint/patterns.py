# Secret patterns: content heuristics for credentials embedded in string literals.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

PREVIEW_LENGTH = 20
ELLIPSIS = "..."

# Tried left to right at each position; order decides which category wins a tie.
SECRET_PATTERNS: dict[str, str] = {
    # API keys and tokens
    "api_key": r"[a-zA-Z0-9]{32,}",
    # base64 encoded blobs
    "base64": r"[A-Za-z0-9+/]{20,}={0,3}",
    # JWT: header always starts with eyJ ('{"' encoded)
    "jwt": r"eyJ[a-zA-Z0-9_-]+?\.[a-zA-Z0-9_-]+?\.[a-zA-Z0-9_-]+",
    # key: 'value' / key = "value"
    "credential": r"(?:secret|password|token)\s*[:=]\s*['\"][^'\"]+['\"]",
    # API endpoints
    "url": r"https?://[a-zA-Z0-9.-]+",
    # mongodb connection strings with user:pass@host
    "mongodb": r"mongodb(?:\+srv)?://[^:]+:[^@]+@[^/]+",
}


def preview(text: str) -> str:
    """Truncate a matched secret for display so the full value never lands in output."""
    return text[:PREVIEW_LENGTH] + ELLIPSIS


@dataclass(frozen=True)
class SecretMatch:
    kind: str
    text: str
    start: int
    end: int

    @property
    def preview(self) -> str:
        return preview(self.text)


class SecretMatcher:
    """
    All secret patterns compiled into one alternation.

    find() returns every non-overlapping match in order of appearance, so a
    literal holding both a harmless long hex string and a real credential
    reports both. Matching is syntactic only: nothing is decoded or verified.
    """

    def __init__(self, patterns: dict[str, str] | None = None) -> None:
        if patterns is None:
            patterns = SECRET_PATTERNS
        self.patterns = dict(patterns)
        self._combined = re.compile(
            "|".join(f"(?P<{kind}>{source})" for kind, source in self.patterns.items())
        )

    def find(self, value: str) -> List[SecretMatch]:
        return [
            SecretMatch(kind=m.lastgroup or "", text=m.group(0), start=m.start(), end=m.end())
            for m in self._combined.finditer(value)
        ]


_DEFAULT_MATCHER = SecretMatcher()


def get_default_matcher() -> SecretMatcher:
    """Return the process-wide matcher built from SECRET_PATTERNS."""
    return _DEFAULT_MATCHER
