# In-memory output: keep diagnostics in a list for callers that post-process them.

from __future__ import annotations

from seclint.findings.models import Diagnostic
from seclint.reporting.base import Reporter


class CollectingReporter(Reporter):
    """Appends every emitted diagnostic to self.diagnostics, in emission order."""

    def __init__(self) -> None:
        super().__init__()
        self.diagnostics: list[Diagnostic] = []

    def _write(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
