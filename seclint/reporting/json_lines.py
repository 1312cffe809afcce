# JSON Lines output: one diagnostic object per line, for editors and CI tooling.

from __future__ import annotations

import sys
from typing import TextIO

from seclint.findings.models import Diagnostic
from seclint.reporting.base import Reporter


class JsonLinesReporter(Reporter):
    """Writes each diagnostic as a JSON object followed by a newline, flushing every line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, diagnostic: Diagnostic) -> None:
        self.stream.write(diagnostic.model_dump_json() + "\n")
        self.stream.flush()
