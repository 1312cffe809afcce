# Reporter interface: where diagnostics go as soon as a rule produces them.

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from seclint.errors import SinkError
from seclint.findings.models import Diagnostic, Severity

logger = logging.getLogger(__name__)


class Reporter(ABC):
    """
    Emits diagnostics one at a time, synchronously, in the order received.

    There is no buffering or deduplication. If the sink fails, emit() raises
    SinkError and the reporter stays failed: every later emit() raises again
    without writing, so the caller sees the failure once per scan and stops.
    """

    def __init__(self) -> None:
        self.counts: dict[Severity, int] = {}
        self.failed = False

    def emit(self, diagnostic: Diagnostic) -> None:
        if self.failed:
            raise SinkError("output sink already failed; diagnostic dropped")
        try:
            self._write(diagnostic)
        except (OSError, ValueError) as exc:
            self.failed = True
            logger.debug("Sink write failed: %s", exc)
            raise SinkError(f"failed to write diagnostic: {exc}", cause=exc) from exc
        self.counts[diagnostic.severity] = self.counts.get(diagnostic.severity, 0) + 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @abstractmethod
    def _write(self, diagnostic: Diagnostic) -> None:
        """Write one diagnostic to the sink. OSError/ValueError mean the sink is gone."""
        ...

    def begin_file(self, path: Path) -> None:
        """Called before the diagnostics of a file when several files are scanned."""
        return None

    def print_summary(self) -> None:
        """Called once after all files are scanned."""
        return None
