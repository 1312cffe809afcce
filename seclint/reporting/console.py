# Rich console output: one `line N: message` per diagnostic, colored by severity.

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from seclint.findings.models import Diagnostic, Severity
from seclint.reporting.base import Reporter

# Severity → Rich style
SEVERITY_STYLE = {
    Severity.WARNING: "red",
    Severity.INFO: "yellow",
}

DEFAULT_SEVERITY_STYLE = "bold white"


def _severity_style(severity: Severity) -> str:
    return SEVERITY_STYLE.get(severity, DEFAULT_SEVERITY_STYLE)


@dataclass(frozen=True)
class ReportTemplates:
    """
    Rich markup templates per severity, built once and handed to the reporter.

    Placeholders: {line} and {message}. The message is markup-escaped before
    substitution so `[` in source text cannot inject styles.
    """

    info: str = "[yellow]line {line}[/yellow]: {message}"
    warning: str = "[red]line {line}[/red]: {message}"

    def render(self, diagnostic: Diagnostic) -> str:
        template = self.warning if diagnostic.severity == Severity.WARNING else self.info
        return template.format(line=diagnostic.line, message=escape(diagnostic.message))


DEFAULT_TEMPLATES = ReportTemplates()


def _shorten_path(path: str | Path) -> str:
    """Return a path relative to the working directory when possible."""
    path = Path(path)
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


class ConsoleReporter(Reporter):
    """Prints diagnostics through a Rich Console as they arrive."""

    def __init__(
        self,
        console: Console | None = None,
        templates: ReportTemplates = DEFAULT_TEMPLATES,
    ) -> None:
        super().__init__()
        self.console = console if console is not None else Console(highlight=False, emoji=False)
        self.templates = templates

    def _write(self, diagnostic: Diagnostic) -> None:
        self.console.print(
            self.templates.render(diagnostic), highlight=False, emoji=False, soft_wrap=True
        )

    def begin_file(self, path: Path) -> None:
        self.console.print()
        self.console.print(Panel(
            f"[bold cyan]{escape(_shorten_path(path))}[/bold cyan]",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))

    def print_summary(self) -> None:
        """Print a compact summary of emitted diagnostics."""
        total = self.total
        summary_parts = [f"[bold]{total} finding{'s' if total != 1 else ''}[/bold]"]
        for sev in (Severity.WARNING, Severity.INFO):
            if sev in self.counts:
                summary_parts.append(
                    f"[{_severity_style(sev)}]{self.counts[sev]} {sev.value}[/]"
                )

        self.console.print()
        self.console.print(
            Panel(
                " | ".join(summary_parts),
                title="Summary",
                border_style="yellow" if total > 0 else "green",
                box=box.ROUNDED,
            )
        )
