from __future__ import annotations

"""
Typer CLI entry point and orchestration of the analysis pipeline.

- Accepts a JavaScript file or a directory
- Finds .js/.mjs/.cjs files (using traversal.find_js_files for directories)
- Builds a FileContext for each file
- Runs the dispatch engine with the fixed rule set from config.py
- Streams diagnostics to stdout as `line N: message` (or JSON Lines)
"""

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler

from seclint.config import OUTPUT_FORMATS, Config, get_default_config, get_enabled_rules
from seclint.context import create_context
from seclint.engine import DetectorRegistry, DispatchEngine
from seclint.errors import SinkError
from seclint.parser import create_parser
from seclint.reporting.base import Reporter
from seclint.reporting.console import ConsoleReporter
from seclint.reporting.json_lines import JsonLinesReporter
from seclint.traversal import find_js_files, is_js_file

logger = logging.getLogger(__name__)

app = typer.Typer(help="seclint - security linter for JavaScript source files.")


@app.callback()
def cli() -> None:
    """seclint - security linter for JavaScript source files."""


def _configure_logging(verbose: bool) -> None:
    """Send seclint's logs to stderr through Rich; DEBUG with --verbose, else WARNING."""
    package_logger = logging.getLogger("seclint")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        )


def _collect_js_files(target: Path) -> List[Path]:
    """
    Resolve a target path into a list of JavaScript files to analyze.

    - If target is a .js/.mjs/.cjs file, return [target]
    - If target is a directory, use traversal.find_js_files()
    - Otherwise, exit with an error.
    """
    if target.is_file():
        if not is_js_file(target):
            raise typer.BadParameter(f"Target file must be a JavaScript file, got: {target}")
        return [target]

    if target.is_dir():
        files = find_js_files(target)
        if not files:
            logger.warning("No JavaScript files found under %s", target)
        return files

    raise typer.BadParameter(f"Target path is neither a file nor a directory: {target}")


def _make_reporter(config: Config) -> Reporter:
    if config.output_format == "json":
        return JsonLinesReporter()
    return ConsoleReporter()


@app.command()
def analyze(
    target: Path = typer.Argument(
        ...,
        exists=True,
        readable=True,
        resolve_path=True,
        help="JavaScript file or directory to analyze.",
    ),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help=f"Output format: {' or '.join(OUTPUT_FORMATS)}.",
    ),
    summary: bool = typer.Option(
        True,
        "--summary/--no-summary",
        help="Print a findings summary after a text report.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Analyze a single JavaScript file or all JavaScript files under a directory.
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"expected one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}",
            param_hint="--format",
        )

    config = get_default_config(output_format=output_format, show_summary=summary)
    files = _collect_js_files(target)

    engine = DispatchEngine(DetectorRegistry(get_enabled_rules(config)))
    reporter = _make_reporter(config)
    parser = create_parser()

    try:
        for path in files:
            ctx = create_context(path, parser=parser)
            if ctx is None:
                # File could not be read; error already logged in create_context
                continue
            if len(files) > 1:
                reporter.begin_file(path)
            engine.scan_context(ctx, reporter)

        if config.output_format == "text" and config.show_summary:
            reporter.print_summary()
    except (SinkError, OSError) as exc:
        logger.error("Output failed, scan aborted: %s", exc)
        raise typer.Exit(code=2)


def main() -> None:
    """Entry point for the `seclint` console script."""
    app()


if __name__ == "__main__":
    main()
