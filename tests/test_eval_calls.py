"""Unit tests for the eval_calls rule."""

from pathlib import Path

from seclint.context import context_from_bytes
from seclint.engine import DetectorRegistry, DispatchEngine
from seclint.findings.models import Severity
from seclint.nodes import CallExpression, GenericNode
from seclint.reporting.memory import CollectingReporter
from seclint.rules.eval_calls import EvalCallsRule


def _run_rule(source: bytes) -> list:
    """Parse source, scan it with EvalCallsRule only, return diagnostics."""
    ctx = context_from_bytes(Path("test.js"), source)
    reporter = CollectingReporter()
    DispatchEngine(DetectorRegistry([EvalCallsRule()])).scan_context(ctx, reporter)
    return reporter.diagnostics


def test_eval_detected():
    diagnostics = _run_rule(b"eval(userInput);")
    assert len(diagnostics) == 1
    assert diagnostics[0].rule_id == "eval-call"
    assert diagnostics[0].severity == Severity.WARNING
    assert diagnostics[0].message == "dangerous use of eval() method"
    assert diagnostics[0].line == 1


def test_eval_inside_function_reports_its_line():
    source = b"""function run(code) {
  return eval(code);
}
"""
    diagnostics = _run_rule(source)
    assert [d.line for d in diagnostics] == [2]


def test_lookalikes_not_flagged():
    """Only the bare identifier eval counts."""
    source = b"window.eval(x); myeval(x); evaluate(x); obj['eval'](x);"
    assert _run_rule(source) == []


def test_each_call_reported():
    diagnostics = _run_rule(b"eval(a);\neval(b);\n")
    assert [d.line for d in diagnostics] == [1, 2]


def test_malformed_call_is_not_applicable():
    rule = EvalCallsRule()
    no_callee = CallExpression(type="CallExpression", start=0, end=4, line=1, column=1)
    generic = GenericNode(type="CallExpression", start=0, end=4, line=1, column=1)
    assert rule.check(no_callee) == []
    assert rule.check(generic) == []
