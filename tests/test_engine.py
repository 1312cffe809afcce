"""Tests for seclint.engine: dispatch order, traversal completeness, end-to-end scans."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from seclint.config import default_rules
from seclint.context import context_from_bytes
from seclint.engine import DetectorRegistry, DispatchEngine
from seclint.errors import SinkError
from seclint.findings.models import Severity
from seclint.nodes import BinaryExpression, CallExpression, GenericNode, Literal, MemberExpression
from seclint.reporting.console import ConsoleReporter
from seclint.reporting.memory import CollectingReporter
from seclint.walker import count_nodes


def _scan(source: bytes, reporter=None):
    ctx = context_from_bytes(Path("test.js"), source)
    if reporter is None:
        reporter = CollectingReporter()
    engine = DispatchEngine(DetectorRegistry(default_rules()))
    stats = engine.scan_context(ctx, reporter)
    return reporter, stats, ctx


class CountingRegistry(DetectorRegistry):
    def __init__(self, rules):
        super().__init__(rules)
        self.lookups = 0

    def detectors_for(self, node_type):
        self.lookups += 1
        return super().detectors_for(node_type)


class TestRegistry:
    def test_registration_order(self):
        registry = DetectorRegistry(default_rules())
        assert [r.id for r in registry.detectors_for("MemberExpression")] == [
            "console-log",
            "input-field-access",
        ]
        assert [r.id for r in registry.detectors_for("BinaryExpression")] == [
            "unsafe-type-conversion",
            "bitwise-truncation",
        ]
        assert [r.id for r in registry.detectors_for("CallExpression")] == ["eval-call"]
        assert [r.id for r in registry.detectors_for("Literal")] == ["hardcoded-secret"]

    def test_unknown_kind_has_no_detectors(self):
        registry = DetectorRegistry(default_rules())
        assert registry.detectors_for("IfStatement") == ()
        assert registry.detectors_for("SomeFutureExpression") == ()


def test_eval_end_to_end():
    buf = io.StringIO()
    reporter = ConsoleReporter(Console(file=buf, width=200, no_color=True))
    _, stats, _ = _scan(b"\n\neval(userInput);\n", reporter=reporter)
    assert stats.diagnostics_emitted == 1
    assert buf.getvalue() == "line 3: dangerous use of eval() method\n"


def test_loose_equality_end_to_end():
    reporter, _, _ = _scan(b"\n\n\n\nif (a == b) {}\n")
    (d,) = reporter.diagnostics
    assert d.severity == Severity.INFO
    assert d.line == 5
    assert "==" in d.message


def test_every_node_looked_up_once():
    ctx = context_from_bytes(Path("test.js"), b'function f(x) { if (x == 1) { console.log("hi " + x); } }')
    registry = CountingRegistry(default_rules())
    stats = DispatchEngine(registry).scan(ctx.root_node, CollectingReporter())
    total = count_nodes(ctx.root_node)
    assert registry.lookups == total
    assert stats.nodes_visited == total


def test_diagnostics_follow_traversal_order():
    reporter, _, _ = _scan(b'console.log(document.getElementById("x").value);')
    assert [d.rule_id for d in reporter.diagnostics] == ["console-log", "input-field-access"]


def test_scan_is_idempotent():
    source = b"""const key = "password: 'abc123xyz1234567890'";
console.log(eval(input) == key);
const n = total | 0;
"""
    first, _, _ = _scan(source)
    second, _, _ = _scan(source)
    assert first.diagnostics == second.diagnostics
    assert len(first.diagnostics) == 5


def test_diagnostics_carry_path():
    reporter, _, ctx = _scan(b"eval(x);")
    assert reporter.diagnostics[0].path == ctx.path


def test_scan_without_path():
    ctx = context_from_bytes(Path("test.js"), b"eval(x);")
    reporter = CollectingReporter()
    DispatchEngine(DetectorRegistry(default_rules())).scan(ctx.root_node, reporter)
    assert reporter.diagnostics[0].path is None


def test_malformed_nodes_do_not_crash():
    span = {"start": 0, "end": 1, "line": 1, "column": 1}
    root = GenericNode(
        type="Program",
        nodes=(
            GenericNode(type="CallExpression", **span),
            CallExpression(type="CallExpression", **span),
            MemberExpression(type="MemberExpression", **span),
            BinaryExpression(type="BinaryExpression", operator="|", **span),
            BinaryExpression(type="BinaryExpression", operator="+", **span),
            Literal(type="Literal", **span),
            GenericNode(type="BrandNewSyntax", **span),
        ),
        **span,
    )
    reporter = CollectingReporter()
    stats = DispatchEngine(DetectorRegistry(default_rules())).scan(root, reporter)
    assert stats.nodes_visited == 8
    assert reporter.diagnostics == []


def test_recovered_parse_is_still_scanned():
    reporter, _, ctx = _scan(b"eval(x);\nfunction ( {\n")
    assert ctx.has_parse_errors is True
    assert any(d.rule_id == "eval-call" for d in reporter.diagnostics)


class FailingAfterFirst(CollectingReporter):
    def _write(self, diagnostic):
        if self.diagnostics:
            raise OSError("broken pipe")
        super()._write(diagnostic)


def test_sink_failure_aborts_scan():
    reporter = FailingAfterFirst()
    with pytest.raises(SinkError):
        _scan(b"eval(a);\neval(b);\neval(c);\n", reporter=reporter)
    assert len(reporter.diagnostics) == 1
    assert reporter.failed is True
