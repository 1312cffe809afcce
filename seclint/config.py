from __future__ import annotations

"""
Scanner configuration: the rule set and output settings.

The rule set is fixed: every rule always runs, in the order listed in
get_default_config(). That order is also the order rules run on a node of
a given kind, so it decides the order of diagnostics on the same node.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from seclint.rules.base import Rule
from seclint.rules.console_logs import ConsoleLogsRule
from seclint.rules.eval_calls import EvalCallsRule
from seclint.rules.hardcoded_secrets import HardcodedSecretsRule
from seclint.rules.input_field_access import InputFieldAccessRule
from seclint.rules.truncation import TruncationRule
from seclint.rules.type_conversion import TypeConversionRule

OUTPUT_FORMATS = ("text", "json")


@dataclass
class Config:
    """
    Scanner configuration.

    rules: the fixed rule list.
    output_format: "text" (rich console) or "json" (JSON Lines).
    show_summary: print the per-severity summary panel after a text report.
    """

    rules: Sequence[Rule] = field(default_factory=list)
    output_format: str = "text"
    show_summary: bool = True

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {self.output_format!r}; expected one of {OUTPUT_FORMATS}"
            )


def default_rules() -> List[Rule]:
    """Every rule, in registration order."""
    return [
        ConsoleLogsRule(),
        InputFieldAccessRule(),
        EvalCallsRule(),
        TypeConversionRule(),
        TruncationRule(),
        HardcodedSecretsRule(),
    ]


def get_default_config(output_format: str = "text", show_summary: bool = True) -> Config:
    """Return the configuration used by the CLI."""
    return Config(rules=default_rules(), output_format=output_format, show_summary=show_summary)


def get_enabled_rules(config: Config | None = None) -> Sequence[Rule]:
    """Return the rules from the given config (or default config)."""
    if config is None:
        config = get_default_config()
    return config.rules
