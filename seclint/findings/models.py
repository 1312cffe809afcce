# Pydantic data models for diagnostics: Diagnostic, Severity.

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """How loudly a diagnostic is presented. Warnings are likely bugs, info is advisory."""

    INFO = "info"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """A single issue reported by a rule (e.g. eval() call at line 3)."""

    rule_id: str
    severity: Severity
    message: str
    line: int = Field(..., ge=1, description="1-based line number")
    column: Optional[int] = Field(None, ge=1, description="1-based column number")
    path: Optional[Path] = None

    model_config = {"arbitrary_types_allowed": True, "frozen": True}
