"""
Scorecard Result Models

Result types in the scorecard ``v1alpha3`` shape, and their JSON form.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CheckState(str, Enum):
    """Outcome of a scorecard test."""
    PASS = "pass"
    FAIL = "fail"


class CheckResult(BaseModel):
    """Result of a single scorecard test."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Test name; empty for the usage result")
    state: CheckState = Field(..., description="Pass or fail")
    errors: Tuple[str, ...] = Field(default=(), description="Rule violations")
    suggestions: Tuple[str, ...] = Field(default=(), description="How to fix the violations")

    @model_validator(mode="after")
    def check_state(self):
        """A result fails exactly when it carries errors."""
        if (self.state == CheckState.FAIL) != bool(self.errors):
            raise ValueError(
                f"state {self.state.value!r} is inconsistent with {len(self.errors)} error(s)"
            )
        return self

    @classmethod
    def from_errors(
        cls,
        name: str,
        errors: Sequence[str],
        suggestions: Sequence[str] = (),
    ) -> "CheckResult":
        """Build a result whose state follows from errors."""
        return cls(
            name=name,
            state=CheckState.FAIL if errors else CheckState.PASS,
            errors=tuple(errors),
            suggestions=tuple(suggestions),
        )

    @property
    def passed(self) -> bool:
        return self.state == CheckState.PASS

    def to_dict(self) -> Dict[str, Any]:
        """Scorecard form: empty name, errors and suggestions are omitted."""
        data: Dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        data["state"] = self.state.value
        if self.errors:
            data["errors"] = list(self.errors)
        if self.suggestions:
            data["suggestions"] = list(self.suggestions)
        return data

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name or '<usage>'}: {len(self.errors)} error(s)"


class CheckStatus(BaseModel):
    """The emitted artifact: results of one scorecard test run."""

    model_config = ConfigDict(frozen=True)

    results: List[CheckResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Check if every result passed."""
        return all(r.passed for r in self.results)

    def to_dict(self) -> Dict[str, Any]:
        if not self.results:
            return {}
        return {"results": [r.to_dict() for r in self.results]}

    def to_json(self) -> str:
        """Render as a 4-space indented JSON document with a trailing newline."""
        return json.dumps(self.to_dict(), indent=4, ensure_ascii=False) + "\n"


def wrap_result(result: CheckResult) -> CheckStatus:
    """Wrap a single result in a status."""
    return CheckStatus(results=[result])
