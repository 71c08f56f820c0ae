"""Validation issues and listeners for populated models."""

from __future__ import annotations

from dataclasses import dataclass, field

REQUIRED = "required"
NULL_ELEMENT = "null-element"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    path: str
    message: str
    kind: str = REQUIRED


@dataclass(slots=True)
class CollectingListener:
    issues: list[ValidationIssue] = field(default_factory=list)

    def on_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    @property
    def ok(self) -> bool:
        return not self.issues
