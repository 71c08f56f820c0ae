"""Protocol contracts for model adapter extension points."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .hooks import DeserializeCall
    from .validation import ValidationIssue


@runtime_checkable
class ContentAccessor(Protocol):
    source: str

    def lookup(self, *names: str) -> tuple[bool, Any]: ...

    def keys(self) -> Iterable[str]: ...


@runtime_checkable
class DeserializeMiddleware(Protocol):
    def before(self, call: DeserializeCall) -> None: ...

    def after(self, call: DeserializeCall, instance: Any) -> None: ...

    def on_error(self, call: DeserializeCall, error: Exception) -> None: ...


@runtime_checkable
class ValidationListener(Protocol):
    def on_issue(self, issue: ValidationIssue) -> None: ...
