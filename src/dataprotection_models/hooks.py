"""Deserialization hook registry for model conversion."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .protocols import ContentAccessor, DeserializeMiddleware


@dataclass(slots=True)
class DeserializeCall:
    model_name: str
    source: str
    content: ContentAccessor
    values: dict[str, Any] = field(default_factory=dict)
    return_now: bool = False


BeforeHook = Callable[[DeserializeCall], None]
AfterHook = Callable[[DeserializeCall, Any], None]
ErrorHook = Callable[[DeserializeCall, Exception], None]


@dataclass(slots=True)
class HookRegistry:
    _before: dict[str, list[BeforeHook]] = field(default_factory=dict)
    _after: dict[str, list[AfterHook]] = field(default_factory=dict)
    _error: dict[str, list[ErrorHook]] = field(default_factory=dict)

    def add_before(self, model_name: str, hook: BeforeHook) -> None:
        self._before.setdefault(model_name, []).append(hook)

    def add_after(self, model_name: str, hook: AfterHook) -> None:
        self._after.setdefault(model_name, []).append(hook)

    def add_error(self, model_name: str, hook: ErrorHook) -> None:
        self._error.setdefault(model_name, []).append(hook)

    def add_middleware(self, model_name: str, middleware: DeserializeMiddleware) -> None:
        self.add_before(model_name, _require_hook_callable(middleware, "before"))
        self.add_after(model_name, _require_hook_callable(middleware, "after"))
        self.add_error(model_name, _require_hook_callable(middleware, "on_error"))

    def run_before(self, call: DeserializeCall) -> bool:
        """Run before hooks and report whether population should stop."""
        for hook in self._match(self._before, call.model_name):
            _reject_awaitable(hook(call), "before")
        return call.return_now

    def run_after(self, call: DeserializeCall, instance: Any) -> None:
        for hook in self._match(self._after, call.model_name):
            _reject_awaitable(hook(call, instance), "after")

    def run_error(self, call: DeserializeCall, error: Exception) -> None:
        for hook in self._match(self._error, call.model_name):
            _reject_awaitable(hook(call, error), "error")

    @staticmethod
    def _match(registry: dict[str, list[Any]], model_name: str) -> list[Any]:
        exact = registry.get(model_name, [])
        wildcards = registry.get("*", [])
        return [*wildcards, *exact]


def _reject_awaitable(result: Any, kind: str) -> None:
    if not inspect.isawaitable(result):
        return
    # Close coroutine objects before rejecting them so callers do not see
    # "coroutine was never awaited" warnings.
    close = getattr(result, "close", None)
    if callable(close):
        close()
    raise TypeError(f"model conversion cannot execute async {kind} hooks")


def _require_hook_callable(middleware: object, name: str) -> Callable[..., Any]:
    hook = getattr(middleware, name, None)
    if not callable(hook):
        raise TypeError(f"hook middleware must provide callable {name}()")
    return hook
