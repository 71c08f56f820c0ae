"""Input accessors over loosely-typed content.

Models are populated from two kinds of input: a string-keyed mapping (a parsed
JSON body) or a shell pipeline object. Both are wrapped in an accessor that
answers one question, "is this named value present and what is it", so the
population pass never needs to know where the values came from.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import ConversionError

_MISSING = object()


@dataclass(slots=True)
class ShellObject:
    """Tagged property bag as handed over by a command shell pipeline."""

    properties: dict[str, Any] = field(default_factory=dict)
    type_names: tuple[str, ...] = ()

    @classmethod
    def from_object(cls, obj: Any, *, type_names: Iterable[str] | None = None) -> ShellObject:
        if isinstance(obj, ShellObject):
            return obj
        if isinstance(obj, Mapping):
            properties = {str(key): value for key, value in obj.items()}
        else:
            try:
                attributes = vars(obj)
            except TypeError as error:
                raise TypeError(f"cannot read properties from {type(obj).__name__}") from error
            properties = {key: value for key, value in attributes.items() if not key.startswith("_")}

        names = tuple(type_names) if type_names is not None else (type(obj).__qualname__,)
        return cls(properties=properties, type_names=names)


class _IndexedContent:
    source = "content"

    def __init__(self, values: Mapping[Any, Any], *, case_sensitive: bool = False) -> None:
        self._values = values
        self._case_sensitive = case_sensitive
        self._folded: dict[str, Any] | None = None

    def lookup(self, *names: str) -> tuple[bool, Any]:
        for name in names:
            value = self._values.get(name, _MISSING)
            if value is not _MISSING:
                return True, value

        if self._case_sensitive:
            return False, None

        folded = self._fold()
        for name in names:
            value = folded.get(name.casefold(), _MISSING)
            if value is not _MISSING:
                return True, value
        return False, None

    def keys(self) -> Iterable[str]:
        return [str(key) for key in self._values]

    def _fold(self) -> dict[str, Any]:
        if self._folded is None:
            folded: dict[str, Any] = {}
            for key, value in self._values.items():
                # First spelling wins when keys differ only by case.
                folded.setdefault(str(key).casefold(), value)
            self._folded = folded
        return self._folded


class MappingContent(_IndexedContent):
    source = "mapping"

    def __init__(self, content: Mapping[Any, Any], *, case_sensitive: bool = False) -> None:
        super().__init__(content, case_sensitive=case_sensitive)


class ShellObjectContent(_IndexedContent):
    source = "shell"

    def __init__(self, content: ShellObject, *, case_sensitive: bool = False) -> None:
        super().__init__(content.properties, case_sensitive=case_sensitive)
        self.type_names = content.type_names


def as_content(value: Any, *, model_name: str, case_sensitive: bool = False) -> MappingContent | ShellObjectContent:
    if isinstance(value, ShellObject):
        return ShellObjectContent(value, case_sensitive=case_sensitive)
    if isinstance(value, Mapping):
        return MappingContent(value, case_sensitive=case_sensitive)
    raise ConversionError(
        model_name=model_name,
        raw_sample=type(value).__name__,
        reason="expected a mapping or shell object",
    )
