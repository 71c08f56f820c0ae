"""Shared base class for Data Protection models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from .codec import ModelCodec
from .content import ShellObject
from .errors import format_location
from .fields import FieldSpec
from .protocols import ValidationListener
from .serialization import SerializationMode
from .validation import NULL_ELEMENT, REQUIRED, ValidationIssue


class ResourceModel(BaseModel):
    """Typed record mirroring one schema of the remote API.

    Each subclass declares its pydantic fields and a ``__field_table__``
    mapping those fields to their property names, wire names and
    converters. Subclasses of another model extend the parent's table, so
    inherited fields (a paging cursor, for example) are flattened into the
    child.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    __field_table__: ClassVar[tuple[FieldSpec, ...]] = ()

    @classmethod
    def deserialize_from_mapping(cls, content: Mapping[Any, Any], *, codec: ModelCodec | None = None) -> Any:
        return (codec or ModelCodec.default()).from_mapping(cls, content)

    @classmethod
    def deserialize_from_shell_object(cls, content: ShellObject, *, codec: ModelCodec | None = None) -> Any:
        return (codec or ModelCodec.default()).from_shell_object(cls, content)

    @classmethod
    def from_json_string(cls, text: str | bytes, *, codec: ModelCodec | None = None) -> Any:
        return (codec or ModelCodec.default()).from_json_string(cls, text)

    @classmethod
    def convert_from(cls, value: Any, *, codec: ModelCodec | None = None) -> Any:
        return (codec or ModelCodec.default()).convert(cls, value)

    def to_json(self, mode: SerializationMode = SerializationMode.INCLUDE_ALL) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for spec in self.__field_table__:
            if spec.header and not mode & SerializationMode.INCLUDE_HEADERS:
                continue
            if spec.read_only and not mode & SerializationMode.INCLUDE_READ_ONLY:
                continue
            if spec.attribute not in self.model_fields_set and not mode & SerializationMode.INCLUDE_UNSET:
                continue
            body[spec.serialized_name] = _dump_value(getattr(self, spec.attribute), mode)
        return body

    def to_json_string(self, mode: SerializationMode = SerializationMode.INCLUDE_ALL) -> str:
        return ModelCodec.default().to_json_string(self, mode)

    def validate_model(self, listener: ValidationListener | None = None) -> list[ValidationIssue]:
        """Check required fields and nested models without raising.

        Every issue is reported to ``listener`` as it is found and the full
        list is returned.
        """
        issues: list[ValidationIssue] = []
        self._collect_issues((), issues)
        if listener is not None:
            for issue in issues:
                listener.on_issue(issue)
        return issues

    def _collect_issues(self, location: tuple[str | int, ...], issues: list[ValidationIssue]) -> None:
        for spec in self.__field_table__:
            value = getattr(self, spec.attribute)
            field_location = (*location, spec.serialized_name)
            if value is None:
                if spec.required:
                    issues.append(
                        ValidationIssue(
                            path=format_location(field_location),
                            message=f"{spec.serialized_name} is required",
                            kind=REQUIRED,
                        )
                    )
                continue

            if isinstance(value, ResourceModel):
                value._collect_issues(field_location, issues)
            elif isinstance(value, list):
                for index, item in enumerate(value):
                    item_location = (*field_location, index)
                    if item is None:
                        issues.append(
                            ValidationIssue(
                                path=format_location(item_location),
                                message=f"{spec.serialized_name} must not contain null elements",
                                kind=NULL_ELEMENT,
                            )
                        )
                    elif isinstance(item, ResourceModel):
                        item._collect_issues(item_location, issues)


def _dump_value(value: Any, mode: SerializationMode) -> Any:
    if isinstance(value, ResourceModel):
        return value.to_json(mode)
    if isinstance(value, list):
        return [_dump_value(item, mode) for item in value]
    if isinstance(value, dict):
        return {str(key): _dump_value(item, mode) for key, item in value.items()}
    return value
