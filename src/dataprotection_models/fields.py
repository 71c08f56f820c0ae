"""Per-field conversion tables and converters."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ConfigDict, TypeAdapter, ValidationError

from .content import ShellObject
from .errors import ConversionError, JsonParseError

if TYPE_CHECKING:
    from .base import ResourceModel
    from .codec import ModelCodec

Converter = Callable[[Any, "ModelCodec"], Any]

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200


@dataclass(frozen=True, slots=True)
class FieldSpec:
    attribute: str
    property_name: str
    serialized_name: str
    convert: Converter
    read_only: bool = False
    required: bool = False
    header: bool = False
    header_name: str | None = None

    @property
    def lookup_names(self) -> tuple[str, ...]:
        names: list[str] = []
        for name in (self.property_name, self.serialized_name, self.attribute, self.header_name):
            if name is not None and name not in names:
                names.append(name)
        return tuple(names)


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    adapter = _adapter_cache.get(target)
    if adapter is None:
        if target is str:
            adapter = TypeAdapter(str, config=ConfigDict(coerce_numbers_to_str=True))
        else:
            adapter = TypeAdapter(target)
        _adapter_cache[target] = adapter
    return adapter


def sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, ShellObject):
        value = value.properties

    if isinstance(value, Mapping):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, (list, tuple)):
        sampled_items = [sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


def _coerce(target: type, value: Any) -> Any:
    if value is None:
        return None
    try:
        return _adapter_for(target).validate_python(value)
    except ValidationError as error:
        raise ConversionError(
            model_name=target.__name__,
            target=target.__name__,
            errors=error.errors(include_url=False),
            raw_sample=sample_payload(value),
            reason=error.errors()[0]["msg"] if error.error_count() else None,
        ) from error


def to_text(value: Any, _codec: ModelCodec | None = None) -> str | None:
    if isinstance(value, bool):
        return str(value)
    return _coerce(str, value)


def to_int(value: Any, _codec: ModelCodec | None = None) -> int | None:
    return _coerce(int, value)


def to_bool(value: Any, _codec: ModelCodec | None = None) -> bool | None:
    return _coerce(bool, value)


def to_any(value: Any, _codec: ModelCodec | None = None) -> Any:
    if isinstance(value, ShellObject):
        return dict(value.properties)
    return value


def _elements(value: Any) -> Iterable[Any]:
    # Only ordered sequences are spread; anything else is one element.
    if isinstance(value, (list, tuple)):
        return value
    return (value,)


def array_of(convert: Converter) -> Converter:
    def _convert_array(value: Any, codec: ModelCodec) -> list[Any] | None:
        if value is None:
            return None

        converted: list[Any] = []
        for index, item in enumerate(_elements(value)):
            try:
                converted.append(convert(item, codec))
            except ConversionError as error:
                error.prepend(index)
                raise
        return converted

    return _convert_array


def mapping_of(convert: Converter) -> Converter:
    def _convert_mapping(value: Any, codec: ModelCodec) -> dict[str, Any] | None:
        if value is None:
            return None
        if isinstance(value, ShellObject):
            value = value.properties
        if not isinstance(value, Mapping):
            raise ConversionError(
                model_name="dict",
                target="dict",
                raw_sample=sample_payload(value),
                reason="expected a mapping",
            )

        converted: dict[str, Any] = {}
        for key, item in value.items():
            try:
                converted[str(key)] = convert(item, codec)
            except ConversionError as error:
                error.prepend(str(key))
                raise
        return converted

    return _convert_mapping


def model_of(model_type: Callable[[], type[ResourceModel]] | type[ResourceModel]) -> Converter:
    """Convert nested values through ``model_type``'s own entry point.

    ``model_type`` may be a zero-argument callable returning the class, which
    lets a model reference itself (``Error.detail``) or a class defined later
    in the module. A string that is not a JSON object is a conversion failure
    of the enclosing field, not a top-level parse error.
    """

    def _convert_model(value: Any, codec: ModelCodec) -> Any:
        target = model_type if isinstance(model_type, type) else model_type()
        try:
            return codec.convert(target, value)
        except JsonParseError as error:
            raise ConversionError(
                model_name=target.__name__,
                target=target.__name__,
                raw_sample=error.raw_sample,
                reason=error.reason,
            ) from error

    return _convert_model


def extend_table(base: Iterable[FieldSpec], *owned: FieldSpec) -> tuple[FieldSpec, ...]:
    attributes = {spec.attribute for spec in owned}
    return (*(spec for spec in base if spec.attribute not in attributes), *owned)
