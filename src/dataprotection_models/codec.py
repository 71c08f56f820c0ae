"""Model codec: populates typed models from loosely-typed content."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from .config import CodecConfig
from .content import MappingContent, ShellObject, ShellObjectContent, as_content
from .errors import ConversionError, JsonParseError, UnknownFieldError
from .fields import sample_payload
from .hooks import DeserializeCall, HookRegistry
from .protocols import ContentAccessor
from .serialization import SerializationMode

if TYPE_CHECKING:
    from .base import ResourceModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="ResourceModel")


class ModelCodec:
    """Converts between raw content and ``ResourceModel`` instances.

    A codec carries the hooks and configuration applied to every model it
    builds, nested models included. ``ModelCodec.default()`` is a shared
    instance without hooks for callers that do not need customization.
    """

    _default: ModelCodec | None = None

    def __init__(
        self,
        *,
        hook_registry: HookRegistry | None = None,
        config: CodecConfig | None = None,
    ) -> None:
        self.hooks = hook_registry if hook_registry is not None else HookRegistry()
        self.config = config if config is not None else CodecConfig()

    @classmethod
    def default(cls) -> ModelCodec:
        if cls._default is None:
            cls._default = cls()
        return cls._default

    def from_mapping(self, model_type: type[ModelT], content: Mapping[Any, Any]) -> ModelT:
        accessor = MappingContent(content, case_sensitive=self.config.case_sensitive)
        return self._populate(model_type, accessor)

    def from_shell_object(self, model_type: type[ModelT], content: ShellObject) -> ModelT:
        accessor = ShellObjectContent(content, case_sensitive=self.config.case_sensitive)
        return self._populate(model_type, accessor)

    def from_json_string(self, model_type: type[ModelT], text: str | bytes) -> ModelT:
        return self.from_mapping(model_type, self.parse_json(model_type, text))

    def convert(self, model_type: type[ModelT], value: Any) -> ModelT | None:
        """Convert any supported raw value into ``model_type``.

        Instances pass through unchanged; ``None`` stays ``None``; mappings,
        shell objects and JSON text are deserialized.
        """
        if value is None:
            return None
        if isinstance(value, model_type):
            return value
        if isinstance(value, (str, bytes)):
            return self.from_json_string(model_type, value)
        accessor = as_content(
            value,
            model_name=model_type.__name__,
            case_sensitive=self.config.case_sensitive,
        )
        return self._populate(model_type, accessor)

    def to_json_string(self, model: ResourceModel, mode: SerializationMode | None = None) -> str:
        selected = mode if mode is not None else self.config.serialization_mode
        return json.dumps(model.to_json(selected), separators=(",", ":"))

    @staticmethod
    def parse_json(model_type: type[ResourceModel], text: str | bytes) -> dict[str, Any]:
        try:
            parsed = json.loads(text)
        except (TypeError, ValueError) as error:
            raise JsonParseError(
                f"invalid JSON text: {error}",
                model_name=model_type.__name__,
                raw_sample=sample_payload(text if isinstance(text, str) else repr(text)),
            ) from error

        if not isinstance(parsed, dict):
            raise JsonParseError(
                f"expected a JSON object, got {type(parsed).__name__}",
                model_name=model_type.__name__,
                raw_sample=sample_payload(parsed),
            )
        return parsed

    def _populate(self, model_type: type[ModelT], content: ContentAccessor) -> ModelT:
        model_name = model_type.__name__
        call = DeserializeCall(model_name=model_name, source=content.source, content=content)

        if self.hooks.run_before(call):
            logger.debug("%s deserialization stopped by before hook", model_name)
            return model_type.model_construct(**call.values)

        table = model_type.__field_table__
        unknown = self._unknown_keys(table, content)
        if unknown:
            if self.config.strict:
                error = UnknownFieldError(model_name=model_name, keys=unknown)
                self.hooks.run_error(call, error)
                raise error
            logger.debug("ignoring unknown keys for %s: %s", model_name, ", ".join(unknown))

        values = dict(call.values)
        for spec in table:
            found, raw = content.lookup(*spec.lookup_names)
            if not found:
                continue
            try:
                values[spec.attribute] = spec.convert(raw, self)
            except ConversionError as error:
                error.prepend(spec.serialized_name, model_name=model_name)
                self.hooks.run_error(call, error)
                raise

        instance = model_type.model_construct(**values)
        self.hooks.run_after(call, instance)
        return instance

    def _unknown_keys(self, table: Any, content: ContentAccessor) -> list[str]:
        known: set[str] = set()
        for spec in table:
            for name in spec.lookup_names:
                known.add(name if self.config.case_sensitive else name.casefold())

        unknown: list[str] = []
        for key in content.keys():
            folded = key if self.config.case_sensitive else key.casefold()
            if folded not in known:
                unknown.append(key)
        return unknown
