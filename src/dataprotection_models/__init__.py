"""Data Protection resource-management models.

This module uses lazy exports so lightweight utilities (for example config
parsing) can be imported without immediately importing pydantic or httpx.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "ApiError",
    "AuthError",
    "CloudError",
    "CodecConfig",
    "CollectingListener",
    "ConflictError",
    "ContentAccessor",
    "ConversionError",
    "DataProtectionModelError",
    "DeserializeCall",
    "DeserializeMiddleware",
    "DppResourceList",
    "Error",
    "ErrorAdditionalInfo1",
    "ExportJobsTriggerAcceptedResponseHeaders",
    "HookRegistry",
    "JsonParseError",
    "MappingContent",
    "ModelCodec",
    "NotFoundError",
    "ResourceModel",
    "ResourceOperationGateKeeper",
    "ResourceOperationGateKeeperResource",
    "ResourceOperationGateKeeperResourceList",
    "SerializationMode",
    "ServerError",
    "ShellObject",
    "ShellObjectContent",
    "UnknownFieldError",
    "ValidationError",
    "ValidationIssue",
    "ValidationListener",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "ResourceModel": (".base", "ResourceModel"),
    "ModelCodec": (".codec", "ModelCodec"),
    "CodecConfig": (".config", "CodecConfig"),
    "MappingContent": (".content", "MappingContent"),
    "ShellObject": (".content", "ShellObject"),
    "ShellObjectContent": (".content", "ShellObjectContent"),
    "ApiError": (".errors", "ApiError"),
    "AuthError": (".errors", "AuthError"),
    "ConflictError": (".errors", "ConflictError"),
    "ConversionError": (".errors", "ConversionError"),
    "DataProtectionModelError": (".errors", "DataProtectionModelError"),
    "JsonParseError": (".errors", "JsonParseError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "ServerError": (".errors", "ServerError"),
    "UnknownFieldError": (".errors", "UnknownFieldError"),
    "ValidationError": (".errors", "ValidationError"),
    "DeserializeCall": (".hooks", "DeserializeCall"),
    "HookRegistry": (".hooks", "HookRegistry"),
    "CloudError": (".models", "CloudError"),
    "DppResourceList": (".models", "DppResourceList"),
    "Error": (".models", "Error"),
    "ErrorAdditionalInfo1": (".models", "ErrorAdditionalInfo1"),
    "ExportJobsTriggerAcceptedResponseHeaders": (".models", "ExportJobsTriggerAcceptedResponseHeaders"),
    "ResourceOperationGateKeeper": (".models", "ResourceOperationGateKeeper"),
    "ResourceOperationGateKeeperResource": (".models", "ResourceOperationGateKeeperResource"),
    "ResourceOperationGateKeeperResourceList": (".models", "ResourceOperationGateKeeperResourceList"),
    "ContentAccessor": (".protocols", "ContentAccessor"),
    "DeserializeMiddleware": (".protocols", "DeserializeMiddleware"),
    "ValidationListener": (".protocols", "ValidationListener"),
    "SerializationMode": (".serialization", "SerializationMode"),
    "CollectingListener": (".validation", "CollectingListener"),
    "ValidationIssue": (".validation", "ValidationIssue"),
}

if TYPE_CHECKING:
    from .base import ResourceModel
    from .codec import ModelCodec
    from .config import CodecConfig
    from .content import MappingContent, ShellObject, ShellObjectContent
    from .errors import (
        ApiError,
        AuthError,
        ConflictError,
        ConversionError,
        DataProtectionModelError,
        JsonParseError,
        NotFoundError,
        ServerError,
        UnknownFieldError,
        ValidationError,
    )
    from .hooks import DeserializeCall, HookRegistry
    from .models import (
        CloudError,
        DppResourceList,
        Error,
        ErrorAdditionalInfo1,
        ExportJobsTriggerAcceptedResponseHeaders,
        ResourceOperationGateKeeper,
        ResourceOperationGateKeeperResource,
        ResourceOperationGateKeeperResourceList,
    )
    from .protocols import ContentAccessor, DeserializeMiddleware, ValidationListener
    from .serialization import SerializationMode
    from .validation import CollectingListener, ValidationIssue


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
