"""Data Protection API models."""

from __future__ import annotations

from .api_2020_01_alpha import (
    CloudError,
    DppResourceList,
    Error,
    ErrorAdditionalInfo1,
    ResourceOperationGateKeeper,
    ResourceOperationGateKeeperResource,
    ResourceOperationGateKeeperResourceList,
)
from .export_jobs import ExportJobsTriggerAcceptedResponseHeaders

__all__ = [
    "CloudError",
    "DppResourceList",
    "Error",
    "ErrorAdditionalInfo1",
    "ExportJobsTriggerAcceptedResponseHeaders",
    "ResourceOperationGateKeeper",
    "ResourceOperationGateKeeperResource",
    "ResourceOperationGateKeeperResourceList",
]
