"""Models for the Data Protection 2020-01-alpha API."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..base import ResourceModel
from ..fields import FieldSpec, array_of, extend_table, mapping_of, model_of, to_any, to_text


class ErrorAdditionalInfo1(ResourceModel):
    """The resource management error additional info."""

    info: Any | None = None
    type: str | None = None

    __field_table__ = (
        FieldSpec("info", "Info", "info", to_any, read_only=True),
        FieldSpec("type", "Type", "type", to_text, read_only=True),
    )


class Error(ResourceModel):
    """The resource management error response."""

    additional_info: list[ErrorAdditionalInfo1] | None = Field(default_factory=list, alias="additionalInfo")
    code: str | None = None
    detail: list[Error] | None = Field(default_factory=list)
    message: str | None = None
    target: str | None = None

    __field_table__ = (
        FieldSpec(
            "additional_info",
            "AdditionalInfo",
            "additionalInfo",
            array_of(model_of(ErrorAdditionalInfo1)),
            read_only=True,
        ),
        FieldSpec("code", "Code", "code", to_text, read_only=True),
        FieldSpec("message", "Message", "message", to_text, read_only=True),
        FieldSpec("target", "Target", "target", to_text, read_only=True),
        FieldSpec("detail", "Detail", "details", array_of(model_of(lambda: Error)), read_only=True),
    )


class CloudError(ResourceModel):
    """Envelope the service wraps around error responses."""

    error: Error | None = None

    __field_table__ = (FieldSpec("error", "Error", "error", model_of(Error)),)


class DppResourceList(ResourceModel):
    """Base for paged list responses."""

    next_link: str | None = Field(default=None, alias="nextLink")

    __field_table__ = (FieldSpec("next_link", "NextLink", "nextLink", to_text),)

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_link)


class ResourceOperationGateKeeper(ResourceModel):
    description: str | None = None
    provisioning_state: str | None = Field(default=None, alias="provisioningState")
    resource_guard_operation_requests: list[str] | None = Field(
        default_factory=list, alias="resourceGuardOperationRequests"
    )

    __field_table__ = (
        FieldSpec("description", "Description", "description", to_text),
        FieldSpec("provisioning_state", "ProvisioningState", "provisioningState", to_text, read_only=True),
        FieldSpec(
            "resource_guard_operation_requests",
            "ResourceGuardOperationRequest",
            "resourceGuardOperationRequests",
            array_of(to_text),
        ),
    )


class ResourceOperationGateKeeperResource(ResourceModel):
    e_tag: str | None = Field(default=None, alias="eTag")
    id: str | None = None
    location: str | None = None
    name: str | None = None
    properties: ResourceOperationGateKeeper | None = None
    tags: dict[str, str] | None = None
    type: str | None = None

    __field_table__ = (
        FieldSpec("e_tag", "ETag", "eTag", to_text),
        FieldSpec("id", "Id", "id", to_text, read_only=True),
        FieldSpec("location", "Location", "location", to_text),
        FieldSpec("name", "Name", "name", to_text, read_only=True),
        FieldSpec("properties", "Property", "properties", model_of(ResourceOperationGateKeeper)),
        FieldSpec("tags", "Tag", "tags", mapping_of(to_text)),
        FieldSpec("type", "Type", "type", to_text, read_only=True),
    )


class ResourceOperationGateKeeperResourceList(DppResourceList):
    """List of ResourceOperationGateKeeper resources."""

    value: list[ResourceOperationGateKeeperResource] | None = Field(default_factory=list)

    __field_table__ = extend_table(
        DppResourceList.__field_table__,
        FieldSpec("value", "Value", "value", array_of(model_of(ResourceOperationGateKeeperResource))),
    )
