from __future__ import annotations

import pytest

from dataprotection_models import (
    CollectingListener,
    ConversionError,
    DppResourceList,
    HookRegistry,
    ModelCodec,
    ResourceModel,
    ResourceOperationGateKeeper,
    ResourceOperationGateKeeperResource,
    ResourceOperationGateKeeperResourceList,
    SerializationMode,
)
from dataprotection_models.fields import FieldSpec, array_of, model_of, to_text
from dataprotection_models.validation import NULL_ELEMENT, REQUIRED


def _list_payload() -> dict[str, object]:
    return {
        "nextLink": "https://management.azure.com/subscriptions/sub/providers?$skiptoken=abc",
        "value": [
            {
                "id": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.DataProtection/resourceOperationGateKeepers/gk1",
                "name": "gk1",
                "type": "Microsoft.DataProtection/resourceOperationGateKeepers",
                "location": "westus",
                "eTag": "W/\"1\"",
                "tags": {"env": "prod", "tier": 2},
                "properties": {
                    "description": "guards deletes",
                    "provisioningState": "Succeeded",
                    "resourceGuardOperationRequests": ["deleteBackupInstance", "disableSoftDelete"],
                },
            },
            {"name": "gk2"},
        ],
    }


def test_list_flattens_paging_cursor_and_owned_values() -> None:
    page = ResourceOperationGateKeeperResourceList.deserialize_from_mapping(_list_payload())

    assert isinstance(page, DppResourceList)
    assert page.has_next_page
    assert page.next_link.endswith("$skiptoken=abc")
    assert [item.name for item in page.value] == ["gk1", "gk2"]

    first = page.value[0]
    assert isinstance(first, ResourceOperationGateKeeperResource)
    assert first.e_tag == 'W/"1"'
    assert first.tags == {"env": "prod", "tier": "2"}
    assert isinstance(first.properties, ResourceOperationGateKeeper)
    assert first.properties.provisioning_state == "Succeeded"
    assert first.properties.resource_guard_operation_requests == [
        "deleteBackupInstance",
        "disableSoftDelete",
    ]
    assert page.value[1].properties is None


def test_last_page_has_no_cursor() -> None:
    page = ResourceOperationGateKeeperResourceList.deserialize_from_mapping({"value": []})

    assert page.next_link is None
    assert not page.has_next_page
    assert page.value == []


def test_element_failure_aborts_whole_array_with_location() -> None:
    with pytest.raises(ConversionError) as caught:
        ResourceOperationGateKeeperResourceList.deserialize_from_mapping(
            {"value": [{"name": "ok"}, {"name": {"nested": True}}]}
        )

    error = caught.value
    assert error.model_name == "ResourceOperationGateKeeperResourceList"
    assert error.location == ("value", 1, "name")
    assert error.path == "value[1].name"
    assert error.target == "str"


def test_non_mapping_element_is_rejected() -> None:
    with pytest.raises(ConversionError) as caught:
        ResourceOperationGateKeeperResourceList.deserialize_from_mapping({"value": [42]})

    assert caught.value.location == ("value", 0)


def test_plain_string_element_is_a_conversion_failure() -> None:
    registry = HookRegistry()
    failures: list[tuple[str, Exception]] = []
    registry.add_error("*", lambda call, error: failures.append((call.model_name, error)))

    with pytest.raises(ConversionError) as caught:
        ResourceOperationGateKeeperResourceList.deserialize_from_mapping(
            {"value": ["oops"]}, codec=ModelCodec(hook_registry=registry)
        )

    error = caught.value
    assert error.model_name == "ResourceOperationGateKeeperResourceList"
    assert error.location == ("value", 0)
    assert error.target == "ResourceOperationGateKeeperResource"
    assert error.raw_sample == "oops"
    assert failures == [("ResourceOperationGateKeeperResourceList", error)]


def test_plain_string_nested_model_field_reports_field_path() -> None:
    with pytest.raises(ConversionError) as caught:
        ResourceOperationGateKeeperResource.deserialize_from_mapping({"name": "gk", "properties": "pending"})

    assert caught.value.location == ("properties",)
    assert caught.value.target == "ResourceOperationGateKeeper"


def test_unordered_collections_are_not_spread_into_arrays() -> None:
    with pytest.raises(ConversionError) as caught:
        ResourceOperationGateKeeper.deserialize_from_mapping({"resourceGuardOperationRequests": {"a", "b"}})

    assert caught.value.location == ("resourceGuardOperationRequests", 0)

    kept = ResourceOperationGateKeeper.deserialize_from_mapping({"resourceGuardOperationRequests": ("a", "b")})
    assert kept.resource_guard_operation_requests == ["a", "b"]


def test_request_shape_drops_read_only_and_unset_fields() -> None:
    resource = ResourceOperationGateKeeperResource.deserialize_from_mapping(_list_payload()["value"][0])

    assert resource.to_json(SerializationMode.NONE) == {
        "eTag": 'W/"1"',
        "location": "westus",
        "properties": {
            "description": "guards deletes",
            "resourceGuardOperationRequests": ["deleteBackupInstance", "disableSoftDelete"],
        },
        "tags": {"env": "prod", "tier": "2"},
    }


def test_list_round_trip() -> None:
    page = ResourceOperationGateKeeperResourceList.deserialize_from_mapping(_list_payload())

    restored = ResourceOperationGateKeeperResourceList.from_json_string(page.to_json_string())

    assert restored == page


def test_validation_recurses_and_reports_null_elements() -> None:
    page = ResourceOperationGateKeeperResourceList.deserialize_from_mapping(_list_payload())
    page.value.append(None)
    listener = CollectingListener()

    issues = page.validate_model(listener)

    assert [issue.path for issue in issues] == ["value[2]"]
    assert issues[0].kind == NULL_ELEMENT
    assert listener.issues == issues
    assert not listener.ok


def test_valid_list_reports_no_issues() -> None:
    page = ResourceOperationGateKeeperResourceList.deserialize_from_mapping(_list_payload())

    assert page.validate_model() == []


class _Named(ResourceModel):
    name: str | None = None

    __field_table__ = (FieldSpec("name", "Name", "name", to_text, required=True),)


class _Catalog(ResourceModel):
    items: list[_Named] | None = None

    __field_table__ = (FieldSpec("items", "Item", "items", array_of(model_of(_Named))),)


def test_required_fields_are_reported_with_nested_path() -> None:
    catalog = _Catalog.deserialize_from_mapping({"items": [{"name": "a"}, {}]})

    issues = catalog.validate_model()

    assert len(issues) == 1
    assert issues[0].path == "items[1].name"
    assert issues[0].kind == REQUIRED
