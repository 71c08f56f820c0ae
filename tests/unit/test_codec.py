from __future__ import annotations

import pytest

from dataprotection_models import (
    CodecConfig,
    ConversionError,
    Error,
    JsonParseError,
    ModelCodec,
    ResourceModel,
    SerializationMode,
    ShellObject,
    UnknownFieldError,
)
from dataprotection_models.fields import FieldSpec, to_bool


def test_unknown_keys_are_ignored_by_default() -> None:
    error = Error.deserialize_from_mapping({"code": "X", "innerError": {"trace": "abc"}})

    assert error.code == "X"
    assert "innerError" not in error.to_json()


def test_strict_mode_rejects_unknown_keys() -> None:
    codec = ModelCodec(config=CodecConfig(strict=True))

    with pytest.raises(UnknownFieldError) as caught:
        Error.deserialize_from_mapping({"code": "X", "innerError": {}}, codec=codec)

    assert caught.value.keys == ["innerError"]
    assert caught.value.model_name == "Error"


def test_strict_mode_applies_to_nested_models() -> None:
    codec = ModelCodec(config=CodecConfig(strict=True))

    with pytest.raises(UnknownFieldError) as caught:
        Error.deserialize_from_mapping({"code": "X", "details": [{"code": "Y", "severity": "high"}]}, codec=codec)

    assert caught.value.location == ("details", 0)
    assert caught.value.model_name == "Error"


def test_strict_mode_accepts_every_declared_spelling() -> None:
    codec = ModelCodec(config=CodecConfig(strict=True))

    error = Error.deserialize_from_mapping(
        {"Code": "A", "message": "m", "additional_info": [], "DETAILS": []},
        codec=codec,
    )

    assert error.code == "A"
    assert error.additional_info == []


def test_case_sensitive_lookup_skips_other_spellings() -> None:
    codec = ModelCodec(config=CodecConfig(case_sensitive=True))

    error = Error.deserialize_from_mapping({"CODE": "X", "message": "m"}, codec=codec)

    assert error.code is None
    assert error.message == "m"


def test_exact_key_wins_over_case_insensitive_match() -> None:
    error = Error.deserialize_from_mapping({"code": "wire", "CODE": "shouting"})

    assert error.code == "wire"


def test_invalid_json_text_raises_parse_error() -> None:
    with pytest.raises(JsonParseError) as caught:
        Error.from_json_string("{not json")

    assert caught.value.model_name == "Error"


def test_json_text_must_hold_an_object() -> None:
    with pytest.raises(JsonParseError):
        Error.from_json_string('[{"code": "X"}]')


def test_convert_from_accepts_every_supported_input() -> None:
    existing = Error(code="Same")

    assert Error.convert_from(existing) is existing
    assert Error.convert_from(None) is None
    assert Error.convert_from('{"code": "Json"}').code == "Json"
    assert Error.convert_from({"code": "Map"}).code == "Map"
    assert Error.convert_from(ShellObject(properties={"Code": "Shell"})).code == "Shell"


def test_convert_from_rejects_unsupported_input() -> None:
    with pytest.raises(ConversionError) as caught:
        Error.convert_from(12)

    assert caught.value.model_name == "Error"
    assert caught.value.raw_sample == "int"


def test_codec_serializes_with_configured_mode() -> None:
    codec = ModelCodec(config=CodecConfig(serialization_mode=SerializationMode.INCLUDE_READ_ONLY))
    error = Error.deserialize_from_mapping({"code": "X"}, codec=codec)

    assert codec.to_json_string(error) == '{"code":"X"}'
    assert codec.to_json_string(error, SerializationMode.NONE) == "{}"


def test_default_codec_is_shared() -> None:
    assert ModelCodec.default() is ModelCodec.default()


class _Toggle(ResourceModel):
    enabled: bool | None = None

    __field_table__ = (FieldSpec("enabled", "Enabled", "enabled", to_bool),)


def test_boolean_fields_coerce_common_spellings() -> None:
    assert _Toggle.deserialize_from_mapping({"Enabled": "true"}).enabled is True
    assert _Toggle.deserialize_from_mapping({"enabled": 0}).enabled is False

    with pytest.raises(ConversionError) as caught:
        _Toggle.deserialize_from_mapping({"enabled": "maybe"})

    assert caught.value.location == ("enabled",)
    assert caught.value.target == "bool"
