"""Response headers returned when an export-jobs trigger is accepted."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import Field

from ..base import ResourceModel
from ..codec import ModelCodec
from ..fields import FieldSpec, to_int, to_text


class ExportJobsTriggerAcceptedResponseHeaders(ResourceModel):
    location: str | None = None
    retry_after: int | None = Field(default=None, alias="retryAfter")

    __field_table__ = (
        FieldSpec("location", "Location", "location", to_text, header=True, header_name="Location"),
        FieldSpec("retry_after", "RetryAfter", "retryAfter", to_int, header=True, header_name="Retry-After"),
    )

    @classmethod
    def from_headers(
        cls,
        headers: httpx.Headers | Mapping[str, str],
        *,
        codec: ModelCodec | None = None,
    ) -> ExportJobsTriggerAcceptedResponseHeaders:
        """Populate from an HTTP header collection.

        Only the declared header fields are read; other headers on the
        response are not considered unknown keys.
        """
        normalized = headers if isinstance(headers, httpx.Headers) else httpx.Headers(headers)
        content: dict[str, Any] = {}
        for spec in cls.__field_table__:
            if spec.header_name is not None and spec.header_name in normalized:
                content[spec.header_name] = normalized[spec.header_name]
        return cls.deserialize_from_mapping(content, codec=codec)
