"""Adapters from received HTTP responses to Data Protection models."""

from __future__ import annotations

import logging
from json import JSONDecodeError
from typing import Any

import httpx

from .codec import ModelCodec
from .errors import DataProtectionModelError, RequestDetails, classify_api_error
from .models import CloudError, Error, ExportJobsTriggerAcceptedResponseHeaders

logger = logging.getLogger(__name__)


def parse_response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" not in content_type:
        return response.text

    try:
        return response.json()
    except JSONDecodeError:
        return response.text


def parse_error_body(body: Any, *, codec: ModelCodec | None = None) -> Error | None:
    if not isinstance(body, dict):
        return None

    try:
        if "error" in body:
            return CloudError.convert_from(body, codec=codec).error
        return Error.convert_from(body, codec=codec)
    except DataProtectionModelError as error:
        logger.debug("error body did not match the Error schema: %s", error)
        return None


def raise_for_error(
    response: httpx.Response,
    *,
    operation: str,
    codec: ModelCodec | None = None,
) -> None:
    if 200 <= response.status_code < 300:
        return

    body = parse_response_body(response)
    details = RequestDetails(
        operation=operation,
        method=response.request.method if _has_request(response) else None,
        url=str(response.request.url) if _has_request(response) else None,
        status_code=response.status_code,
        response_body=body,
        error=parse_error_body(body, codec=codec),
    )
    raise classify_api_error(details)


def export_jobs_trigger_headers(
    response: httpx.Response,
    *,
    codec: ModelCodec | None = None,
) -> ExportJobsTriggerAcceptedResponseHeaders:
    raise_for_error(response, operation="ExportJobs_Trigger", codec=codec)
    return ExportJobsTriggerAcceptedResponseHeaders.from_headers(response.headers, codec=codec)


def _has_request(response: httpx.Response) -> bool:
    try:
        response.request
    except RuntimeError:
        return False
    return True
