"""Single-attempt HTTP transport and provider status classification."""

from __future__ import annotations

import json
import time
from typing import Optional

import requests

from ..errors import (
    CredentialError,
    ModelNotFoundError,
    RateLimitedError,
    TransportError,
    UpstreamFailureError,
    UpstreamStatusError,
)
from ..utils import truncate_to_limit
from .types import PreparedCall, ProviderReply

DEFAULT_RETRY_AFTER_SECONDS = 60
ERROR_BODY_LIMIT = 200


def send(call: PreparedCall, timeout_seconds: Optional[float] = None) -> ProviderReply:
    """POSTs the prepared call once; non-2xx replies are returned, not raised."""
    start = time.perf_counter()
    try:
        res = requests.post(call.url, json=call.payload, headers=call.headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TransportError(f"Could not reach AI service: {exc.__class__.__name__}") from exc

    return ProviderReply(
        http_status=res.status_code,
        raw_body=res.content or b"",
        headers=dict(res.headers or {}),
        latency_ms=int((time.perf_counter() - start) * 1000),
    )


def parse_retry_after(value: Optional[str]) -> int:
    if not value:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        return int(float(value.strip()))
    except (ValueError, OverflowError):
        return DEFAULT_RETRY_AFTER_SECONDS


def upstream_error_message(reply: ProviderReply) -> str:
    body = reply.text
    message = f"AI API error: {reply.http_status}"
    try:
        data = json.loads(body)
    except ValueError:
        return truncate_to_limit(body, ERROR_BODY_LIMIT, ellipsis=False) if body else message
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return message


def classify_failure(reply: ProviderReply, not_found_hint: str) -> UpstreamStatusError:
    status = reply.http_status
    if status == 404:
        return ModelNotFoundError(f"API endpoint not found. {not_found_hint}", status)
    if status == 429:
        return RateLimitedError(parse_retry_after(reply.header("retry-after")), status)
    if status in (401, 402):
        return CredentialError(
            "API key issue or insufficient credits. Please check your API account balance.",
            status,
        )
    return UpstreamFailureError(upstream_error_message(reply), status)
