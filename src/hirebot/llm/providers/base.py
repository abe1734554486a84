"""LLM provider dialect interface."""

from __future__ import annotations

import json
from typing import Any, Protocol

from ...errors import MalformedResponseError
from ..types import GenerationRequest, PreparedCall, ProviderConfig, ProviderReply


class LLMProvider(Protocol):
    name: str
    not_found_hint: str

    def build_request(self, config: ProviderConfig, request: GenerationRequest) -> PreparedCall:
        ...

    def extract_text(self, reply: ProviderReply) -> str:
        ...


def load_envelope(reply: ProviderReply) -> Any:
    try:
        return json.loads(reply.raw_body or b"")
    except ValueError as exc:
        raise MalformedResponseError("Invalid API response format") from exc
