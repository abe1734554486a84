"""Provider-bound LLM client: build request, send once, classify, extract."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..errors import MalformedResponseError, TransportError
from ..utils import truncate_to_limit
from . import transport
from .providers.base import LLMProvider
from .providers.gemini_provider import GeminiProvider
from .providers.openai_provider import OpenAICompatibleProvider
from .types import GEMINI, OPENAI_COMPATIBLE, GenerationRequest, ProviderConfig

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS: Dict[str, LLMProvider] = {
    GEMINI: GeminiProvider(),
    OPENAI_COMPATIBLE: OpenAICompatibleProvider(),
}


class LLMClient:
    def __init__(
        self,
        config: ProviderConfig,
        timeout_seconds: Optional[float] = None,
        providers: Mapping[str, LLMProvider] | None = None,
    ) -> None:
        available = dict(providers or DEFAULT_PROVIDERS)
        if config.dialect not in available:
            raise ValueError(f"Unsupported provider dialect: {config.dialect}")
        self.config = config
        self.provider = available[config.dialect]
        self.timeout_seconds = timeout_seconds

    def generate(self, request: GenerationRequest, meta: Dict[str, Any] | None = None) -> str:
        meta = meta or {}
        call = self.provider.build_request(self.config, request)
        try:
            reply = transport.send(call, timeout_seconds=self.timeout_seconds)
        except TransportError as exc:
            logger.error(
                "AI API unreachable: dialect=%s feature=%s error=%s",
                self.provider.name,
                meta.get("feature"),
                type(exc.__cause__).__name__,
            )
            raise

        if not reply.ok:
            logger.error(
                "AI API error: status=%s dialect=%s model=%s feature=%s body=%s",
                reply.http_status,
                self.provider.name,
                self.config.model,
                meta.get("feature"),
                truncate_to_limit(reply.text, transport.ERROR_BODY_LIMIT),
            )
            raise transport.classify_failure(reply, self.provider.not_found_hint)

        try:
            text = self.provider.extract_text(reply)
        except MalformedResponseError:
            logger.error(
                "Unexpected AI response envelope: dialect=%s feature=%s body=%s",
                self.provider.name,
                meta.get("feature"),
                truncate_to_limit(reply.text, transport.ERROR_BODY_LIMIT),
            )
            raise

        logger.info(
            "AI generation ok: feature=%s dialect=%s model=%s latency_ms=%s chars=%s",
            meta.get("feature"),
            self.provider.name,
            self.config.model,
            reply.latency_ms,
            len(text),
        )
        return text
