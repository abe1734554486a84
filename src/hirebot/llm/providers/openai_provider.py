"""OpenAI-compatible chat completions dialect (OpenAI, Lovable gateway, custom)."""

from __future__ import annotations

from typing import Any, Dict

from ...errors import MalformedResponseError
from ..types import GenerationRequest, PreparedCall, ProviderConfig, ProviderReply
from .base import load_envelope


class OpenAICompatibleProvider:
    name = "openai"
    not_found_hint = "Please check your API configuration."

    def build_request(self, config: ProviderConfig, request: GenerationRequest) -> PreparedCall:
        payload: Dict[str, Any] = {
            "model": config.model,
            "messages": [
                {"role": "system", "content": request.system_instruction},
                {"role": "user", "content": request.user_prompt},
            ],
            "temperature": request.temperature,
        }
        if request.max_output_size is not None:
            payload["max_tokens"] = request.max_output_size
        headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }
        return PreparedCall(url=config.base_url, payload=payload, headers=headers)

    def extract_text(self, reply: ProviderReply) -> str:
        data = load_envelope(reply)
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise MalformedResponseError("Invalid API response format") from exc
        if not isinstance(content, str):
            raise MalformedResponseError("Invalid API response format")
        return content.strip()
