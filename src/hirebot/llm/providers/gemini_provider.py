"""Google Gemini REST dialect."""

from __future__ import annotations

from typing import Any, Dict

from ...errors import MalformedResponseError
from ..types import GenerationRequest, PreparedCall, ProviderConfig, ProviderReply
from .base import load_envelope


class GeminiProvider:
    name = "gemini"
    not_found_hint = (
        "Please check your GEMINI_API_KEY and GEMINI_MODEL (try gemini-1.5-flash or gemini-pro)."
    )

    def build_request(self, config: ProviderConfig, request: GenerationRequest) -> PreparedCall:
        # Gemini takes the system instruction inline and the key in the query string.
        url = f"{config.base_url.rstrip('/')}/models/{config.model}:generateContent?key={config.api_key}"
        generation_config: Dict[str, Any] = {"temperature": request.temperature}
        if request.max_output_size is not None:
            generation_config["maxOutputTokens"] = request.max_output_size
        payload = {
            "contents": [
                {"parts": [{"text": f"{request.system_instruction}\n\n{request.user_prompt}"}]}
            ],
            "generationConfig": generation_config,
        }
        return PreparedCall(url=url, payload=payload, headers={"Content-Type": "application/json"})

    def extract_text(self, reply: ProviderReply) -> str:
        data = load_envelope(reply)
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise MalformedResponseError("Invalid Gemini API response format") from exc
        if not isinstance(text, str):
            raise MalformedResponseError("Invalid Gemini API response format")
        return text.strip()
