"""Shared LLM data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

GEMINI = "gemini"
OPENAI_COMPATIBLE = "openai"


@dataclass(frozen=True)
class ProviderConfig:
    dialect: str
    api_key: str
    base_url: str
    model: str
    source: str = ""

    def describe(self) -> Dict[str, str]:
        """Safe summary for logs and CLI output; never includes the key."""
        return {
            "dialect": self.dialect,
            "model": self.model,
            "base_url": self.base_url,
            "source": self.source,
        }


@dataclass
class GenerationRequest:
    system_instruction: str
    user_prompt: str
    temperature: float
    max_output_size: Optional[int] = None


@dataclass
class ProviderReply:
    http_status: int
    raw_body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)
    latency_ms: int = 0

    @property
    def ok(self) -> bool:
        return 200 <= self.http_status < 300

    @property
    def text(self) -> str:
        return self.raw_body.decode("utf-8", errors="replace")

    def header(self, name: str) -> Optional[str]:
        target = name.lower()
        for key, value in self.headers.items():
            if key.lower() == target:
                return value
        return None


@dataclass
class PreparedCall:
    """Wire-level request produced by a provider dialect."""

    url: str
    payload: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
