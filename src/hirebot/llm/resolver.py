"""Picks the active LLM provider from prioritized credential env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .types import GEMINI, OPENAI_COMPATIBLE, ProviderConfig

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
LOVABLE_CHAT_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"


@dataclass(frozen=True)
class CredentialSource:
    key_vars: Tuple[str, ...]
    dialect: str
    url_var: Optional[str]
    default_url: str
    model_var: str
    default_model: str


# Checked in order; the first source with a non-empty key wins.
CREDENTIAL_SOURCES: Tuple[CredentialSource, ...] = (
    CredentialSource(("GEMINI_API_KEY", "GOOGLE_API_KEY"), GEMINI, None, GEMINI_BASE_URL, "GEMINI_MODEL", "gemini-1.5-flash"),
    CredentialSource(("OPENAI_API_KEY",), OPENAI_COMPATIBLE, "OPENAI_API_URL", OPENAI_CHAT_URL, "AI_MODEL", "gpt-3.5-turbo"),
    CredentialSource(("LOVABLE_API_KEY",), OPENAI_COMPATIBLE, "AI_API_URL", LOVABLE_CHAT_URL, "AI_MODEL", "google/gemini-2.5-flash"),
    CredentialSource(("AI_API_KEY",), OPENAI_COMPATIBLE, "AI_API_URL", OPENAI_CHAT_URL, "AI_MODEL", "gpt-3.5-turbo"),
)

CREDENTIAL_VARS = ("GEMINI_API_KEY", "OPENAI_API_KEY", "LOVABLE_API_KEY", "AI_API_KEY")


def _env(environ: Mapping[str, str], name: Optional[str]) -> str:
    if not name:
        return ""
    return (environ.get(name) or "").strip()


def resolve_provider_config(environ: Optional[Mapping[str, str]] = None) -> Optional[ProviderConfig]:
    """Returns the first configured provider, or None when no credential is set."""
    env = os.environ if environ is None else environ
    for source in CREDENTIAL_SOURCES:
        for key_var in source.key_vars:
            api_key = _env(env, key_var)
            if not api_key:
                continue
            return ProviderConfig(
                dialect=source.dialect,
                api_key=api_key,
                base_url=_env(env, source.url_var) or source.default_url,
                model=_env(env, source.model_var) or source.default_model,
                source=key_var,
            )
    return None


def not_configured_message() -> str:
    names = ", ".join(CREDENTIAL_VARS[:-1]) + f", or {CREDENTIAL_VARS[-1]}"
    return f"AI service not configured. Please add {names} to your .env file."
