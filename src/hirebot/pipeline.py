"""One generation pipeline shared by every AI-backed feature."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from . import parsing
from .errors import ConfigurationError, MalformedResponseError
from .llm.client import LLMClient
from .llm.resolver import not_configured_message
from .llm.types import GenerationRequest
from .prompts import (
    FEEDBACK_SYSTEM,
    QUESTIONS_SYSTEM,
    RESUME_SYSTEM,
    build_feedback_prompt,
    build_questions_prompt,
    build_resume_prompt,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    name: str
    schema: str
    response_key: str
    system_instruction: str
    build_prompt: Callable[[Mapping[str, Any]], str]
    temperature: float = 0.7
    max_output_size: Optional[int] = None


FEATURES: Dict[str, Feature] = {
    "questions": Feature(
        name="questions",
        schema=parsing.QUESTIONS,
        response_key="questions",
        system_instruction=QUESTIONS_SYSTEM,
        build_prompt=build_questions_prompt,
        max_output_size=2000,
    ),
    "feedback": Feature(
        name="feedback",
        schema=parsing.FEEDBACK,
        response_key="feedback",
        system_instruction=FEEDBACK_SYSTEM,
        build_prompt=build_feedback_prompt,
        max_output_size=1500,
    ),
    "resume": Feature(
        name="resume",
        schema=parsing.RESUME,
        response_key="resume",
        system_instruction=RESUME_SYSTEM,
        build_prompt=build_resume_prompt,
    ),
}


def build_generation_request(feature_name: str, payload: Mapping[str, Any]) -> GenerationRequest:
    feature = FEATURES[feature_name]
    return GenerationRequest(
        system_instruction=feature.system_instruction,
        user_prompt=feature.build_prompt(payload),
        temperature=feature.temperature,
        max_output_size=feature.max_output_size,
    )


def run_feature(client: Optional[LLMClient], feature_name: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Validates, generates and parses; returns ``{response_key: result}``.

    Validation errors are raised before the configuration check, and both
    before any network call.
    """
    feature = FEATURES[feature_name]
    request = build_generation_request(feature_name, payload)
    if client is None:
        raise ConfigurationError(not_configured_message())

    text = client.generate(request, meta={"feature": feature.name})
    if feature.schema == parsing.RESUME and not text:
        raise MalformedResponseError("AI service returned an empty resume")

    outcome = parsing.parse(feature.schema, text)
    if outcome.fallback_applied:
        logger.warning(
            "parse fallback applied: feature=%s strategy=%s chars=%s",
            feature.name,
            outcome.strategy,
            len(text),
        )
    return {feature.response_key: outcome.result}
