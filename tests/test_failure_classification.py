import json

import pytest

from hirebot.errors import CredentialError, ModelNotFoundError, RateLimitedError, UpstreamFailureError
from hirebot.llm.providers.gemini_provider import GeminiProvider
from hirebot.llm.providers.openai_provider import OpenAICompatibleProvider
from hirebot.llm.transport import classify_failure, parse_retry_after
from hirebot.llm.types import ProviderReply


def _reply(status, body="", headers=None):
    return ProviderReply(http_status=status, raw_body=body.encode("utf-8"), headers=headers or {})


def test_404_names_gemini_settings_for_gemini():
    err = classify_failure(_reply(404), GeminiProvider.not_found_hint)
    assert isinstance(err, ModelNotFoundError)
    assert err.status_code == 404
    assert "GEMINI_API_KEY" in err.message and "GEMINI_MODEL" in err.message


def test_404_for_openai_points_at_api_configuration():
    err = classify_failure(_reply(404), OpenAICompatibleProvider.not_found_hint)
    assert err.message == "API endpoint not found. Please check your API configuration."


def test_429_reads_retry_after_header_case_insensitively():
    err = classify_failure(_reply(429, headers={"Retry-After": "30"}), "")
    assert isinstance(err, RateLimitedError)
    assert err.status_code == 429
    assert err.to_payload() == {
        "message": "Rate limit exceeded. Please wait 30 seconds before trying again.",
        "retryAfter": 30,
    }


def test_429_defaults_to_sixty_seconds():
    err = classify_failure(_reply(429), "")
    assert err.retry_after == 60
    assert "60 seconds" in err.message


@pytest.mark.parametrize("value,expected", [(None, 60), ("", 60), ("15", 15), ("2.0", 2), ("soon", 60), ("inf", 60), ("1e400", 60)])
def test_parse_retry_after(value, expected):
    assert parse_retry_after(value) == expected


@pytest.mark.parametrize("status", [401, 402])
def test_credential_statuses_map_to_402(status):
    err = classify_failure(_reply(status, '{"error": {"message": "bad key"}}'), "")
    assert isinstance(err, CredentialError)
    assert err.status_code == 402
    assert err.provider_status == status
    assert "insufficient credits" in err.message


def test_other_status_uses_provider_error_message():
    body = json.dumps({"error": {"message": "The model is overloaded"}})
    err = classify_failure(_reply(503, body), "")
    assert isinstance(err, UpstreamFailureError)
    assert err.status_code == 500
    assert err.message == "The model is overloaded"


def test_other_status_truncates_raw_body():
    err = classify_failure(_reply(500, "x" * 500), "")
    assert err.message == "x" * 200


def test_other_status_json_without_error_message_uses_status():
    err = classify_failure(_reply(400, '{"detail": "nope"}'), "")
    assert err.message == "AI API error: 400"


def test_other_status_empty_body_uses_status():
    err = classify_failure(_reply(502), "")
    assert err.message == "AI API error: 502"
