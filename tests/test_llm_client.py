import logging

import pytest
import requests

from hirebot.errors import MalformedResponseError, RateLimitedError, TransportError, UpstreamFailureError
from hirebot.llm.client import LLMClient
from hirebot.llm.types import GenerationRequest, ProviderConfig

from fakes import DummyResponse, FakePost, gemini_reply, openai_reply

REQUEST = GenerationRequest(system_instruction="sys", user_prompt="prompt", temperature=0.7, max_output_size=100)


def _client(dialect="openai", timeout_seconds=None):
    config = ProviderConfig(
        dialect=dialect,
        api_key="k",
        base_url="https://llm.example/v1" if dialect == "gemini" else "https://llm.example/v1/chat/completions",
        model="m",
    )
    return LLMClient(config, timeout_seconds=timeout_seconds)


def test_openai_generation_returns_extracted_text(monkeypatch):
    fake_post = FakePost(openai_reply("  hello  "))
    monkeypatch.setattr("hirebot.llm.transport.requests.post", fake_post)

    assert _client().generate(REQUEST) == "hello"
    assert len(fake_post.calls) == 1
    assert fake_post.calls[0]["url"] == "https://llm.example/v1/chat/completions"
    assert fake_post.calls[0]["timeout"] is None


def test_gemini_generation_puts_key_in_query(monkeypatch):
    fake_post = FakePost(gemini_reply("hi"))
    monkeypatch.setattr("hirebot.llm.transport.requests.post", fake_post)

    assert _client("gemini", timeout_seconds=12).generate(REQUEST) == "hi"
    assert fake_post.calls[0]["url"] == "https://llm.example/v1/models/m:generateContent?key=k"
    assert fake_post.calls[0]["timeout"] == 12


def test_non_2xx_is_classified_without_retry(monkeypatch, caplog):
    fake_post = FakePost(DummyResponse(status_code=429, text="slow down", headers={"retry-after": "5"}))
    monkeypatch.setattr("hirebot.llm.transport.requests.post", fake_post)

    with caplog.at_level(logging.ERROR, logger="hirebot.llm.client"):
        with pytest.raises(RateLimitedError) as exc_info:
            _client().generate(REQUEST)

    assert exc_info.value.retry_after == 5
    assert len(fake_post.calls) == 1
    assert "status=429" in caplog.text


def test_server_error_logs_truncated_body(monkeypatch, caplog):
    fake_post = FakePost(DummyResponse(status_code=500, text="boom" * 200))
    monkeypatch.setattr("hirebot.llm.transport.requests.post", fake_post)

    with caplog.at_level(logging.ERROR, logger="hirebot.llm.client"):
        with pytest.raises(UpstreamFailureError):
            _client().generate(REQUEST)

    assert "boom" * 200 not in caplog.text


def test_network_failure_becomes_transport_error(monkeypatch):
    fake_post = FakePost(requests.ConnectionError("refused"))
    monkeypatch.setattr("hirebot.llm.transport.requests.post", fake_post)

    with pytest.raises(TransportError):
        _client().generate(REQUEST)


def test_unexpected_envelope_is_malformed(monkeypatch):
    fake_post = FakePost(DummyResponse(status_code=200, payload={"result": "?"}))
    monkeypatch.setattr("hirebot.llm.transport.requests.post", fake_post)

    with pytest.raises(MalformedResponseError):
        _client().generate(REQUEST)


def test_unknown_dialect_is_rejected():
    config = ProviderConfig(dialect="anthropic", api_key="k", base_url="u", model="m")
    with pytest.raises(ValueError):
        LLMClient(config)
