import pytest


@pytest.fixture
def clean_provider_env(monkeypatch):
    for key in (
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "GEMINI_MODEL",
        "OPENAI_API_KEY",
        "OPENAI_API_URL",
        "LOVABLE_API_KEY",
        "AI_API_KEY",
        "AI_API_URL",
        "AI_MODEL",
    ):
        monkeypatch.delenv(key, raising=False)
