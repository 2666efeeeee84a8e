import pytest

from hostprompt import ai_clients
from hostprompt.errors import UpstreamModelFailure, UpstreamVisionFailure


def test_to_data_url():
    assert ai_clients.to_data_url("aGVsbG8=") == "data:image/jpeg;base64,aGVsbG8="
    assert ai_clients.to_data_url("data:image/png;base64,xyz") == "data:image/png;base64,xyz"


def test_missing_key_is_upstream_failure(app):
    assert ai_clients.ai_available() is False
    with pytest.raises(UpstreamModelFailure):
        ai_clients.chat_completion("sys", "hello")
    with pytest.raises(UpstreamVisionFailure):
        ai_clients.vision_completion("sys", "describe", "aGVsbG8=")


def test_empty_answer(app, monkeypatch):
    monkeypatch.setattr(ai_clients, "_openai_chat", lambda *a, **kw: "")
    with pytest.raises(UpstreamModelFailure):
        ai_clients.chat_completion("sys", "hello")
    assert ai_clients.chat_completion("sys", "hello", allow_empty=True) == ""


def test_provider_switch(app, monkeypatch):
    app.config["AI_PROVIDER"] = "anthropic"
    monkeypatch.setattr(ai_clients, "_claude_chat", lambda *a, **kw: "from claude")
    assert ai_clients.provider() == "anthropic"
    assert ai_clients.chat_completion(None, "hello") == "from claude"
