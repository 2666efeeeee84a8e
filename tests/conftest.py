import pytest

from hostprompt import create_app, storage
from hostprompt.config import TestConfig
from hostprompt.extensions import db


class FakeLLM:
    """Stands in for hostprompt.ai_clients; records every call."""

    def __init__(self):
        self.reply = "Honestly love how this spot turned out."
        self.error = None
        self.calls = []
        self.vision_reply = "A wooden deck facing the ocean at sunset, two chairs and a small table."
        self.vision_error = None
        self.vision_calls = []

    def chat(self, system, user, **kwargs):
        self.calls.append({"system": system, "user": user, **kwargs})
        if self.error is not None:
            raise self.error
        return self.reply

    def vision(self, system, prompt, image_data, **kwargs):
        self.vision_calls.append({"system": system, "prompt": prompt, "image_data": image_data})
        if self.vision_error is not None:
            raise self.vision_error
        return self.vision_reply

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    monkeypatch.delenv("APP_CONFIG_FILE", raising=False)

    app = create_app(TestConfig)
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    yield app
    db.session.remove()
    db.drop_all()
    ctx.pop()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr("hostprompt.ai_clients.chat_completion", fake.chat)
    monkeypatch.setattr("hostprompt.ai_clients.vision_completion", fake.vision)
    return fake


@pytest.fixture
def make_property(app):
    def _make(user_id=1, photos=None, **overrides):
        fields = {
            "name": "Driftwood Cottage",
            "location": "Cannon Beach, Oregon",
            "bedrooms": 2,
            "bathrooms": 1.5,
            "description": "Small cottage two blocks from the beach.",
            "status": "active",
            "amenities": ["WiFi", "Fire pit", "Outdoor shower"],
            "saved_hashtags": [],
            "host_signature": "",
        }
        fields.update(overrides)
        return storage.create_property(user_id, fields, photos)

    return _make
