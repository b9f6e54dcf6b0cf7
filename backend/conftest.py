"""
Shared fixtures: a stand-in for the google-genai client so tests never hit the API.
"""

from types import SimpleNamespace
import pytest


class FakeModels:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(text=reply)


class FakeGeminiClient:
    def __init__(self, *replies):
        self.models = FakeModels(replies)


@pytest.fixture
def fake_client():
    """Factory: fake_client('reply 1', Exception('503 UNAVAILABLE'), ...)"""
    return FakeGeminiClient


@pytest.fixture(autouse=True)
def no_backoff_sleep(monkeypatch):
    monkeypatch.setattr("veritas_lens.services.verification_service.time.sleep", lambda seconds: None)
