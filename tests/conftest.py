# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.llm.client import Completion
from app.settings import Settings, get_settings


# --- A stand-in for the remote model: canned answer, records what it was sent ---
class FakeModelClient:
    def __init__(self, content: str = "", tokens: int = 42, error: Exception | None = None):
        self.content = content
        self.tokens = tokens
        self.error = error
        self.calls = []

    def complete(self, messages, *, model, max_tokens, temperature):
        self.calls.append(
            {"messages": messages, "model": model, "max_tokens": max_tokens, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        return Completion(content=self.content, tokens_used=self.tokens)


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", app_env="test")


# --- Override FastAPI's settings dependency so nothing is read from the real env ---
@pytest.fixture(autouse=True)
def override_settings(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_model(monkeypatch):
    """
    Route every model call to one FakeModelClient.
    Tests set .content / .error on it before calling the API.
    """
    fake = FakeModelClient()
    from app.routers import ocr, render
    monkeypatch.setattr(ocr, "build_model_client", lambda s: fake)
    monkeypatch.setattr(render, "build_model_client", lambda s: fake)
    return fake
