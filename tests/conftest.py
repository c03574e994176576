"""Pytest configuration and fixtures."""

import os
import sys
import tempfile
from pathlib import Path

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Must be set before backend.app.config is imported
_DB_DIR = tempfile.mkdtemp(prefix="interview-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/test.db"
os.environ["GEMINI_API_KEY"] = ""
os.environ["GOOGLEGEMINI_API_KEY"] = ""
os.environ["LLM_MODE"] = "mock"

import pytest


class FakeGenerator:
    """TextGenerator stand-in. Each model maps to a reply string or an exception."""

    def __init__(self, replies):
        self.replies = replies
        self.calls = []

    def generate(self, model, prompt):
        self.calls.append((model, prompt))
        reply = self.replies.get(model, RuntimeError(f"unknown model {model}"))
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_generator():
    return FakeGenerator


@pytest.fixture
def app_client():
    from fastapi.testclient import TestClient

    from backend.app.db import Base, engine
    from backend.app.llm import get_gateway
    from backend.app.llm.gateway import AIGateway
    from backend.app.main import app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_gateway] = lambda: AIGateway(client=None, models=[])
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
