"""
Pytest configuration and shared fixtures for MySite tests.
"""
import os
import sys
import json
import pytest

# Add python directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.translator import Translator


class StubTranslator(Translator):
    """Records calls and returns a canned result (or raises a canned error)."""

    def __init__(self, result="Hola", error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def translate(self, text, source, target):
        self.calls.append((text, source, target))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings():
    from core.config import Settings

    return Settings(host="127.0.0.1", port=3333, translation_base_url="https://upstream.test")


@pytest.fixture
def server_context():
    from core.context import ServerContext

    return ServerContext(server_addr="127.0.0.1:3333")


@pytest.fixture
def stub_translator():
    return StubTranslator()


@pytest.fixture
def make_client(settings, server_context):
    """Build a TestClient around an app with the given translator."""
    from fastapi.testclient import TestClient
    from core.api_server import create_app

    def _make(translator=None, raise_server_exceptions=True):
        app = create_app(settings, context=server_context, translator=translator or StubTranslator())
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def test_client(make_client, stub_translator):
    with make_client(stub_translator) as client:
        yield client


@pytest.fixture
def sample_greeting():
    return {"Name": "Ada", "Age": 36, "Hobby": "chess"}


@pytest.fixture
def sample_translation():
    return {"text": "Hello", "source": "en", "target": "es"}


@pytest.fixture
def write_config(tmp_path):
    """Write a config.json into a temp dir and return its path."""
    def _write(data):
        config_path = tmp_path / "config.json"
        with open(config_path, "w") as f:
            json.dump(data, f)
        return str(config_path)

    return _write


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("MYSITE_HOST", "MYSITE_PORT", "MYSITE_LOG_LEVEL", "TRANSLATION_BASE_URL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
