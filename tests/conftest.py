import pytest


@pytest.fixture(autouse=True)
def _isolate_normalization_settings(monkeypatch):
    monkeypatch.delenv("RELAY_MALFORMED_IMAGE_POLICY", raising=False)
    monkeypatch.delenv("ENABLE_RUNTIME_EVENT_LOGS", raising=False)
