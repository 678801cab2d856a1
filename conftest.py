import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv('SENTRY_DSN', raising=False)
