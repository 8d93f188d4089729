from fastapi.testclient import TestClient

import app.main as main_module
from app.config import settings


def test_lifespan_creates_tables_when_enabled(monkeypatch):
    calls = []
    monkeypatch.setattr(settings, "AUTO_CREATE_TABLES", True)
    monkeypatch.setattr(main_module, "init_db", lambda: calls.append("init"))
    monkeypatch.setattr(main_module, "close_db", lambda: calls.append("close"))

    with TestClient(main_module.app):
        assert calls == ["init"]

    assert calls == ["init", "close"]


def test_lifespan_skips_schema_creation_by_default(monkeypatch):
    calls = []
    monkeypatch.setattr(settings, "AUTO_CREATE_TABLES", False)
    monkeypatch.setattr(main_module, "init_db", lambda: calls.append("init"))
    monkeypatch.setattr(main_module, "close_db", lambda: calls.append("close"))

    with TestClient(main_module.app):
        pass

    assert calls == ["close"]
