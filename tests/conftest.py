"""Shared fixtures: isolated SQLite database and a scripted translation provider."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from apitranslate.app import main as app_main
from apitranslate.app.database import Base, engine_options, get_db
from apitranslate.app.errors import TranslationFailure
from apitranslate.app.translator import Translator, get_translator

# Short lock wait so store timeouts are quick to exercise.
TEST_STORE_TIMEOUT_SECONDS = 0.5


class FakeTranslator(Translator):
    """Provider stand-in returning canned translations or a scripted failure."""

    def __init__(self) -> None:
        self.translations: dict[str, str] = {}
        self.error: str | None = None
        self.delay_seconds = 0.0
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, from_language: str, to_language: str) -> str:
        self.calls.append((text, from_language, to_language))
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise TranslationFailure(self.error)
        return self.translations.get(text, f"[{to_language}] {text}")


@pytest.fixture
def fake_translator() -> FakeTranslator:
    """Provider double shared by the app under test and the test body."""
    return FakeTranslator()


@pytest.fixture
def db_setup(tmp_path: Path) -> tuple[sessionmaker, Any]:
    """Create a fresh SQLite database per test to keep tests independent."""
    db_file = tmp_path / "test.db"
    url = f"sqlite:///{db_file}"
    engine = create_engine(url, future=True, **engine_options(url, TEST_STORE_TIMEOUT_SECONDS))
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal, engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(
    db_setup: tuple[sessionmaker, Any],
    fake_translator: FakeTranslator,
    monkeypatch: pytest.MonkeyPatch,
) -> TestClient:
    """Wire FastAPI dependency overrides to the test database and fake provider."""
    db_session_factory, test_engine = db_setup

    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    # Ensure startup table creation uses this test DB engine.
    monkeypatch.setattr(app_main, "engine", test_engine)

    app_main.app.dependency_overrides[get_db] = override_get_db
    app_main.app.dependency_overrides[get_translator] = lambda: fake_translator
    try:
        with TestClient(app_main.app) as test_client:
            yield test_client
    finally:
        app_main.app.dependency_overrides.clear()
