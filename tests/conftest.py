"""Pytest configuration and fixtures."""

import os

import pytest

from tests.fakes.fake_supabase import FakeSupabase

# Settings are read when app modules are imported, which happens at collection
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("EVAL_ENGINE_ENV", "test")

SUPABASE_MODULES = (
    "app.db.projects",
    "app.db.satellites",
    "app.db.users",
    "app.db.wizard_progress",
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SUPABASE_URL"] = "https://test.supabase.co"
    os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-key"
    os.environ["OPENAI_API_KEY"] = "test-openai-key"
    os.environ["EVAL_ENGINE_ENV"] = "test"


@pytest.fixture
def fake_db(monkeypatch):
    """In-memory Supabase stand-in wired into every db module."""
    db = FakeSupabase()
    for module in SUPABASE_MODULES:
        monkeypatch.setattr(f"{module}.get_supabase", lambda: db)
    return db
