"""Pytest configuration and fixtures."""

import os

import pytest

# Modules read settings when they are imported, so the environment is set
# before any test module is collected.
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("ANTHROPIC_API_KEY", "test-anthropic-key")
os.environ.setdefault("PLANNER_ENV", "test")


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SUPABASE_URL"] = "https://test.supabase.co"
    os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-key"
    os.environ["ANTHROPIC_API_KEY"] = "test-anthropic-key"
    os.environ["PLANNER_ENV"] = "test"
