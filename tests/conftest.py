"""Shared test fixtures for the markpreview test suite.

Environment variables are fixed before any app import so the global
settings instance sees them.
"""

import os

os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_FORMAT"] = "text"
os.environ["ASCIIDOC_RENDERER"] = ""

import pytest
from fastapi.testclient import TestClient

from markpreview.main import app
from markpreview.services.markdown_service import register_asciidoc_renderer


@pytest.fixture()
def client():
    """FastAPI TestClient running the app lifespan."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def _reset_asciidoc_renderer():
    """Tests that register a renderer must not leak it into other tests."""
    yield
    register_asciidoc_renderer(None)
