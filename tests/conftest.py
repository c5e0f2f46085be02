"""Pytest configuration and fixtures for renderdeps tests."""

import pytest

from renderdeps import RenderCall, RenderParser

VIEW = "app/views/posts/index.html"


@pytest.fixture
def view_name():
    """Name of the view file most tests analyze."""
    return VIEW


@pytest.fixture
def extract():
    """Run the extractor over render calls in one file, in order."""

    def _extract(*calls: RenderCall, name: str = VIEW, config=None) -> list[str]:
        return RenderParser(name, {"render": list(calls)}, config=config).render_calls()

    return _extract


@pytest.fixture
def parser(view_name):
    """Extractor for the default view with no calls, for per-call inspection."""
    return RenderParser(view_name, {})
