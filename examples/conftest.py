"""Shared pytest configuration for renderdeps examples.

Example apps extract their dependency graphs at import time, so the
``example_app`` fixture loads ``app.py`` with the ``renderdeps`` logger
already captured at DEBUG. Tests can then check which render calls an
example skipped through ``caplog``.
"""

import importlib.util
import logging
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest, caplog: pytest.LogCaptureFixture):
    """Import the app.py beside the test file, recording skipped render calls."""
    app_path = Path(request.path).parent / "app.py"
    caplog.set_level(logging.DEBUG, logger="renderdeps")

    spec = importlib.util.spec_from_file_location(f"renderdeps_example_{app_path.parent.name}", app_path)
    if spec is None or spec.loader is None:
        pytest.fail(f"cannot load example app at {app_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
