import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cryptgen import create_app  # noqa: E402
from cryptgen.routes.dungeon_api import clear_layout_cache  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    return create_app({"TESTING": True})


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "performance: generation time guardrails")


@pytest.fixture(autouse=True)
def _clear_layout_cache():
    """Cached layouts must not leak between tests that tweak app config."""
    clear_layout_cache()
    yield
    clear_layout_cache()
