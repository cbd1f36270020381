"""Shared test fixtures for the simlog test suite."""

import io
import sys
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"

# Allow running the suite from a checkout without `pip install -e .`
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from simlog import registry as _registry_mod  # noqa: E402
from simlog.registry import ComponentRegistry  # noqa: E402


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolate_default_registry(monkeypatch):
    """Give every test a clean SIMLOG and no default registry.

    Components created through the default registry would otherwise
    leak between tests and trip DuplicateComponentError.
    """
    monkeypatch.delenv("SIMLOG", raising=False)
    saved = _registry_mod._registry
    _registry_mod._registry = None
    yield
    _registry_mod._registry = saved


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def registry(buf):
    """An unconfigured registry writing to buf."""
    return ComponentRegistry(file=buf)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: tests that spawn a subprocess")
