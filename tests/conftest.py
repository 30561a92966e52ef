import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'component_helpers'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from component_helpers.core.config import clear_all_caches  # noqa: E402
from component_helpers.core.config.manager import ENV_PREFIX  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Run every test against the bundled defaults only."""
    for key in list(os.environ.keys()):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture()
def store() -> dict:
    return {"foo": "foo", "bar": "bar"}
