"""
Shared pytest fixtures for dispnet_hash tests.

- reset_services: clears the DI container between tests
- fast_argon2: Argon2 parameters cheap enough for unit tests
- isolated_env: strips DISPNET_* variables and runs from an empty directory
"""

import os
from pathlib import Path

import pytest

from dispnet_hash.core import bootstrap
from dispnet_hash.core.models.hash import Argon2Params


@pytest.fixture(autouse=True)
def reset_services():
    """Ensure each test starts without a bootstrapped container."""
    bootstrap.reset()
    yield
    bootstrap.reset()


@pytest.fixture
def fast_argon2() -> Argon2Params:
    """Low-cost Argon2 parameters with a pinned salt."""
    return Argon2Params(time_cost=1, memory_cost=64, parallelism=1, salt=b"saltsalt")


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no DISPNET_* environment variables."""
    for key in list(os.environ):
        if key.startswith("DISPNET_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
