# backend/tests/conftest.py
"""
Pytest configuration for solid-notify backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import solid_notify.*` works correctly in tests.
- Ensures notification environment variables are set to known values.
- Resets cached config between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set environment variables used by the notification config.
    """
    os.environ.setdefault("NOTIFY_DEFAULT_CHANNEL", "email")
    os.environ.setdefault("NOTIFY_LOG_LEVEL", "INFO")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def reset_notify_state():
    from solid_notify.channels.config import get_notify_config

    get_notify_config.cache_clear()
    yield
    get_notify_config.cache_clear()


class Collector:
    """出力された行を貯めるだけの Emitter。"""

    def __init__(self) -> None:
        self.lines = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def collector() -> Collector:
    return Collector()
