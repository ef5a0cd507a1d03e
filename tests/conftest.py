"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.1.1 - 2026-10-17 - Ignore developer .env files during test runs.
  v0.1.0 - 2026-10-12 - Force Qt offscreen platform for headless test runs.
"""

import os
from typing import Any


def pytest_configure(config: Any) -> None:
    """Keep Qt headless and settings independent of the developer environment."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    os.environ.setdefault("LISTAHAN_ENV_FILE", "")
