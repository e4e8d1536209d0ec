"""Pytest configuration and fixtures.

Provides environment isolation and logging capture helpers. All fixtures
here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from resulty import config as config_module

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resulty_env(request, monkeypatch):
    """Ensure a clean RESULTY_* environment and a fresh cached config.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(config_module.ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    config_module.reset_environment_config()
    yield
    config_module.reset_environment_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the resulty loggers (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="resulty")
    return caplog
