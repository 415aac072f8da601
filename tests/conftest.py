"""Shared test fixtures and configuration.

Keeps every test away from the real config and log directories.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from tasknote.models.config_models import AppConfig

# Wednesday
TODAY = date(2024, 5, 15)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs config and log locations at *tmp_path*.

    Also clears the cached ConfigService and the logger singleton so each
    test starts from a fresh configuration.
    """
    import tasknote.utils.logger as logger_mod
    from tasknote.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("tasknote").handlers.clear()

    with (
        patch(
            "tasknote.services.config_service.user_config_dir",
            return_value=str(config_dir),
        ),
        patch("tasknote.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("tasknote").handlers.clear()


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture()
def task_file(tmp_path):
    """A small markdown document with one task on line 3."""
    path = tmp_path / "todo.md"
    path.write_text(
        "# Groceries\n"
        "\n"
        "- [ ] #task Buy milk  [priority:: high]  [due:: 2024-05-20]\n"
        "- [ ] plain item\n",
        encoding="utf-8",
    )
    return path
