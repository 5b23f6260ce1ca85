"""
Repository-level pytest configuration.

Provides:
  - The `--live` switch that enables scenarios against the real site
  - Process-wide Loguru setup from config/config.yaml
  - Shared configuration fixtures
  - The `pytester` fixture for tests that run nested pytest sessions
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from sinhala_suites.ui_testing.framework.config_loader import (
    BrowserSettings,
    ConfigLoader,
    TranslatorSettings,
)
from sinhala_suites.ui_testing.framework.log_config import init_logger


pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    """Register command line options."""
    group = parser.getgroup("swifttranslator")
    group.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run scenarios against the live SwiftTranslator site (needs a browser and network)",
    )
    group.addoption(
        "--translator-config",
        action="store",
        default=None,
        help="Path to an alternative config.yaml",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session")
def config_loader(pytestconfig) -> Generator[ConfigLoader, None, None]:
    """Session-wide configuration loader."""
    config_file = pytestconfig.getoption("--translator-config")
    ConfigLoader.reset()
    loader = ConfigLoader(config_path=Path(config_file) if config_file else None)
    init_logger(config=loader)
    yield loader
    ConfigLoader.reset()


@pytest.fixture(scope="session")
def translator_settings(config_loader: ConfigLoader) -> TranslatorSettings:
    return TranslatorSettings.from_config(config_loader)


@pytest.fixture(scope="session")
def browser_settings(config_loader: ConfigLoader) -> BrowserSettings:
    return BrowserSettings.from_config(config_loader)
