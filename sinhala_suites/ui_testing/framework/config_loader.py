"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading (config/config.yaml)
    - Environment variable override (TRANSLATOR_URL overrides translator.url)
    - Dot notation path access
    - Default value support
    - Typed, immutable settings objects for the page object and browser

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path (<repo>/config/config.yaml)
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

DEFAULT_TRANSLATOR_URL = "https://www.swifttranslator.com/"
DEFAULT_INPUT_NAME = "Input Your Singlish Text Here."
DEFAULT_OUTPUT_CSS = (
    "div.w-full.h-80.p-3.rounded-lg.ring-1.ring-slate-300.whitespace-pre-wrap"
)


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (TRANSLATOR_URL)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("translator.url", "https://www.swifttranslator.com/")
        'https://www.swifttranslator.com/'

        >>> config.get("translator.timeouts.settlement", 10000)
        10000

    Environment Variable Mapping:
        - translator.url -> TRANSLATOR_URL
        - translator.timeouts.settlement -> TRANSLATOR_TIMEOUTS_SETTLEMENT
        - browser.headless -> BROWSER_HEADLESS
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """
        Singleton pattern - return existing instance if available.

        Configuration is loaded only once per process so every fixture and
        page object sees the same values.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "translator.timeouts.settlement")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        with different settings.
        """
        cls._instance = None
        cls._config = {}


# =============================================================================
# Typed Settings
# =============================================================================

@dataclass(frozen=True)
class TranslatorSettings:
    """
    Static settings for the translator page object.

    Attributes:
        url: Address of the site under test
        page_load_ms: Pause after the input control becomes visible
        after_clear_ms: Settle interval after clearing the input
        between_tests_ms: Pacing delay between scenarios
        settlement_ms: Upper bound for output settlement polling
        locator_visible_ms: Upper bound for a control to become visible
        navigation_ms: Upper bound for page navigation
        poll_interval_ms: Interval between output reads while polling
        partial_pause_ms: Pause after typing a partial input
        key_delay_ms: Delay between key events for sequential typing
        input_role: Accessible role of the text-entry control
        input_name: Accessible name of the text-entry control
        output_css: Structural CSS signature of the output region
    """
    url: str = DEFAULT_TRANSLATOR_URL
    page_load_ms: int = 1500
    after_clear_ms: int = 300
    between_tests_ms: int = 400
    settlement_ms: int = 10000
    locator_visible_ms: int = 60000
    navigation_ms: int = 60000
    poll_interval_ms: int = 100
    partial_pause_ms: int = 1200
    key_delay_ms: int = 150
    input_role: str = "textbox"
    input_name: str = DEFAULT_INPUT_NAME
    output_css: str = DEFAULT_OUTPUT_CSS

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "TranslatorSettings":
        """Build settings from the `translator` section of the configuration."""
        config = config or ConfigLoader()
        defaults = cls()
        return cls(
            url=config.get("translator.url", defaults.url),
            page_load_ms=config.get("translator.timeouts.page_load", defaults.page_load_ms),
            after_clear_ms=config.get("translator.timeouts.after_clear", defaults.after_clear_ms),
            between_tests_ms=config.get("translator.timeouts.between_tests", defaults.between_tests_ms),
            settlement_ms=config.get("translator.timeouts.settlement", defaults.settlement_ms),
            locator_visible_ms=config.get("translator.timeouts.locator_visible", defaults.locator_visible_ms),
            navigation_ms=config.get("translator.timeouts.navigation", defaults.navigation_ms),
            poll_interval_ms=config.get("translator.timeouts.poll_interval", defaults.poll_interval_ms),
            partial_pause_ms=config.get("translator.timeouts.partial_pause", defaults.partial_pause_ms),
            key_delay_ms=config.get("translator.timeouts.key_delay", defaults.key_delay_ms),
            input_role=config.get("translator.selectors.input_role", defaults.input_role),
            input_name=config.get("translator.selectors.input_name", defaults.input_name),
            output_css=config.get("translator.selectors.output_css", defaults.output_css),
        )


@dataclass(frozen=True)
class BrowserSettings:
    """Browser launch settings."""
    browser_type: str = "chromium"
    headless: bool = True
    viewport_width: int = 1920
    viewport_height: int = 1080

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "BrowserSettings":
        """Build settings from the `browser` section of the configuration."""
        config = config or ConfigLoader()
        defaults = cls()
        return cls(
            browser_type=config.get("browser.type", defaults.browser_type),
            headless=config.get("browser.headless", defaults.headless),
            viewport_width=config.get("browser.viewport_width", defaults.viewport_width),
            viewport_height=config.get("browser.viewport_height", defaults.viewport_height),
        )


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "TranslatorSettings",
    "BrowserSettings",
]
