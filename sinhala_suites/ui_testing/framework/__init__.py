"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - config_loader: YAML + environment configuration, typed settings
    - log_config: Loguru setup
    - smart_locator: Role/CSS element location with visibility timeouts
    - wait_helpers: Bounded polling and settlement strategies
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management
    - scenario_loader: Scenario table loading and validation
    - output_assertions: Exact output comparison with reporting

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import BrowserSettings, ConfigLoader, ConfigurationError, TranslatorSettings
from .output_assertions import OutputMismatchError, assert_output_equals
from .page_base import BasePage
from .scenario_loader import ScenarioDataError, ScenarioLoader
from .smart_locator import LocatorNotFoundError, LocatorSpec, SmartLocator
from .wait_helpers import SettlementTimeoutError, wait_for_output_change, wait_for_output_match

__all__ = [
    "BrowserManager",
    "BrowserSettings",
    "ConfigLoader",
    "ConfigurationError",
    "TranslatorSettings",
    "OutputMismatchError",
    "assert_output_equals",
    "BasePage",
    "ScenarioDataError",
    "ScenarioLoader",
    "LocatorNotFoundError",
    "LocatorSpec",
    "SmartLocator",
    "SettlementTimeoutError",
    "wait_for_output_change",
    "wait_for_output_match",
]
