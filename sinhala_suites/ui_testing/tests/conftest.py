"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the live SwiftTranslator suite.

Key Features:
- One browser, one context and one page for the whole run (session scope)
- The translator page is opened once; a missing control aborts the run
- Failure capture (screenshot, URL, raw output, console) attached to Allure
- Fixed pacing delay between scenarios

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
import pytest_asyncio
from loguru import logger

from sinhala_suites.ui_testing.framework.browser_manager import BrowserManager
from sinhala_suites.ui_testing.framework.config_loader import (
    BrowserSettings,
    TranslatorSettings,
)
from sinhala_suites.ui_testing.framework.scenario_loader import ScenarioLoader, ScenarioSuite
from sinhala_suites.ui_testing.framework.smart_locator import LocatorNotFoundError
from sinhala_suites.ui_testing.framework.wait_helpers import SettlementTimeoutError
from sinhala_suites.ui_testing.pages.translator_page import TranslatorPage


# Exit code used when the shared session cannot be set up
SETUP_FAILED_EXIT_CODE = 3


# ================================================================================
# Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def scenario_suite() -> ScenarioSuite:
    return ScenarioLoader().load()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager(
    browser_settings: BrowserSettings,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    The browser is launched once and closed after the last scenario.
    """
    manager = BrowserManager(browser_settings)
    await manager.start()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def translator_page(
    browser_manager: BrowserManager,
    translator_settings: TranslatorSettings,
) -> AsyncGenerator[TranslatorPage, None]:
    """
    The single shared translator session.

    A context/page pair is created once and the site is opened once. If a
    control cannot be resolved no scenario can run, so the whole run stops.
    """
    context = await browser_manager.new_context()
    page = await context.new_page()
    translator = TranslatorPage(page, translator_settings)

    try:
        await translator.navigate_to_site()
    except LocatorNotFoundError as e:
        await context.close()
        pytest.exit(f"Translator controls unavailable: {e}", returncode=SETUP_FAILED_EXIT_CODE)

    yield translator

    logger.info(translator.get_locator_health_report())
    await context.close()


# ================================================================================
# Per-Scenario Fixtures
# ================================================================================

@pytest_asyncio.fixture(autouse=True, loop_scope="session")
async def scenario_guard(
    request: pytest.FixtureRequest,
    translator_page: TranslatorPage,
    translator_settings: TranslatorSettings,
) -> AsyncGenerator[None, None]:
    """
    Wrap every scenario: capture diagnostics on failure, then pace.
    """
    yield

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        await translator_page.capture_failure(request.node.name)
        settlement_error = getattr(request.node, "settlement_timeout", None)
        if settlement_error is not None:
            allure.attach(
                settlement_error.last_text,
                name="Last observed output",
                attachment_type=allure.attachment_type.TEXT,
            )
        try:
            raw_output = await translator_page.get_raw_output_text()
        except LocatorNotFoundError as e:
            logger.warning(f"Raw output unavailable for failure report: {e}")
        else:
            allure.attach(
                raw_output,
                name="Raw output at failure",
                attachment_type=allure.attachment_type.TEXT,
            )

    await translator_page.pause(translator_settings.between_tests_ms)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Store each phase report on the item and classify failures.

    - LocatorNotFoundError: the shared page is unusable, stop the run
    - SettlementTimeoutError: record the last observed text for the report
      and for the scenario guard
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)

    if call.excinfo is None:
        return

    if call.excinfo.errisinstance(LocatorNotFoundError):
        logger.error(f"{item.nodeid}: control not found, stopping the run")
        item.session.shouldstop = f"Locator not found during {item.name}"
    elif call.excinfo.errisinstance(SettlementTimeoutError):
        error = call.excinfo.value
        item.settlement_timeout = error
        logger.error(
            f"{item.nodeid}: output did not settle in {error.elapsed_ms:.0f}ms, "
            f"last observed {error.last_text!r}"
        )
        report.sections.append(
            ("Settlement timeout", f"last observed text: {error.last_text!r}")
        )
