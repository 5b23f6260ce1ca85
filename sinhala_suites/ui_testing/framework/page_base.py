"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation to an absolute URL
    - Smart element location
    - Screenshot and debugging utilities
    - Browser console capture for failure reports

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import ConsoleMessage, Page

from .smart_locator import LocatorSpec, SmartLocator


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

# Number of console messages kept for failure reports
CONSOLE_HISTORY = 20


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class SearchPage(BasePage):
            async def search(self, text: str):
                await self.smart.fill("search_input", text)
    """

    def __init__(
        self,
        page: Page,
        url: str,
        locators: Optional[Dict[str, List[LocatorSpec]]] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            url: Absolute URL of the page
            locators: Element name -> ordered locator descriptors
        """
        self.page = page
        self.url = url
        self.smart = SmartLocator(page, locators)

        self._console_messages: List[Dict[str, Any]] = []
        self._setup_console_capture()

    def _setup_console_capture(self) -> None:
        """Keep the most recent browser console messages for debugging."""

        def capture_console(message: ConsoleMessage) -> None:
            self._console_messages.append({
                "timestamp": datetime.now().isoformat(),
                "type": message.type,
                "text": message.text[:500],
            })
            if len(self._console_messages) > CONSOLE_HISTORY:
                self._console_messages.pop(0)

        self.page.on("console", capture_console)

    async def navigate(
        self,
        wait_for: str = "domcontentloaded",
        timeout: int = 60000,
    ) -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
            timeout: Navigation timeout in milliseconds
        """
        with allure.step(f"Navigate to {self.url}"):
            await self.page.goto(self.url, wait_until=wait_for, timeout=timeout)
            logger.debug(f"Navigated to: {self.url}")

    async def pause(self, milliseconds: int) -> None:
        """Fixed, bounded pause on the page's own clock."""
        await self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
            - Recent browser console messages
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)

            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )

            if self._console_messages:
                allure.attach(
                    json.dumps(self._console_messages[-10:], indent=2, ensure_ascii=False),
                    name="Recent console messages",
                    attachment_type=allure.attachment_type.JSON,
                )

    def get_locator_health_report(self) -> str:
        return self.smart.get_health_report()


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
