"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single browser instance per run
    - Browser context creation with shared presets
    - Configurable browser type, headless mode and viewport
    - Async context manager for scoped acquisition/release

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from .config_loader import BrowserSettings


class BrowserManager:
    """
    Manages the browser instance and its contexts.

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("https://www.swifttranslator.com/")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "ignore_https_errors": True,
    }

    def __init__(self, settings: Optional[BrowserSettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: Browser type, headless mode and viewport size
        """
        self.settings = settings or BrowserSettings()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        if self.settings.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.settings.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.settings.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.settings.browser_type} "
            f"(headless={self.settings.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            **self.DEFAULT_CONTEXT_OPTIONS,
            "viewport": {
                "width": self.settings.viewport_width,
                "height": self.settings.viewport_height,
            },
            **options,
        }

        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)
        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
]
