"""
================================================================================
Translator Page Object (Async / Playwright)
================================================================================

Page Object for the SwiftTranslator Singlish -> Sinhala converter.

The page has two controls:
  - input_field:  textbox reached by accessible role + name
  - output_field: output region reached by its structural CSS signature

Typing into the input updates the output asynchronously and the site gives no
completion signal, so every read-after-write goes through a bounded poll from
`wait_helpers`:
  - perform_translation()  -> wait_for_output_change (non-empty AND changed)
  - complete_input()       -> wait_for_output_match  (exact final string)

NOTE:
  The site keeps its network busy, so navigation waits for
  `domcontentloaded`, never `networkidle`.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from sinhala_suites.ui_testing.framework.config_loader import TranslatorSettings
from sinhala_suites.ui_testing.framework.page_base import PageBase
from sinhala_suites.ui_testing.framework.smart_locator import LocatorSpec
from sinhala_suites.ui_testing.framework.wait_helpers import (
    wait_for_output_change,
    wait_for_output_match,
)


INPUT_FIELD = "input_field"
OUTPUT_FIELD = "output_field"


def translator_locators(settings: TranslatorSettings) -> Dict[str, List[LocatorSpec]]:
    """Locator descriptors for the translator controls."""
    return {
        INPUT_FIELD: [LocatorSpec.by_role(settings.input_role, settings.input_name)],
        OUTPUT_FIELD: [LocatorSpec.by_css(settings.output_css)],
    }


class TranslatorPage(PageBase):
    """SwiftTranslator page object (async)."""

    def __init__(self, page: Page, settings: Optional[TranslatorSettings] = None):
        self.settings = settings or TranslatorSettings()
        super().__init__(
            page,
            url=self.settings.url,
            locators=translator_locators(self.settings),
        )

    # =========================================================================
    # Controls
    # =========================================================================

    async def get_input_field(self) -> Locator:
        return await self.smart.locate(INPUT_FIELD, timeout=self.settings.locator_visible_ms)

    async def get_output_field(self) -> Locator:
        return await self.smart.locate(OUTPUT_FIELD, timeout=self.settings.locator_visible_ms)

    # =========================================================================
    # Basic Operations
    # =========================================================================

    @allure.step("Open SwiftTranslator")
    async def navigate_to_site(self) -> "TranslatorPage":
        """Open the site and wait until the input control is usable."""
        await self.navigate(wait_for="domcontentloaded", timeout=self.settings.navigation_ms)
        await self.get_input_field()
        await self.pause(self.settings.page_load_ms)
        logger.info(f"Translator ready at {self.url}")
        return self

    @allure.step("Clear input")
    async def clear_and_wait(self) -> None:
        """Empty the input, then give any in-flight update time to land."""
        # fill("") is more reliable than clear() on this site
        await self.smart.fill(INPUT_FIELD, "", timeout=self.settings.locator_visible_ms)
        await self.pause(self.settings.after_clear_ms)

    async def type_input(self, text: str) -> None:
        """Write the whole text in one atomic fill."""
        await self.smart.fill(INPUT_FIELD, text, timeout=self.settings.locator_visible_ms)

    async def type_sequentially(self, text: str, delay: Optional[int] = None) -> None:
        """Type `text` key by key, `delay` ms apart (defaults to key_delay)."""
        await self.smart.press_sequentially(
            INPUT_FIELD,
            text,
            delay=self.settings.key_delay_ms if delay is None else delay,
            timeout=self.settings.locator_visible_ms,
        )

    async def get_raw_output_text(self) -> str:
        """Output text exactly as rendered (diagnostics only)."""
        return await self.smart.get_text(OUTPUT_FIELD, timeout=self.settings.locator_visible_ms)

    async def get_output_text(self) -> str:
        """Output text trimmed of leading/trailing whitespace."""
        return (await self.get_raw_output_text()).strip()

    # =========================================================================
    # Synchronized Operations
    # =========================================================================

    @allure.step("Translate: {input_text}")
    async def perform_translation(self, input_text: str) -> str:
        """
        Replace the input with `input_text` and return the settled output.

        Steps:
            1. Capture the current output as the baseline.
            2. Clear the input and wait the settle interval. If the output went
               blank, the reset registered and the baseline becomes "", so a
               repeat of the previous input can still settle.
            3. Fill the new input atomically.
            4. Poll until the output is non-empty and differs from the baseline.

        Raises:
            SettlementTimeoutError: Output did not settle within settlement_ms
            LocatorNotFoundError: A control could not be resolved
        """
        previous = await self.get_output_text()

        await self.clear_and_wait()
        if not await self.get_output_text():
            previous = ""

        await self.type_input(input_text)

        settled = await wait_for_output_change(
            self.get_output_text,
            previous,
            timeout_ms=self.settings.settlement_ms,
            interval_ms=self.settings.poll_interval_ms,
        )
        logger.debug(f"Translated {input_text!r} -> {settled!r}")
        return settled

    @allure.step("Type partial input: {partial_input}")
    async def type_partial(self, partial_input: str) -> str:
        """
        Clear the input, type a prefix key by key and return the intermediate output.

        The intermediate value is not contractual; callers should only check
        that something was rendered.
        """
        await self.clear_and_wait()
        await self.type_sequentially(partial_input)
        await self.pause(self.settings.partial_pause_ms)
        intermediate = await self.get_output_text()
        logger.debug(f"Intermediate output for {partial_input!r}: {intermediate!r}")
        return intermediate

    @allure.step("Complete input and wait for: {expected_full}")
    async def complete_input(self, remaining_input: str, expected_full: str) -> str:
        """
        Type the rest of the input key by key and wait for an exact final output.

        Raises:
            SettlementTimeoutError: Output never equalled `expected_full`
        """
        await self.type_sequentially(remaining_input)
        return await wait_for_output_match(
            self.get_output_text,
            expected_full,
            timeout_ms=self.settings.settlement_ms,
            interval_ms=self.settings.poll_interval_ms,
        )


__all__ = [
    "TranslatorPage",
    "translator_locators",
    "INPUT_FIELD",
    "OUTPUT_FIELD",
]
