"""
Offline fakes for exercising the framework without a browser.

FakeTranslatorSite imitates the real site's behaviour on a simulated clock:
writing to the input schedules an output update `render_delay_ms` later, and
the clock advances on every output read (`read_tick_ms`) and on every
`wait_for_timeout`.

FakeBrowserManager hands out contexts whose pages all render from one site,
standing in for BrowserManager in fixture-level tests.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from sinhala_suites.ui_testing.framework.config_loader import (
    DEFAULT_INPUT_NAME,
    DEFAULT_OUTPUT_CSS,
)
from sinhala_suites.ui_testing.framework.scenario_loader import ScenarioLoader


class FakeTranslatorSite:
    """In-memory stand-in for the transliteration site."""

    def __init__(
        self,
        translations: Optional[Dict[str, str]] = None,
        render_delay_ms: int = 100,
        read_tick_ms: int = 50,
        output_padding: str = "\n\n",
        clear_blanks_output: bool = True,
    ):
        self.translations = dict(translations or {})
        self.render_delay_ms = render_delay_ms
        self.read_tick_ms = read_tick_ms
        self.output_padding = output_padding
        self.clear_blanks_output = clear_blanks_output

        self.clock_ms = 0
        self.input_value = ""
        self.output = ""
        self.frozen = False
        self.visible = {"input": True, "output": True}
        self.keystrokes: List[Dict[str, Any]] = []
        self._pending: Optional[str] = None
        self._due_ms = 0

    def transliterate(self, text: str) -> str:
        if not text:
            return ""
        return self.translations.get(text, text.upper()) + self.output_padding

    def set_input(self, value: str) -> None:
        self.input_value = value
        if self.frozen:
            return
        if not value and not self.clear_blanks_output:
            self._pending = None
            return
        self._pending = self.transliterate(value)
        self._due_ms = self.clock_ms + self.render_delay_ms

    def advance(self, milliseconds: int) -> None:
        self.clock_ms += milliseconds
        if self._pending is not None and self.clock_ms >= self._due_ms:
            self.output = self._pending
            self._pending = None

    def read_output(self) -> str:
        self.advance(self.read_tick_ms)
        return self.output


class FakeLocator:
    """The subset of playwright.async_api.Locator used by the framework."""

    def __init__(self, site: FakeTranslatorSite, kind: str):
        self.site = site
        self.kind = kind

    @property
    def first(self) -> "FakeLocator":
        return self

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        if not self.site.visible.get(self.kind, False):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.kind}")

    async def fill(self, value: str) -> None:
        self.site.set_input(value)

    async def press_sequentially(self, text: str, delay: Optional[float] = None) -> None:
        for char in text:
            self.site.keystrokes.append({"key": char, "delay": delay})
            self.site.set_input(self.site.input_value + char)
            self.site.advance(int(delay or 0))

    async def text_content(self) -> Optional[str]:
        return self.site.read_output()


class FakePage:
    """The subset of playwright.async_api.Page used by the framework."""

    def __init__(
        self,
        site: FakeTranslatorSite,
        input_name: str = DEFAULT_INPUT_NAME,
        output_css: str = DEFAULT_OUTPUT_CSS,
    ):
        self.site = site
        self.input_name = input_name
        self.output_css = output_css
        self.url = "about:blank"
        self.goto_calls: List[Dict[str, Any]] = []
        self.waits: List[int] = []
        self.handlers: Dict[str, List[Callable]] = {}

    def get_by_role(self, role: str, name: Optional[str] = None) -> FakeLocator:
        if role == "textbox" and name == self.input_name:
            return FakeLocator(self.site, "input")
        return FakeLocator(self.site, "missing")

    def locator(self, selector: str) -> FakeLocator:
        if selector == self.output_css:
            return FakeLocator(self.site, "output")
        return FakeLocator(self.site, "missing")

    def on(self, event: str, handler: Callable) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in self.handlers.get(event, []):
            handler(payload)

    async def goto(self, url: str, wait_until: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})

    async def wait_for_timeout(self, timeout: float) -> None:
        self.waits.append(int(timeout))
        self.site.advance(int(timeout))
        await asyncio.sleep(0)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        data = b"\x89PNG fake"
        if path:
            with open(path, "wb") as f:
                f.write(data)
        return data


class FakeContext:
    """Browser context whose pages render from a shared FakeTranslatorSite."""

    def __init__(self, site: FakeTranslatorSite):
        self.site = site
        self.pages: List[FakePage] = []
        self.closed = False

    async def new_page(self) -> FakePage:
        page = FakePage(self.site)
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True


class FakeBrowserManager:
    """Stand-in for BrowserManager once its browser is running."""

    def __init__(self, site: FakeTranslatorSite):
        self.site = site
        self.contexts: List[FakeContext] = []

    async def new_context(self, **options: Any) -> FakeContext:
        context = FakeContext(self.site)
        self.contexts.append(context)
        return context


def known_translations() -> Dict[str, str]:
    """Scenario inputs mapped to outputs the fake renders (no trailing whitespace cases)."""
    suite = ScenarioLoader().load()
    translations = {
        scenario.input_text: scenario.expected
        for scenario in suite.translations
        if not scenario.has_trailing_whitespace
    }
    translations[suite.ui.input_text] = suite.ui.expected_full
    return translations
