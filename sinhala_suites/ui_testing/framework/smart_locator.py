"""
================================================================================
Smart Locator
================================================================================

Element location by stable descriptors:
    - Accessible role + accessible name (preferred for form controls)
    - Structural CSS signature (for regions without an accessible name)
    - Optional ordered fallbacks per element
    - Health records showing which descriptor resolved each element

Every lookup waits for visibility within a bounded timeout. There is no
retry: if no descriptor becomes visible, LocatorNotFoundError is raised.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


ROLE = "role"
CSS = "css"


class LocatorNotFoundError(Exception):
    """
    Raised when no descriptor for an element becomes visible in time.

    Attributes:
        element_name: Logical element name (e.g. "input_field")
        tried: Descriptions of the descriptors that were attempted
        timeout: Visibility timeout per descriptor in milliseconds
    """

    def __init__(self, element_name: str, tried: List[str], timeout: int):
        self.element_name = element_name
        self.tried = tried
        self.timeout = timeout
        lines = "\n".join(f"  - {t}" for t in tried) or "  (no locators defined)"
        super().__init__(
            f"Element '{element_name}' not visible within {timeout}ms:\n{lines}"
        )


@dataclass(frozen=True)
class LocatorSpec:
    """
    A stable descriptor that resolves to a live element.

    Attributes:
        strategy: "role" or "css"
        value: ARIA role for "role", selector for "css"
        accessible_name: Accessible name matched with the role
    """
    strategy: str
    value: str
    accessible_name: Optional[str] = None

    @classmethod
    def by_role(cls, role: str, name: str) -> "LocatorSpec":
        return cls(strategy=ROLE, value=role, accessible_name=name)

    @classmethod
    def by_css(cls, selector: str) -> "LocatorSpec":
        return cls(strategy=CSS, value=selector)

    def describe(self) -> str:
        if self.strategy == ROLE:
            return f"role={self.value} name={self.accessible_name!r}"
        return f"css={self.value}"

    def build(self, page: Page) -> Locator:
        """Create the (lazy) Playwright locator for this descriptor."""
        if self.strategy == ROLE:
            return page.get_by_role(self.value, name=self.accessible_name)
        if self.strategy == CSS:
            # Structural signatures may match several nodes; the first one wins.
            return page.locator(self.value).first
        raise ValueError(f"Unknown locator strategy: {self.strategy}")


@dataclass
class LocatorHealth:
    """
    Records which descriptor resolved an element.

    Attributes:
        element_name: Logical element name
        primary: Description of the preferred descriptor
        used_fallback: Whether a fallback was used
        resolved_with: Description of the descriptor that resolved
    """
    element_name: str
    primary: str
    used_fallback: bool = False
    resolved_with: Optional[str] = None


class SmartLocator:
    """
    Resolves logical element names to visible Playwright locators.

    Usage:
        >>> smart = SmartLocator(page, {
        ...     "input_field": [LocatorSpec.by_role("textbox", "Input")],
        ... })
        >>> await smart.fill("input_field", "mama")
    """

    def __init__(
        self,
        page: Page,
        locators: Optional[Dict[str, List[LocatorSpec]]] = None,
    ):
        """
        Args:
            page: Playwright Page object
            locators: Element name -> ordered descriptors (primary first)
        """
        self.page = page
        self.locators: Dict[str, List[LocatorSpec]] = dict(locators or {})
        self._fallback_used: Dict[str, LocatorHealth] = {}

    async def locate(self, element_name: str, timeout: int = 5000) -> Locator:
        """
        Locate a visible element, trying descriptors in order.

        Args:
            element_name: Logical element name
            timeout: Visibility timeout per descriptor in milliseconds

        Returns:
            Playwright Locator for the visible element

        Raises:
            LocatorNotFoundError: When no descriptor becomes visible
        """
        specs = self.locators.get(element_name, [])
        if not specs:
            raise LocatorNotFoundError(element_name, [], timeout)

        tried = []
        for index, spec in enumerate(specs):
            locator = spec.build(self.page)
            try:
                await locator.wait_for(state="visible", timeout=timeout)
            except PlaywrightTimeoutError as e:
                tried.append(f"{spec.describe()} -> {str(e)[:80]}")
                continue

            health = LocatorHealth(
                element_name=element_name,
                primary=specs[0].describe(),
                used_fallback=index > 0,
                resolved_with=spec.describe(),
            )
            if index > 0:
                logger.warning(
                    f"Element '{element_name}' used fallback: {spec.describe()}"
                )
                self._fallback_used[element_name] = health
            else:
                logger.debug(f"Element '{element_name}' found: {spec.describe()}")
            return locator

        error = LocatorNotFoundError(element_name, tried, timeout)
        logger.error(str(error))
        raise error

    async def fill(self, element_name: str, value: str, timeout: int = 5000) -> None:
        """Set the value of an input element in a single atomic write."""
        locator = await self.locate(element_name, timeout=timeout)
        await locator.fill(value)

    async def press_sequentially(
        self,
        element_name: str,
        text: str,
        delay: int = 0,
        timeout: int = 5000,
    ) -> None:
        """Type `text` as discrete key events with `delay` ms between keys."""
        locator = await self.locate(element_name, timeout=timeout)
        await locator.press_sequentially(text, delay=delay)

    async def get_text(self, element_name: str, timeout: int = 5000) -> str:
        """Return the raw text content of an element ("" when it has none)."""
        locator = await self.locate(element_name, timeout=timeout)
        return await locator.text_content() or ""

    async def is_visible(self, element_name: str, timeout: int = 2000) -> bool:
        try:
            await self.locate(element_name, timeout=timeout)
        except LocatorNotFoundError:
            return False
        return True

    def register_locator(self, element_name: str, specs: List[LocatorSpec]) -> None:
        """Register (or replace) the descriptors for an element."""
        self.locators[element_name] = list(specs)
        logger.debug(f"Registered locator: {element_name}")

    def get_health_report(self) -> str:
        """
        Summarize elements that needed a fallback descriptor.

        Returns:
            Formatted health report string
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
        ]
        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary}",
                f"    Used: {health.resolved_with}",
                "",
            ])
        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "LocatorSpec",
    "LocatorHealth",
    "LocatorNotFoundError",
]
