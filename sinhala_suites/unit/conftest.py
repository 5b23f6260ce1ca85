"""
Fixtures for the offline unit suite.

The page object runs against FakePage / FakeTranslatorSite from
`sinhala_suites.unit.fake_site`, so no browser or network is needed.
"""

import pytest

from sinhala_suites.ui_testing.framework.config_loader import TranslatorSettings
from sinhala_suites.ui_testing.pages.translator_page import TranslatorPage
from sinhala_suites.unit.fake_site import FakePage, FakeTranslatorSite, known_translations


KNOWN_TRANSLATIONS = known_translations()


@pytest.fixture
def fast_settings() -> TranslatorSettings:
    """Settings with real-time bounds small enough for unit tests."""
    return TranslatorSettings(
        url="https://translator.test/",
        settlement_ms=500,
        poll_interval_ms=1,
        locator_visible_ms=50,
        navigation_ms=1000,
    )


@pytest.fixture
def fake_site() -> FakeTranslatorSite:
    return FakeTranslatorSite(translations=KNOWN_TRANSLATIONS)


@pytest.fixture
def fake_page(fake_site: FakeTranslatorSite) -> FakePage:
    return FakePage(fake_site)


@pytest.fixture
def translator(fake_page: FakePage, fast_settings: TranslatorSettings) -> TranslatorPage:
    return TranslatorPage(fake_page, fast_settings)
