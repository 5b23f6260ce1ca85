"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the test suites.
It registers common markers, tags tests by location and keeps live-site
scenarios opt-in.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework itself"
    )
    config.addinivalue_line(
        "markers", "ui: Browser-driven tests"
    )
    config.addinivalue_line(
        "markers", "live: Tests against the live SwiftTranslator site (enable with --live)"
    )

    # Scenario group markers
    config.addinivalue_line(
        "markers", "positive: Inputs expected to transliterate correctly"
    )
    config.addinivalue_line(
        "markers", "negative: Known-divergent and edge-case inputs"
    )
    config.addinivalue_line(
        "markers", "realtime: Incremental typing / real-time update scenarios"
    )
    config.addinivalue_line(
        "markers", "fragile_whitespace: Expected output ends with whitespace that may vary on the live site"
    )


def pytest_collection_modifyitems(config, items):
    """
    Tag collected items by location and skip live scenarios unless --live is given.
    """
    run_live = config.getoption("--live")
    skip_live = pytest.mark.skip(reason="live site scenarios need --live")

    for item in items:
        if "ui_testing" in str(item.fspath):
            item.add_marker(pytest.mark.ui)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)

        if "live" in item.keywords and not run_live:
            item.add_marker(skip_live)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    mode = "LIVE site" if config.getoption("--live") else "offline (pass --live for the site)"
    return [
        "",
        "=" * 60,
        "SwiftTranslator Singlish -> Sinhala UI Test Suite",
        f"Mode: {mode}",
        "=" * 60,
        "",
    ]
