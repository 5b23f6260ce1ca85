"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Synchronization with asynchronous rendering

Author: Automation Team
License: MIT
================================================================================
"""

from .translator_page import TranslatorPage

__all__ = [
    "TranslatorPage",
]
