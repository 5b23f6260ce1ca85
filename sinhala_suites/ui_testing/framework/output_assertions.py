"""
================================================================================
Output Assertions
================================================================================

Exact-match assertions for translated output with failure reporting:
    - Byte-for-byte comparison (trailing whitespace and control characters count)
    - Expected / actual attached to the Allure report on mismatch
    - repr() of both strings in the failure message so invisible characters
      (newlines, zero-width joiners) show up in the diff

================================================================================
"""

from dataclasses import dataclass
from typing import Optional

import allure
from loguru import logger


@dataclass
class OutputComparison:
    """Result of comparing observed output with an expected string."""
    tc_id: str
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.expected == self.actual

    @property
    def first_difference(self) -> Optional[int]:
        """Index of the first differing character, or None when equal."""
        if self.passed:
            return None
        for index, (exp_char, act_char) in enumerate(zip(self.expected, self.actual)):
            if exp_char != act_char:
                return index
        return min(len(self.expected), len(self.actual))

    def describe(self) -> str:
        return (
            f"[{self.tc_id}] output mismatch at index {self.first_difference}\n"
            f"  expected: {self.expected!r}\n"
            f"  actual:   {self.actual!r}"
        )


class OutputMismatchError(AssertionError):
    """Raised when the settled output differs from the expected text."""

    def __init__(self, comparison: OutputComparison):
        self.comparison = comparison
        self.expected = comparison.expected
        self.actual = comparison.actual
        super().__init__(comparison.describe())


def assert_output_equals(actual: str, expected: str, tc_id: str = "") -> None:
    """
    Assert that `actual` equals `expected` exactly.

    Args:
        actual: Settled output read from the page
        expected: Expected output from the scenario table
        tc_id: Scenario identifier used in the report

    Raises:
        OutputMismatchError: When the strings differ in any character
    """
    comparison = OutputComparison(tc_id=tc_id, expected=expected, actual=actual)
    if comparison.passed:
        logger.info(f"[{tc_id}] PASS: {actual!r}")
        return

    logger.error(comparison.describe())
    allure.attach(
        expected,
        name=f"{tc_id} expected",
        attachment_type=allure.attachment_type.TEXT,
    )
    allure.attach(
        actual,
        name=f"{tc_id} actual",
        attachment_type=allure.attachment_type.TEXT,
    )
    raise OutputMismatchError(comparison)


__all__ = [
    "OutputComparison",
    "OutputMismatchError",
    "assert_output_equals",
]
