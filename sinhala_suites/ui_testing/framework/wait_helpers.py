# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Bounded polling primitives for synchronizing with asynchronous page rendering.
#
# The translator site exposes no "idle" or "done" signal, so the only way to
# know that the output reflects the latest input is to read it repeatedly
# until a predicate holds or an upper bound elapses.
#
# Key Features:
#   - One generic poll-with-timeout primitive (poll_until)
#   - Two named settlement strategies built on it:
#       * wait_for_output_change - non-empty AND different from a baseline
#       * wait_for_output_match  - exactly equal to an expected string
#   - Timeouts carry the last observed text and the elapsed time
#   - Allure step integration
#
# Usage:
#   text = await wait_for_output_change(page.get_output_text, previous="")
#   text = await wait_for_output_match(page.get_output_text, "මම ගෙදර යනවා")
#
# ================================================================================

import asyncio
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

import allure
from loguru import logger


TextReader = Callable[[], Awaitable[str]]
TextPredicate = Callable[[str], bool]


@dataclass
class PollConfig:
    """
    Configuration for a polling wait.

    Attributes:
        timeout_ms: Upper bound for the whole wait in milliseconds
        interval_ms: Pause between two reads in milliseconds
    """
    timeout_ms: int = 10000
    interval_ms: int = 100


class SettlementTimeoutError(Exception):
    """
    Raised when polled output does not satisfy its predicate in time.

    Attributes:
        description: What was being waited for
        last_text: The last text observed before giving up
        elapsed_ms: How long the wait lasted in milliseconds
        attempts: Number of reads performed
    """

    def __init__(
        self,
        description: str,
        last_text: Optional[str],
        elapsed_ms: float,
        attempts: int = 0,
    ):
        self.description = description
        self.last_text = last_text
        self.elapsed_ms = elapsed_ms
        self.attempts = attempts
        super().__init__(
            f"Timeout after {elapsed_ms:.0f}ms ({attempts} reads) waiting for: "
            f"{description}. Last observed text: {last_text!r}"
        )


async def poll_until(
    read_fn: TextReader,
    predicate: TextPredicate,
    description: str = "Waiting for condition",
    config: Optional[PollConfig] = None,
) -> str:
    """
    Read text repeatedly until `predicate` accepts it or the bound elapses.

    The text is read at least once, even with a zero timeout. Errors raised
    by `read_fn` propagate unchanged.

    Args:
        read_fn: Async callable returning the current text
        predicate: Returns True when the text is acceptable
        description: Human-readable description for logging
        config: Polling bounds

    Returns:
        The first text accepted by `predicate`

    Raises:
        SettlementTimeoutError: If the bound elapses first
    """
    config = config or PollConfig()
    start_time = time.monotonic()
    attempts = 0
    last_text: Optional[str] = None

    while True:
        attempts += 1
        last_text = await read_fn()

        if predicate(last_text):
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.debug(
                f"Settled after {attempts} reads ({elapsed_ms:.0f}ms): {description}"
            )
            return last_text

        elapsed_ms = (time.monotonic() - start_time) * 1000
        remaining_ms = config.timeout_ms - elapsed_ms
        if remaining_ms <= 0:
            error = SettlementTimeoutError(description, last_text, elapsed_ms, attempts)
            logger.error(str(error))
            raise error

        await asyncio.sleep(min(config.interval_ms, remaining_ms) / 1000)


async def wait_for_output_change(
    read_fn: TextReader,
    previous: str,
    timeout_ms: int = 10000,
    interval_ms: int = 100,
) -> str:
    """
    Wait until the output is non-empty and different from `previous`.

    Checking only "non-empty" could accept a stale leftover; checking only
    "different" could accept a transient blank. Both must hold.

    Args:
        read_fn: Async callable returning the current (trimmed) output
        previous: Baseline output captured before the input was applied
        timeout_ms: Upper bound in milliseconds
        interval_ms: Pause between reads in milliseconds

    Returns:
        The settled output
    """
    with allure.step("Wait for output to change"):
        return await poll_until(
            read_fn,
            lambda now: len(now) > 0 and now != previous,
            description=f"output non-empty and different from {previous!r}",
            config=PollConfig(timeout_ms=timeout_ms, interval_ms=interval_ms),
        )


async def wait_for_output_match(
    read_fn: TextReader,
    expected: str,
    timeout_ms: int = 10000,
    interval_ms: int = 100,
) -> str:
    """
    Wait until the output equals `expected` exactly.

    Args:
        read_fn: Async callable returning the current (trimmed) output
        expected: Exact text to wait for
        timeout_ms: Upper bound in milliseconds
        interval_ms: Pause between reads in milliseconds

    Returns:
        The settled output (equal to `expected`)
    """
    with allure.step(f"Wait for output to equal {expected!r}"):
        return await poll_until(
            read_fn,
            lambda now: len(now) > 0 and now == expected,
            description=f"output equal to {expected!r}",
            config=PollConfig(timeout_ms=timeout_ms, interval_ms=interval_ms),
        )


__all__ = [
    "PollConfig",
    "SettlementTimeoutError",
    "poll_until",
    "wait_for_output_change",
    "wait_for_output_match",
]
