import logging
import time
from typing import Callable, Optional

from ..exceptions import TimeoutExceeded

logger = logging.getLogger(__name__)

Predicate = Callable[[], bool]

DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_POLL_INTERVAL_MS = 500


def wait_until(predicate: Predicate,
               timeout_ms: float = DEFAULT_TIMEOUT_MS,
               poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
               description: Optional[str] = None) -> None:
    """
    Polls `predicate` until it returns a truthy value or `timeout_ms` elapses.

    The predicate is evaluated once immediately and then once per poll interval,
    never concurrently. A `timeout_ms` of 0 waits without a time limit.
    Exceptions raised by the predicate (e.g. a NoSuchElementException from a
    stale scope) are not retried: they propagate on the poll where they occur.
    Selenium's WebDriverWait is not used here because it silently ignores
    NoSuchElementException.

    Raises:
        TimeoutExceeded: if the predicate never returned true within the budget.
        ValueError: if the timeout is negative or the poll interval is not positive.
    """
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must not be negative, got {timeout_ms}")
    if poll_interval_ms <= 0:
        raise ValueError(f"poll_interval_ms must be positive, got {poll_interval_ms}")

    what = description or "condition"
    start = time.monotonic()
    deadline = start + timeout_ms / 1000.0 if timeout_ms else None
    interval = poll_interval_ms / 1000.0
    polls = 0

    while True:
        polls += 1
        if predicate():
            logger.debug(f"{what} met after {polls} poll(s) ({(time.monotonic() - start) * 1000:.0f}ms).")
            return

        if deadline is None:
            time.sleep(interval)
            continue

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            logger.debug(f"{what} not met after {polls} poll(s); giving up at {timeout_ms}ms.")
            raise TimeoutExceeded(timeout_ms, description)
        time.sleep(min(interval, remaining))
