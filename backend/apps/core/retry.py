"""Bounded retry with a fixed delay between attempts."""
import logging
import time
from dataclasses import dataclass
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-delay policy: no backoff, no jitter, every exception retried."""

    attempts: int = 2
    delay_seconds: float = 0.6


def retry(operation: Callable[[], T], policy: RetryPolicy = RetryPolicy()) -> T:
    """Run operation until it succeeds or attempts run out, then re-raise the last error."""
    if policy.attempts < 1:
        raise ValueError("RetryPolicy.attempts must be at least 1")

    last_error: Exception | None = None
    for attempt in range(1, policy.attempts + 1):
        try:
            return operation()
        except Exception as e:
            last_error = e
            if attempt < policy.attempts:
                logger.warning(
                    f"Attempt {attempt}/{policy.attempts} failed ({e}), "
                    f"retrying in {policy.delay_seconds}s"
                )
                time.sleep(policy.delay_seconds)

    raise last_error
