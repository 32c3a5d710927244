"""Bounded-retry removal of directory trees.

Removing a fresh clone can fail with EBUSY while another process (an indexer,
an editor, git's own helpers) still holds a handle inside it. Those failures
are retried with a linear backoff; every other error propagates immediately.
"""

from __future__ import annotations

import errno
import os
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import CleanupError

RetryCallback = Callable[[int, float, OSError], None]


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Attempt bound and linear delay for busy-directory removal."""

    max_attempts: int = 5
    base_delay: float = 0.2

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay must not be negative")

    def delay(self, attempt: int) -> float:
        """Seconds to wait after failed attempt number ``attempt`` (1-based)."""
        return attempt * self.base_delay


def is_busy_error(exc: BaseException) -> bool:
    """Return True for the "resource busy" failure class only."""
    return isinstance(exc, OSError) and exc.errno == errno.EBUSY


def remove_tree(
    path: Path,
    *,
    policy: RetryPolicy | None = None,
    remover: Callable[[Path], None] = shutil.rmtree,
    is_retryable: Callable[[BaseException], bool] = is_busy_error,
    sleep: Callable[[float], None] = time.sleep,
    on_retry: RetryCallback | None = None,
) -> int:
    """Remove ``path`` recursively, retrying while it is busy.

    Returns the number of removal attempts made, which is 0 when the path did
    not exist. Safe to call repeatedly on the same path.

    Raises:
        CleanupError: every attempt allowed by ``policy`` failed as retryable.
        OSError: a non-retryable failure, raised from the attempt that hit it.
    """
    policy = policy or RetryPolicy()
    attempt = 0
    while attempt < policy.max_attempts:
        if not os.path.lexists(path):
            return attempt
        attempt += 1
        try:
            remover(path)
        except OSError as exc:
            if not is_retryable(exc):
                raise
            if attempt >= policy.max_attempts:
                raise CleanupError(path, attempt) from exc
            delay = policy.delay(attempt)
            if on_retry is not None:
                on_retry(attempt, delay, exc)
            sleep(delay)
        else:
            return attempt
    raise CleanupError(path, attempt)
