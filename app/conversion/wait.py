"""Bounded polling for files produced by external processes."""

import time
from collections.abc import Callable
from pathlib import Path

from app.conversion.exceptions import FileWaitTimeoutError
from app.logging.logger import Log


def wait_for_file(
    path: Path,
    *,
    max_wait_seconds: float,
    initial_delay_seconds: float = 0.25,
    backoff_factor: float = 2.0,
    max_delay_seconds: float = 5.0,
    sleep: Callable[[float], None] = time.sleep,
) -> Path:
    """Poll until path exists and is non-empty.

    Delays grow geometrically from initial_delay_seconds up to
    max_delay_seconds. The total time slept never exceeds max_wait_seconds.

    Raises:
        FileWaitTimeoutError: if the file is still missing once the budget is spent.
    """
    waited = 0.0
    delay = initial_delay_seconds
    attempts = 0
    while True:
        attempts += 1
        if path.exists() and path.stat().st_size > 0:
            Log.debug(f"{path.name} appeared after {attempts} checks ({waited:.2f}s)")
            return path
        remaining = max_wait_seconds - waited
        if remaining <= 0:
            break
        step = min(delay, remaining)
        sleep(step)
        waited += step
        delay = min(delay * backoff_factor, max_delay_seconds)

    raise FileWaitTimeoutError(
        f"Timed out after {max_wait_seconds:.1f}s waiting for {path}"
    )
