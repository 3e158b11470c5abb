# core/retry.py
import logging
from typing import Callable, Optional

from portal_uitest.core.errors import error_message


def retry_action(fn: Callable[[], None], retries: int = 3, action_name: str = '',
                 logger: Optional[logging.Logger] = None) -> None:
    """Run ``fn`` up to ``retries`` times, re-raising the last error.

    There is no delay between attempts; callers that need to wait for a
    condition put the wait inside ``fn``.
    """
    if retries < 1:
        raise ValueError(f"retries must be at least 1, got {retries}")
    logger = logger or logging.getLogger(__name__)
    for attempt in range(1, retries + 1):
        try:
            fn()
            return
        except Exception as e:
            logger.warning(f"[WARN] Retry {attempt} failed for {action_name}: {error_message(e)}")
            if attempt == retries:
                raise
