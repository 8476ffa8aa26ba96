"""
Module: utils/polling.py
Description: Wait for a purged queue to report an empty length.

SQS purges are asynchronous and the reported length is eventually
consistent, so clearing a queue polls the length until it reaches zero.
"""

import time
from typing import Callable, Optional

from tenacity import (
    RetryError,
    Retrying,
    retry_if_result,
    stop_after_delay,
    stop_never,
    wait_fixed
)

from simple_sqs.errors import PurgeTimeoutError
from simple_sqs.utils.logger import get_logger

logger = get_logger(__name__)


def _not_empty(size: int) -> bool:
    return size > 0


def wait_until_empty(
    read_size: Callable[[], int],
    interval: float = 0.05,
    timeout: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep
) -> None:
    """
    Block until read_size() returns 0.

    Exceptions raised by read_size are not retried and propagate at once.

    Args:
        read_size: Callable returning the current approximate queue length
        interval: Seconds to sleep between reads
        timeout: Seconds after which to give up, or None to wait forever
        sleep: Sleep function (injectable for tests)

    Raises:
        PurgeTimeoutError: If the length is still non-zero after timeout
    """
    retrying = Retrying(
        retry=retry_if_result(_not_empty),
        wait=wait_fixed(interval),
        stop=stop_after_delay(timeout) if timeout is not None else stop_never,
        sleep=sleep
    )

    try:
        retrying(read_size)
    except RetryError as e:
        remaining = e.last_attempt.result()
        logger.warning(
            "Queue not empty before purge deadline",
            timeout_seconds=timeout,
            remaining=remaining
        )
        raise PurgeTimeoutError(timeout, remaining) from None

    logger.debug(
        "Queue observed empty",
        attempts=retrying.statistics.get('attempt_number')
    )
