import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar

from showcase.client.client_logging import logger
from showcase.client.errors import is_transient

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Fixed-delay retry.

    ``retries`` counts the extra attempts after the first one, so the default
    policy makes four attempts in total and sleeps ``delay`` seconds between
    them. Errors rejected by ``retry_on`` are raised immediately.
    """

    retries: int = 3
    delay: float = 2.0
    retry_on: Callable[[BaseException], bool] = field(default=is_transient, compare=False)

    def __post_init__(self):
        if self.retries < 0:
            raise ValueError("retries must be >= 0")
        if self.delay < 0:
            raise ValueError("delay must be >= 0")

    @property
    def attempts(self) -> int:
        return self.retries + 1

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        """Whether a failure on ``attempt`` (1-based) gets another try."""
        return attempt < self.attempts and self.retry_on(error)

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        label: str = "operation",
    ) -> T:
        attempt = 1
        while True:
            try:
                return await operation()
            except Exception as e:
                if not self.should_retry(e, attempt):
                    raise
                logger.warning(
                    f"{label} failed (attempt {attempt}/{self.attempts}): {e!r}; "
                    f"retrying in {self.delay}s"
                )
                await sleep(self.delay)
                attempt += 1
