"""
Retry with exponential backoff and jitter.

States: IDLE -> ATTEMPTING -> SUCCESS | RETRY_SCHEDULED | FAILED.
Retryable failures (429, 5xx, network, timeout) are retried until the
attempt budget is spent; any other failure ends the run immediately.
"""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from enum import Enum

from pydantic import BaseModel

from cv_analyzer.analysis.cancellation import CancellationToken, guarded
from cv_analyzer.analysis.transport import ProviderResponse, TransportFailure
from cv_analyzer.errors import TransportError

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
BASE_DELAY_MS = 1000
JITTER_MS = 1000


class RetryPhase(str, Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    SUCCESS = "success"
    RETRY_SCHEDULED = "retry_scheduled"
    FAILED = "failed"


class RetryState(BaseModel):
    """Per-invocation retry bookkeeping. Never shared between analyses."""

    attempt: int = 0
    max_attempts: int = MAX_ATTEMPTS
    base_delay_ms: int = BASE_DELAY_MS
    phase: RetryPhase = RetryPhase.IDLE
    last_failure: TransportFailure | None = None


Attempt = Callable[[], Awaitable[ProviderResponse | TransportFailure]]


class RetryController:
    """Drives repeated attempts under an exponential-backoff-with-jitter policy."""

    def __init__(
        self,
        max_attempts: int = MAX_ATTEMPTS,
        base_delay_ms: int = BASE_DELAY_MS,
        jitter_ms: int = JITTER_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        random_fn: Callable[[], float] = random.random,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.base_delay_ms = base_delay_ms
        self.jitter_ms = jitter_ms
        self._sleep = sleep
        self._random = random_fn

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait after failed attempt number `attempt` (0-based)."""
        delay_ms = (2 ** attempt) * self.base_delay_ms + self._random() * self.jitter_ms
        return delay_ms / 1000

    async def run(
        self,
        attempt_fn: Attempt,
        cancel_token: CancellationToken | None = None,
        label: str = "provider",
    ) -> ProviderResponse:
        state = RetryState(max_attempts=self.max_attempts, base_delay_ms=self.base_delay_ms)

        while True:
            if cancel_token is not None:
                cancel_token.raise_if_cancelled()

            state.phase = RetryPhase.ATTEMPTING
            logger.info(f"Attempt {state.attempt + 1}/{state.max_attempts}: calling {label}...")
            outcome = await guarded(attempt_fn(), cancel_token)

            if isinstance(outcome, ProviderResponse):
                state.phase = RetryPhase.SUCCESS
                logger.info(f"{label} call successful")
                return outcome

            state.last_failure = outcome
            attempts_used = state.attempt + 1

            if not outcome.retryable:
                state.phase = RetryPhase.FAILED
                logger.error(
                    f"{label} request failed with non-retryable status "
                    f"{outcome.status_code}: {outcome.message}"
                )
                raise TransportError(outcome.status_code, outcome.message, attempts=attempts_used)

            if state.attempt >= state.max_attempts - 1:
                state.phase = RetryPhase.FAILED
                logger.error(
                    f"{label} call failed after {attempts_used} attempts "
                    f"(status {outcome.status_code}): {outcome.message}"
                )
                raise TransportError(outcome.status_code, outcome.message, attempts=attempts_used)

            state.phase = RetryPhase.RETRY_SCHEDULED
            delay = self.backoff_delay(state.attempt)
            logger.warning(
                f"Attempt {attempts_used}/{state.max_attempts} failed "
                f"({outcome.status_code or 'network'}: {outcome.message}), retrying in {delay:.1f}s"
            )
            await guarded(self._sleep(delay), cancel_token)
            state.attempt += 1
