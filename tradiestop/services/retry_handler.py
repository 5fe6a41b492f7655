"""
Retry handler for idempotent API reads: exponential backoff, jitter and a
circuit breaker.
"""

import logging
import random
import threading
import time
from typing import Any, Callable, Optional

from tradiestop.services.error_classifier import ErrorClassifier

logger = logging.getLogger(__name__)


class RetryExhaustedException(Exception):
    """Raised when all retry attempts have been exhausted."""

    def __init__(self, message: str, last_error: Optional[Exception] = None):
        super().__init__(message)
        self.last_error = last_error


class CircuitBreakerError(Exception):
    """Raised while the circuit breaker is open."""


class RetryHandler:
    """
    Retries a call on transient failures.

    Features:
    - Exponential backoff capped at ``max_delay`` with random jitter
    - Circuit breaker that rejects calls after repeated exhausted retries
    - Circuit breaker state shared safely between threads

    Only reads are routed through this handler.

    Example:
        >>> handler = RetryHandler(max_retries=2, base_delay=0.5)
        >>> handler.execute_with_retry(lambda: "ok")
        'ok'
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        exponential_base: float = 2,
        jitter_factor: float = 0.1,
        circuit_breaker_threshold: int = 5,
        circuit_breaker_timeout: float = 60.0,
        retry_condition: Optional[Callable[[Exception], bool]] = None,
    ):
        """
        Args:
            max_retries: Retry attempts after the first call
            base_delay: Delay before the first retry (seconds)
            max_delay: Upper bound of a single delay (seconds)
            exponential_base: Growth factor of the delay per attempt
            jitter_factor: Fraction of the delay added or removed at random
            circuit_breaker_threshold: Exhausted calls before the breaker opens
            circuit_breaker_timeout: Seconds before an open breaker lets a
                call through again
            retry_condition: Predicate deciding whether an error is retried;
                defaults to ErrorClassifier.is_retryable
        """
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter_factor = jitter_factor
        self.circuit_breaker_threshold = circuit_breaker_threshold
        self.circuit_breaker_timeout = circuit_breaker_timeout
        self.classifier = ErrorClassifier()
        self.retry_condition = retry_condition or self.classifier.is_retryable

        self._circuit_breaker_open = False
        self._circuit_breaker_opened_at = 0.0
        self._failure_count = 0

        self._lock = threading.Lock()

    def _calculate_delay(self, attempt: int) -> float:
        """Backoff delay in seconds for a 0-based attempt number."""
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        jitter = random.uniform(-self.jitter_factor, self.jitter_factor) * delay
        return max(0.0, delay + jitter)

    def _is_circuit_breaker_open(self) -> bool:
        with self._lock:
            if not self._circuit_breaker_open:
                return False
            if (
                time.time() - self._circuit_breaker_opened_at
                >= self.circuit_breaker_timeout
            ):
                logger.info("Circuit breaker half-open, letting a request through")
                return False
            return True

    def _record_success(self):
        with self._lock:
            self._failure_count = 0
            if self._circuit_breaker_open:
                logger.info("Circuit breaker closed after successful request")
                self._circuit_breaker_open = False

    def _record_failure(self):
        with self._lock:
            self._failure_count += 1
            if (
                not self._circuit_breaker_open
                and self._failure_count >= self.circuit_breaker_threshold
            ):
                logger.warning(
                    f"Circuit breaker opened after {self._failure_count} failures"
                )
                self._circuit_breaker_open = True
                self._circuit_breaker_opened_at = time.time()

    def execute_with_retry(self, func: Callable, *args, **kwargs) -> Any:
        """
        Call ``func`` and retry it while the failure is transient.

        Raises:
            CircuitBreakerError: If the circuit breaker is open
            RetryExhaustedException: If every attempt failed with a
                retryable error
            Exception: The original error if it is not retryable
        """
        if self._is_circuit_breaker_open():
            raise CircuitBreakerError(
                "Too many failed requests, the API is not being contacted for now"
            )

        func_name = getattr(func, "__name__", repr(func))
        for attempt in range(self.max_retries + 1):
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                if not self.retry_condition(e):
                    logger.debug(f"Not retrying {func_name}: {type(e).__name__}")
                    raise

                if attempt >= self.max_retries:
                    logger.warning(
                        f"Max retries ({self.max_retries}) exceeded for {func_name}"
                    )
                    self._record_failure()
                    raise RetryExhaustedException(
                        f"Max retries ({self.max_retries}) exceeded. "
                        f"Last error: {type(e).__name__}: {e}",
                        last_error=e,
                    ) from e

                delay = self._calculate_delay(attempt)
                logger.debug(
                    f"Retrying {func_name} in {delay:.2f}s "
                    f"(attempt {attempt + 1}/{self.max_retries + 1}): "
                    f"{self.classifier.get_error_description(e)}"
                )
                time.sleep(delay)
                continue

            if attempt > 0:
                logger.info(f"{func_name} succeeded after {attempt} retries")
            self._record_success()
            return result
