"""Pacing policies applied between successive generation calls.

The pipeline calls :meth:`Pacer.wait` between chunk attempts. Policies take
injectable ``sleep``/``clock`` callables so tests never block on real time.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

from vault.config import Settings
from vault.errors import ConfigError


class Pacer(Protocol):
    def wait(self) -> None: ...


class NoPacer:
    """Never waits."""

    def wait(self) -> None:
        return None


class FixedDelayPacer:
    """Sleep a constant number of seconds on every call, regardless of history."""

    def __init__(self, seconds: float = 1.0, sleep: Callable[[float], None] = time.sleep) -> None:
        if seconds < 0:
            raise ConfigError(f"Delay must be non-negative, got {seconds}")
        self.seconds = seconds
        self._sleep = sleep

    def wait(self) -> None:
        if self.seconds:
            self._sleep(self.seconds)


class TokenBucketPacer:
    """Allow bursts of up to *capacity* calls, refilled at *rate* calls per second."""

    def __init__(
        self,
        rate: float,
        capacity: int = 1,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rate <= 0:
            raise ConfigError(f"Token bucket rate must be positive, got {rate}")
        if capacity < 1:
            raise ConfigError(f"Token bucket capacity must be at least 1, got {capacity}")
        self.rate = rate
        self.capacity = capacity
        self._sleep = sleep
        self._clock = clock
        self._tokens = float(capacity)
        self._updated = clock()

    def _refill(self) -> None:
        now = self._clock()
        self._tokens = min(self.capacity, self._tokens + (now - self._updated) * self.rate)
        self._updated = now

    def wait(self) -> None:
        self._refill()
        if self._tokens < 1:
            deficit = (1 - self._tokens) / self.rate
            self._sleep(deficit)
            self._refill()
            # The injected clock may not advance with a fake sleep.
            self._tokens = max(self._tokens, 1.0)
        self._tokens -= 1


def build_pacer(settings: Settings) -> Pacer:
    """Create the pacing policy named by ``settings.pacing``."""
    if settings.pacing == "fixed":
        return FixedDelayPacer(settings.chunk_delay_seconds)
    if settings.pacing == "token_bucket":
        return TokenBucketPacer(rate=settings.rate_limit_per_minute / 60.0)
    if settings.pacing == "none":
        return NoPacer()
    raise ConfigError(f"Unknown pacing policy: {settings.pacing!r}. Supported: fixed, token_bucket, none")
