"""Shared fixtures: a scripted text generator and a sleep recorder."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from vault.errors import ServiceError


class ScriptedGenerator:
    """Stand-in for a generation backend.

    Replies ``"summary <n>"`` for the n-th call (1-based) unless *n* is listed
    in ``fail_on``, in which case it raises ServiceError. Every prompt is kept.
    """

    def __init__(
        self,
        fail_on: set[int] | None = None,
        reply: Callable[[int, str], str] | None = None,
    ) -> None:
        self.fail_on = fail_on or set()
        self.reply = reply or (lambda n, prompt: f"summary {n}")
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        n = len(self.prompts)
        if n in self.fail_on:
            raise ServiceError(f"call {n} failed")
        return self.reply(n, prompt)


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def make_generator() -> Callable[..., ScriptedGenerator]:
    return ScriptedGenerator


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


def words(n: int, prefix: str = "w") -> str:
    return " ".join(f"{prefix}{i}" for i in range(n))


@pytest.fixture
def make_words() -> Callable[..., str]:
    """Build a transcript of *n* distinct words: ``w0 w1 ...``."""
    return words
