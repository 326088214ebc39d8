"""Data models for the summarization pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of a transcript's words."""

    index: int
    content: str
    word_count: int


@dataclass(frozen=True)
class ChunkResult:
    """Outcome of summarizing one chunk: a summary or the reason it failed."""

    index: int
    summary: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.summary is not None


@dataclass
class Digest:
    """Two-level summary of a transcript.

    ``full_summary`` joins the successful chunk summaries in chunk order with a
    blank line; ``tldr`` is the condensed fold of ``full_summary``.
    """

    full_summary: str
    tldr: str
    chunks: list[ChunkResult] = field(default_factory=list)

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    @property
    def summarized_count(self) -> int:
        return sum(1 for c in self.chunks if c.ok)

    @property
    def failed_indices(self) -> list[int]:
        return [c.index for c in self.chunks if not c.ok]

    @property
    def coverage(self) -> str:
        """Human-readable partial-failure note, e.g. ``"3 of 5 sections summarized"``."""
        return f"{self.summarized_count} of {self.total_chunks} sections summarized"


@dataclass(frozen=True)
class SingleShotResult:
    """Transcript plus its one-shot (non-chunked) summary."""

    transcript: str
    summary: str
