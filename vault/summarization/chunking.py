"""Chunking strategies for transcript text."""

from __future__ import annotations

from enum import Enum

from vault.errors import ConfigError
from vault.summarization.models import Chunk

DEFAULT_WORDS_PER_CHUNK = 1000


class ChunkingStrategy(str, Enum):
    """How a transcript is cut into units of independent summarization."""

    WORDS = "words"
    WHOLE = "whole"


def validate_chunk_size(words_per_chunk: object) -> int:
    """Return *words_per_chunk* if it is a positive int, else raise ConfigError."""
    # bool is an int subclass; True would silently mean "one word per chunk"
    if isinstance(words_per_chunk, bool) or not isinstance(words_per_chunk, int):
        raise ConfigError(f"Chunk size must be a positive integer, got {words_per_chunk!r}")
    if words_per_chunk <= 0:
        raise ConfigError(f"Chunk size must be a positive integer, got {words_per_chunk}")
    return words_per_chunk


def split_into_chunks(text: str, words_per_chunk: int = DEFAULT_WORDS_PER_CHUNK) -> list[Chunk]:
    """Split text into consecutive chunks of at most *words_per_chunk* words.

    Any run of whitespace is a single delimiter and chunk text is rejoined with
    single spaces, so original line breaks and spacing are not preserved.

    Args:
        text: Raw transcript text.
        words_per_chunk: Maximum number of words per chunk.

    Returns:
        List of :class:`Chunk` instances in transcript order. Empty or
        whitespace-only input produces no chunks.

    Raises:
        ConfigError: If *words_per_chunk* is not a positive integer.
    """
    size = validate_chunk_size(words_per_chunk)
    words = text.split()

    chunks: list[Chunk] = []
    for start in range(0, len(words), size):
        window = words[start : start + size]
        chunks.append(Chunk(index=len(chunks), content=" ".join(window), word_count=len(window)))

    return chunks


def whole_text_chunk(text: str) -> list[Chunk]:
    """Treat the entire transcript as a single chunk (no splitting)."""
    content = text.strip()
    if not content:
        return []
    return [Chunk(index=0, content=content, word_count=len(content.split()))]


def chunk_transcript(
    text: str,
    strategy: str | ChunkingStrategy = ChunkingStrategy.WORDS,
    chunk_size: int = DEFAULT_WORDS_PER_CHUNK,
) -> list[Chunk]:
    """Dispatch to the chunker selected by *strategy*."""
    if isinstance(strategy, str):
        try:
            strategy = ChunkingStrategy(strategy)
        except ValueError as exc:
            raise ConfigError(f"Unknown chunking strategy: {strategy!r}") from exc

    if strategy is ChunkingStrategy.WHOLE:
        return whole_text_chunk(text)
    return split_into_chunks(text, chunk_size)
