"""Chunked summarization: per-chunk bullet summaries folded into a tl;dr."""

from __future__ import annotations

import logging

from vault.errors import ServiceError
from vault.summarization.chunking import ChunkingStrategy, chunk_transcript, validate_chunk_size
from vault.summarization.generation import TextGenerator
from vault.summarization.models import ChunkResult, Digest
from vault.summarization.pacing import FixedDelayPacer, Pacer
from vault.summarization.prompts import CHUNK_PROMPT, FOLD_PROMPT, SINGLE_SHOT_PROMPT

logger = logging.getLogger(__name__)


class TranscriptSummarizer:
    """Summarize transcripts through a text-generation backend.

    Chunks are summarized strictly one after another. A failed chunk is logged
    and left out of the digest; only a failure of the final fold is raised.
    """

    def __init__(
        self,
        generator: TextGenerator,
        pacer: Pacer | None = None,
        chunk_size: int = 1000,
    ) -> None:
        self.generator = generator
        self.pacer = pacer if pacer is not None else FixedDelayPacer(1.0)
        self.chunk_size = validate_chunk_size(chunk_size)

    def summarize_chunks(
        self,
        transcript: str,
        strategy: ChunkingStrategy = ChunkingStrategy.WORDS,
        chunk_size: int | None = None,
        template: str = CHUNK_PROMPT,
    ) -> list[ChunkResult]:
        """Summarize each chunk of *transcript*, isolating per-chunk failures.

        Args:
            transcript: Raw transcript text.
            strategy: How to cut the transcript into chunks.
            chunk_size: Words per chunk; defaults to the summarizer's setting.
            template: Prompt template with a ``{text}`` placeholder.

        Returns:
            One :class:`ChunkResult` per chunk, in chunk order.

        Raises:
            ConfigError: If *chunk_size* is invalid. Raised before any call.
        """
        size = self.chunk_size if chunk_size is None else validate_chunk_size(chunk_size)
        chunks = chunk_transcript(transcript, strategy, size)

        results: list[ChunkResult] = []
        for chunk in chunks:
            if chunk.index > 0:
                self.pacer.wait()

            logger.info("Summarizing chunk %d/%d", chunk.index + 1, len(chunks))
            try:
                summary = self.generator.generate(template.format(text=chunk.content))
            except ServiceError as exc:
                logger.warning("Failed on chunk %d/%d: %s", chunk.index + 1, len(chunks), exc)
                results.append(ChunkResult(index=chunk.index, error=str(exc)))
                continue

            results.append(ChunkResult(index=chunk.index, summary=summary))

        return results

    def summarize(self, transcript: str, chunk_size: int | None = None) -> Digest:
        """Run the full chunk -> summarize -> fold pipeline.

        Args:
            transcript: Raw transcript text.
            chunk_size: Words per chunk; defaults to the summarizer's setting.

        Returns:
            A :class:`Digest` with the joined chunk summaries and the tl;dr.

        Raises:
            ConfigError: If *chunk_size* is invalid.
            ServiceError: If the final fold call fails.
        """
        results = self.summarize_chunks(transcript, ChunkingStrategy.WORDS, chunk_size)
        full_summary = "\n\n".join(r.summary for r in results if r.summary is not None)

        failed = [r.index for r in results if not r.ok]
        if failed:
            logger.warning("%d of %d chunks failed: %s", len(failed), len(results), failed)

        tldr = self.generator.generate(FOLD_PROMPT.format(text=full_summary))
        return Digest(full_summary=full_summary, tldr=tldr, chunks=results)

    def summarize_once(self, transcript: str) -> str | None:
        """Summarize the whole transcript with a single call.

        Returns ``None`` for an empty transcript or when the call fails.
        """
        results = self.summarize_chunks(
            transcript, ChunkingStrategy.WHOLE, template=SINGLE_SHOT_PROMPT
        )
        if not results or not results[0].ok:
            return None
        return results[0].summary
