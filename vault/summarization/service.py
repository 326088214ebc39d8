"""Entry points wiring transcript acquisition to the summarizer."""

from __future__ import annotations

import logging
from collections.abc import Callable

from vault.config import Settings, settings
from vault.summarization.generation import build_generator
from vault.summarization.models import SingleShotResult
from vault.summarization.orchestrator import TranscriptSummarizer
from vault.summarization.pacing import build_pacer
from vault.transcripts.fetcher import fetch_transcript

logger = logging.getLogger(__name__)


def build_summarizer(config: Settings | None = None) -> TranscriptSummarizer:
    """Create a summarizer from application settings."""
    config = config or settings
    return TranscriptSummarizer(
        generator=build_generator(config),
        pacer=build_pacer(config),
        chunk_size=config.chunk_size,
    )


def transcribe_and_summarize(
    video_id: str,
    fetcher: Callable[[str], str | None] = fetch_transcript,
    summarizer: TranscriptSummarizer | None = None,
) -> SingleShotResult | None:
    """Fetch a transcript and summarize it in one shot.

    All-or-nothing: returns ``None`` if there is no transcript or if the
    summary call fails.
    """
    logger.info("Processing video: %s", video_id)

    transcript = fetcher(video_id)
    if not transcript:
        logger.error("Failed to fetch transcript for %s", video_id)
        return None

    summarizer = summarizer or build_summarizer()
    summary = summarizer.summarize_once(transcript)
    if summary is None:
        logger.error("Failed to summarize transcript for %s", video_id)
        return None

    return SingleShotResult(transcript=transcript, summary=summary)
