"""End-to-end tests against live services.

# MANUAL RUN REQUIRED: These tests call YouTube (via yt-dlp) and the configured LLM.
# Run manually with: pytest -m expensive tests/test_pipeline_integration.py -v
# Ensure .env has OPENAI_API_KEY (or LLM_PROVIDER=anthropic + ANTHROPIC_API_KEY).
#
# These tests are NOT run by default (marked @pytest.mark.expensive).
"""

from __future__ import annotations

import pytest

# Public talk with English auto-captions.
LIVE_VIDEO_ID = "arj7oStGLkU"


@pytest.mark.expensive
def test_fetch_and_summarize_live_video(tmp_path) -> None:
    """Fetch real captions, run the chunked pipeline, and check both digest levels."""
    from vault.config import settings
    from vault.summarization.generation import build_generator
    from vault.summarization.orchestrator import TranscriptSummarizer
    from vault.summarization.pacing import FixedDelayPacer
    from vault.transcripts.fetcher import fetch_transcript

    transcript = fetch_transcript(LIVE_VIDEO_ID, transcripts_dir=tmp_path)
    assert transcript, "Expected English auto-captions for the live test video"

    summarizer = TranscriptSummarizer(
        build_generator(settings), pacer=FixedDelayPacer(1.0), chunk_size=500
    )
    digest = summarizer.summarize(transcript)

    assert digest.total_chunks >= 1
    assert digest.summarized_count >= 1
    assert digest.full_summary.strip()
    assert digest.tldr.strip()


@pytest.mark.expensive
def test_single_shot_live_video() -> None:
    from vault.summarization.service import transcribe_and_summarize

    result = transcribe_and_summarize(LIVE_VIDEO_ID)
    assert result is not None
    assert result.summary.strip()
