"""Video endpoints: track + summarize, list, and one-shot summaries."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException

from vault.api.models import QuickSummaryResponse, TrackRequest, TrackResponse, VideoRecord
from vault.errors import ConfigError, ServiceError
from vault.storage import get_supabase_client, list_videos, store_video, update_video_summary
from vault.summarization.chunking import validate_chunk_size
from vault.summarization.service import build_summarizer, transcribe_and_summarize
from vault.transcripts.fetcher import fetch_transcript

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/track", response_model=TrackResponse, response_model_exclude_none=True)
async def track_video(request: TrackRequest) -> TrackResponse:
    """Store a watched video, then summarize its transcript if one exists.

    A missing transcript is not an error: the video is still saved and the
    response says so. A failure of the final tl;dr step returns 502.
    """
    try:
        # Reject bad configuration before anything is stored or downloaded.
        summarizer = build_summarizer()
        if request.chunk_size is not None:
            validate_chunk_size(request.chunk_size)

        client = get_supabase_client()
        store_video(
            client,
            request.video_id,
            title=request.title,
            url=request.url,
            channel=request.channel,
            timestamp=request.timestamp.isoformat() if request.timestamp else None,
        )
        logger.info("Video saved: %s", request.title or request.video_id)

        # yt-dlp and the LLM SDK are blocking; keep them off the event loop.
        transcript = await asyncio.to_thread(fetch_transcript, request.video_id)
        if not transcript:
            logger.warning("No transcript available for: %s", request.title or request.video_id)
            return TrackResponse(
                message="Video saved, but transcript not available.",
                video_id=request.video_id,
            )

        digest = await asyncio.to_thread(summarizer.summarize, transcript, request.chunk_size)

        update_video_summary(client, request.video_id, digest.full_summary, digest.tldr)
        logger.info("Summary added for: %s (%s)", request.title or request.video_id, digest.coverage)
    except ConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ServiceError as exc:
        logger.error("Summarization failed for %s: %s", request.video_id, exc)
        raise HTTPException(status_code=502, detail=f"Summarization failed: {exc}") from exc
    except Exception as exc:
        logger.exception("Error handling /api/track for %s", request.video_id)
        raise HTTPException(status_code=500, detail="Failed to process video.") from exc

    return TrackResponse(
        message="Video saved and summarized.",
        video_id=request.video_id,
        summary=digest.full_summary,
        tldr=digest.tldr,
        chunks_summarized=digest.summarized_count,
        chunks_total=digest.total_chunks,
    )


@router.get("/api/videos", response_model=list[VideoRecord])
async def get_videos() -> list[VideoRecord]:
    """List all tracked videos."""
    try:
        rows = list_videos(get_supabase_client())
    except Exception as exc:
        logger.exception("Failed to fetch videos")
        raise HTTPException(status_code=500, detail="Failed to fetch videos") from exc

    return [
        VideoRecord(
            video_id=row["video_id"],
            title=row.get("title"),
            url=row.get("url"),
            channel=row.get("channel"),
            timestamp=row.get("timestamp"),
            summary=row.get("summary"),
            tldr=row.get("tldr"),
        )
        for row in rows
    ]


@router.post("/api/videos/{video_id}/quick-summary", response_model=QuickSummaryResponse)
async def quick_summary(video_id: str) -> QuickSummaryResponse:
    """Summarize a video's whole transcript with a single generation call."""
    try:
        summarizer = build_summarizer()
    except ConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    result = await asyncio.to_thread(
        transcribe_and_summarize, video_id, fetch_transcript, summarizer
    )
    if result is None:
        raise HTTPException(status_code=404, detail="No transcript or summary available")

    return QuickSummaryResponse(
        video_id=video_id,
        transcript=result.transcript,
        summary=result.summary,
    )
