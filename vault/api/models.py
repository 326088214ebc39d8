"""Pydantic request/response schemas for the Video Vault API."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class TrackRequest(BaseModel):
    """Request body for the /api/track endpoint."""

    # Accept the camelCase keys sent by existing clients.
    video_id: str = Field(validation_alias=AliasChoices("video_id", "videoId"))
    title: str | None = None
    url: str | None = None
    channel: str | None = None
    timestamp: datetime | None = None
    chunk_size: int | None = Field(
        default=None, validation_alias=AliasChoices("chunk_size", "chunkSize")
    )


class TrackResponse(BaseModel):
    """Response body for the /api/track endpoint.

    Summary fields are omitted when no transcript was available.
    """

    message: str
    video_id: str
    summary: str | None = None
    tldr: str | None = None
    chunks_summarized: int | None = None
    chunks_total: int | None = None


class VideoRecord(BaseModel):
    """A stored video as returned by /api/videos."""

    video_id: str
    title: str | None = None
    url: str | None = None
    channel: str | None = None
    timestamp: str | None = None
    summary: str | None = None
    tldr: str | None = None


class QuickSummaryResponse(BaseModel):
    """Response body for the one-shot summary endpoint."""

    video_id: str
    transcript: str
    summary: str
