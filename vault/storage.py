"""Supabase storage helpers for tracked videos."""

from __future__ import annotations

from typing import Any, cast

from supabase import Client, create_client

from vault.config import settings


def get_supabase_client() -> Client:
    """Create and return a Supabase client from application settings."""
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
    )


def store_video(
    client: Client,
    video_id: str,
    title: str | None = None,
    url: str | None = None,
    channel: str | None = None,
    timestamp: str | None = None,
) -> dict[str, Any]:
    """Insert a tracked video and return the stored row."""
    result = (
        client.table(settings.videos_table)
        .insert(
            {
                "video_id": video_id,
                "title": title,
                "url": url,
                "channel": channel,
                "timestamp": timestamp,
            }
        )
        .execute()
    )
    rows = cast(list[dict[str, Any]], result.data)
    return rows[0] if rows else {}


def update_video_summary(client: Client, video_id: str, summary: str, tldr: str) -> None:
    """Attach the summary and tl;dr to every row for *video_id*."""
    (
        client.table(settings.videos_table)
        .update({"summary": summary, "tldr": tldr})
        .eq("video_id", video_id)
        .execute()
    )


def list_videos(client: Client) -> list[dict[str, Any]]:
    """Return all tracked videos, newest first."""
    result = (
        client.table(settings.videos_table).select("*").order("timestamp", desc=True).execute()
    )
    return cast(list[dict[str, Any]], result.data)
