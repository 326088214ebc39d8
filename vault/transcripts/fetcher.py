"""Fetch YouTube auto-generated captions with yt-dlp."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yt_dlp
from yt_dlp.utils import DownloadError

from vault.config import settings
from vault.transcripts.vtt import vtt_to_text

logger = logging.getLogger(__name__)

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{6,}$")


def _subtitle_options(output_dir: Path, lang: str) -> dict[str, Any]:
    return {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        "writeautomaticsub": True,
        "subtitleslangs": [lang],
        "subtitlesformat": "vtt",
        "outtmpl": str(output_dir / "%(id)s.%(ext)s"),
    }


def _find_subtitle_file(output_dir: Path, video_id: str, lang: str) -> Path | None:
    # Exact name written by outtmpl; a glob would also match ids sharing this prefix.
    path = output_dir / f"{video_id}.{lang}.vtt"
    return path if path.is_file() else None


def fetch_transcript(
    video_id: str,
    transcripts_dir: str | Path | None = None,
    lang: str | None = None,
) -> str | None:
    """Download and flatten the auto-generated captions for *video_id*.

    Args:
        video_id: YouTube video ID (the ``v=`` query parameter).
        transcripts_dir: Where yt-dlp writes ``.vtt`` files. Defaults to
            ``settings.transcripts_dir``.
        lang: Caption language code. Defaults to ``settings.subtitle_lang``.

    Returns:
        The transcript as plain text, or ``None`` when no transcript is
        available (invalid ID, download failure, no captions, empty captions).
    """
    if not VIDEO_ID_RE.match(video_id):
        logger.warning("Refusing to fetch transcript for invalid video id %r", video_id)
        return None

    output_dir = Path(transcripts_dir or settings.transcripts_dir)
    lang = lang or settings.subtitle_lang
    output_dir.mkdir(parents=True, exist_ok=True)

    url = f"https://www.youtube.com/watch?v={video_id}"
    try:
        with yt_dlp.YoutubeDL(_subtitle_options(output_dir, lang)) as ydl:
            ydl.download([url])
    except DownloadError as exc:
        logger.error("yt-dlp failed to fetch transcript for %s: %s", video_id, exc)
        return None

    subtitle_path = _find_subtitle_file(output_dir, video_id, lang)
    if subtitle_path is None:
        logger.warning("No .%s.vtt captions found for %s", lang, video_id)
        return None

    text = vtt_to_text(subtitle_path.read_text(encoding="utf-8"))
    if not text:
        logger.warning("Captions for %s are empty", video_id)
        return None

    logger.info("yt-dlp transcript length for %s: %d", video_id, len(text))
    return text
