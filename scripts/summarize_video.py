"""Summarize a YouTube video (or a local transcript file) from the command line."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vault.config import settings
from vault.errors import VaultError
from vault.summarization.generation import build_generator
from vault.summarization.orchestrator import TranscriptSummarizer
from vault.summarization.pacing import NoPacer, build_pacer
from vault.transcripts.fetcher import fetch_transcript


def main() -> int:
    parser = argparse.ArgumentParser(description="Chunk, summarize and condense a transcript")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--video-id", help="YouTube video ID to fetch captions for")
    source.add_argument("--file", type=Path, help="Path to a plain-text transcript")
    parser.add_argument(
        "--chunk-size", type=int, default=settings.chunk_size, help="Words per chunk"
    )
    parser.add_argument(
        "--no-delay", action="store_true", help="Do not pause between chunk requests"
    )
    parser.add_argument(
        "--single-shot", action="store_true", help="Summarize with one call, no chunking"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.file:
        transcript: str | None = args.file.read_text(encoding="utf-8")
    else:
        transcript = fetch_transcript(args.video_id)

    if not transcript:
        print("No transcript available.", file=sys.stderr)
        return 1

    try:
        summarizer = TranscriptSummarizer(
            generator=build_generator(settings),
            pacer=NoPacer() if args.no_delay else build_pacer(settings),
            chunk_size=args.chunk_size,
        )

        if args.single_shot:
            summary = summarizer.summarize_once(transcript)
            if summary is None:
                print("Summarization failed.", file=sys.stderr)
                return 1
            print(summary)
            return 0

        digest = summarizer.summarize(transcript)
    except VaultError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("=== Full summary ===")
    print(digest.full_summary)
    print()
    print("=== TL;DR ===")
    print(digest.tldr)
    print()
    print(f"({digest.coverage})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
