"""Convert WebVTT subtitle files into plain transcript text."""

from __future__ import annotations

import re

TIMESTAMP_RE = re.compile(
    r"(\d{1,2}:)?\d{2}:\d{2}[.,]\d{3}\s*-->\s*(\d{1,2}:)?\d{2}:\d{2}[.,]\d{3}"
)
# Inline markup in YouTube auto-captions: <c>, </c>, <00:00:01.234>, <v Speaker>
TAG_RE = re.compile(r"<[^>]*>")


def vtt_to_text(content: str) -> str:
    """Flatten a WebVTT document into a single line of transcript text.

    Only cue payload lines (those after a timing line, up to the next blank
    line) are kept. The header, NOTE/STYLE/REGION blocks and cue identifiers
    all sit outside cues and are dropped. Inline tags are stripped, and a
    caption line that repeats the previous one is skipped (YouTube's rolling
    auto-captions show each line twice).
    """
    lines: list[str] = []
    previous = ""
    in_cue = False

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            in_cue = False
            continue
        if TIMESTAMP_RE.search(line):
            in_cue = True
            continue
        if not in_cue:
            continue

        text = " ".join(TAG_RE.sub("", line).split())
        if not text or text == previous:
            continue

        lines.append(text)
        previous = text

    return " ".join(lines)
