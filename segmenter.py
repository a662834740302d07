"""Split delivered text into plain-text runs and file references."""

from __future__ import annotations

import re
from typing import Iterable, List

from models import SegmentKind, TextSegment


def _build_pattern(references: List[str]) -> re.Pattern:
    # One group per reference; the group index maps a match back to its name.
    return re.compile("|".join(f"({re.escape(ref)})" for ref in references), re.IGNORECASE)


def segment(text: str, file_references: Iterable[str]) -> List[TextSegment]:
    """Split ``text`` into ordered segments around known file names.

    Matching is case-insensitive, but every file segment carries the
    reference exactly as it was supplied, so "header.tsx" in the text
    becomes a "Header.tsx" segment when that is the known name. Plain
    segments are never empty, and text without any reference comes back
    as a single plain segment.
    """
    # Longest first so "auth.config.ts" wins over "config.ts".
    ordered = sorted((ref for ref in file_references if ref), key=len, reverse=True)
    if not ordered:
        return [TextSegment(SegmentKind.PLAIN_TEXT, text)]

    segments: List[TextSegment] = []
    cursor = 0
    for match in _build_pattern(ordered).finditer(text):
        if match.start() > cursor:
            segments.append(TextSegment(SegmentKind.PLAIN_TEXT, text[cursor:match.start()]))
        segments.append(TextSegment(SegmentKind.FILE_REFERENCE, ordered[match.lastindex - 1]))
        cursor = match.end()

    if cursor < len(text) or not segments:
        segments.append(TextSegment(SegmentKind.PLAIN_TEXT, text[cursor:]))
    return segments


def has_file_reference(segments: Iterable[TextSegment]) -> bool:
    return any(seg.kind is SegmentKind.FILE_REFERENCE for seg in segments)
