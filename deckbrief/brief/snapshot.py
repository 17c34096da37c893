# Best-effort text heuristics behind the results view: a short bullet list
# from the summary and a one-sentence "investor angle" from the brief.
# None of these raise; odd input degrades to empty values.

import re
from typing import Any, List

from .types import Snapshot

MAX_BULLETS = 5
ANGLE_FALLBACK_CHARS = 220

_SPLIT_RE = re.compile(r"\r?\n|•|-")
_MARKER_RE = re.compile(r"^[•\-\d.)\s]+")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]")


def extract_bullets(summary: Any) -> List[str]:
    if not isinstance(summary, str) or not summary:
        return []
    bullets = []
    for part in _SPLIT_RE.split(summary):
        part = part.strip()
        if not part:
            continue
        part = _MARKER_RE.sub("", part)
        if part:
            bullets.append(part)
    return bullets[:MAX_BULLETS]


def investor_angle(brief: Any = None, summary: Any = None) -> str:
    src = brief if isinstance(brief, str) and brief.strip() else summary
    if not isinstance(src, str):
        return ""
    src = src.strip()
    if not src:
        return ""
    m = _SENTENCE_RE.search(src)
    return (m.group(0) if m else src[:ANGLE_FALLBACK_CHARS]).strip()


def build_snapshot(summary: Any = None, brief: Any = None) -> Snapshot:
    return Snapshot(bullets=extract_bullets(summary), investor_angle=investor_angle(brief, summary))
