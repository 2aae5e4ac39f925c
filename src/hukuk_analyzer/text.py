"""Turkish-aware text helpers shared by every matcher.

Python's ``str.lower()`` maps ``I`` to ``i`` and expands ``İ`` into two code
points, which breaks both Turkish keyword matching and character offsets.
``fold`` applies the Turkish mapping first so that the result has exactly the
same length as the input.
"""

from __future__ import annotations

import re

_TURKISH_UPPER = str.maketrans({"İ": "i", "I": "ı"})

_SENTENCE_RE = re.compile(r"[^.!?;\n]+(?:[.!?;]+|$)", re.MULTILINE)


def fold(text: str) -> str:
    """Lower-case *text* with Turkish dotted/dotless i rules.

    The result always has the same length as *text*, so offsets found in the
    folded string are valid in the original.
    """
    return text.translate(_TURKISH_UPPER).lower()


def split_sentences(text: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` offsets of the non-blank sentences in *text*."""
    spans: list[tuple[int, int]] = []
    for match in _SENTENCE_RE.finditer(text):
        chunk = match.group()
        if not chunk.strip():
            continue
        lead = len(chunk) - len(chunk.lstrip())
        trail = len(chunk) - len(chunk.rstrip())
        spans.append((match.start() + lead, match.end() - trail))
    return spans


def sentence_around(text: str, offset: int) -> str:
    """Return the sentence of *text* containing character *offset*."""
    for start, end in split_sentences(text):
        if start <= offset < end:
            return text[start:end]
    return text.strip()


def truncate(text: str, limit: int = 80) -> str:
    """Shorten *text* to *limit* characters, collapsing whitespace."""
    compact = " ".join(text.split())
    if len(compact) <= limit:
        return compact
    return compact[: limit - 3].rstrip() + "..."
