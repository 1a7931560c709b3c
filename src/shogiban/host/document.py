"""Fenced code block extraction from Markdown-style documents."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})\s*(?P<info>[^`]*?)\s*$")


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """A fenced block: its language tag, raw body and 1-based body line."""

    language: str
    source: str
    line: int


def iter_code_blocks(text: str) -> Iterator[CodeBlock]:
    """Yield every fenced block in *text* in document order.

    The language is the first word of the info string, lower-cased.  A fence
    that is never closed runs to the end of the document.
    """
    lines = text.splitlines()
    idx = 0
    while idx < len(lines):
        match = _FENCE_RE.match(lines[idx])
        if match is None:
            idx += 1
            continue

        fence = match.group("fence")
        info = match.group("info").split()
        language = info[0].lower() if info else ""

        body_start = idx + 1
        end = body_start
        while end < len(lines) and not _closes(lines[end], fence):
            end += 1

        yield CodeBlock(language, "\n".join(lines[body_start:end]), body_start + 1)
        idx = end + 1


def _closes(line: str, fence: str) -> bool:
    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
        and len(line) - len(line.lstrip(" ")) <= 3
    )
