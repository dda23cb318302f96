"""Whitespace cleanup for display text."""

from __future__ import annotations

import re

TRAILING_SPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)
BLANK_RUN_RE = re.compile(r"\n{4,}")


def normalize(text: str) -> str:
    """Trim the text, strip line-end spaces and cap newline runs at three.

    Line ends are stripped before runs are collapsed: a space-only line between
    blank lines would otherwise surface a fresh run on the next call.
    """

    text = TRAILING_SPACE_RE.sub("", text)
    text = BLANK_RUN_RE.sub("\n\n\n", text)
    return text.strip()
