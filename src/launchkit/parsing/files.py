"""Embedded file marker extraction.

Assistant output may inline whole source files using a delimiter pair::

    !~*FILENAME:app/page.tsx*~!
    ...body...
    !~*ENDFILE:app/page.tsx*~!

The end marker must repeat the begin marker's name. Unterminated or mismatched
markers are left in the text untouched.
"""

from __future__ import annotations

import re

from launchkit.parsing.types import FileExtraction

BEGIN_MARKER = "!~*FILENAME:"
FILE_MARKER_RE = re.compile(r"!~\*FILENAME:(.+?)\*~!([\s\S]*?)!~\*ENDFILE:\1\*~!")
MANIFEST_HEADER = "📁 **Generated Files:**"
MANIFEST_BULLET = "• "


def extract_files(text: str) -> FileExtraction:
    """Strip embedded files from ``text`` and append a manifest of them."""

    files = [_describe(match) for match in FILE_MARKER_RE.finditer(text)]
    if not files:
        return FileExtraction(content=text, files=[])

    remaining = FILE_MARKER_RE.sub("", text)
    manifest = "\n".join(f"{MANIFEST_BULLET}{entry}" for entry in files)
    return FileExtraction(content=f"{remaining}\n\n{MANIFEST_HEADER}\n{manifest}", files=files)


def count_lines(body: str) -> int:
    """Count non-blank lines of a file body."""

    return sum(1 for line in body.split("\n") if line.strip())


def _describe(match: re.Match[str]) -> str:
    filename = match.group(1).strip()
    return f"{filename} ({count_lines(match.group(2))} lines)"
