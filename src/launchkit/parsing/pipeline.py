"""Assistant message parsing pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger

from launchkit.parsing.code_blocks import count_code_blocks, redact_code
from launchkit.parsing.enhancer import enhance
from launchkit.parsing.files import BEGIN_MARKER, extract_files
from launchkit.parsing.status import detect_status
from launchkit.parsing.types import DEFAULT_OPTIONS, ParsedMessage, ParsingOptions
from launchkit.parsing.whitespace import normalize


def parse_message(
    raw: str,
    options: ParsingOptions | Mapping[str, Any] | None = None,
) -> ParsedMessage:
    """Turn raw assistant output into its display form.

    Stages run in a fixed order: status detection on the untouched text, file
    marker extraction, code redaction, whitespace cleanup, then the status
    trailer. Calling again on the same ``raw`` with other options yields the
    other representation; nothing is cached between calls.
    """

    opts = DEFAULT_OPTIONS.merged(options)
    status = detect_status(raw)
    content = raw
    has_code = False
    files: list[str] = []

    if opts.hide_file_markers:
        extraction = extract_files(content)
        content = extraction.content
        files = extraction.files
        has_code = bool(files)

    if opts.hide_code_blocks:
        redaction = redact_code(content, opts.user_type, status, collapsible=opts.show_technical_details)
        content = redaction.content
        has_code = has_code or redaction.had_code

    content = normalize(content)

    if status is not None and has_code:
        content = enhance(content, status, len(files))

    logger.debug("message.parse status={} files={} has_code={}", status, len(files), has_code)
    return ParsedMessage(content=content, has_code=has_code, files_generated=files, deployment_status=status)


def create_technical_summary(text: str) -> str:
    """One-line summary of the generated code in ``text``, or empty."""

    file_markers = text.count(BEGIN_MARKER)
    if file_markers > 0:
        return f"📋 Generated {file_markers} files with complete app structure"
    code_blocks = count_code_blocks(text)
    if code_blocks > 0:
        noun = "component" if code_blocks == 1 else "components"
        return f"💻 Generated {code_blocks} code {noun}"
    return ""
