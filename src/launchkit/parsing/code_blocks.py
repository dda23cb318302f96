"""Fenced code block redaction."""

from __future__ import annotations

import re

from launchkit.parsing.types import CodeRedaction, DeploymentStatus, UserType

CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")

COLLAPSIBLE_TEMPLATE = (
    "💻 *Code generated and deployed* <details><summary>Show technical details</summary>{block}</details>"
)
DEPLOYED_PLACEHOLDER = "✅ **Code generated successfully** - Your app is ready to use!"
DEPLOYING_PLACEHOLDER = "🚀 **Deploying your code...** - This will take a moment"
GENERIC_PLACEHOLDER = "💻 **App code generated** - Building your application..."


def redact_code(
    text: str,
    user_type: UserType,
    status: DeploymentStatus | None,
    *,
    collapsible: bool = False,
) -> CodeRedaction:
    """Replace every fenced block in ``text`` with one message-level placeholder.

    Developers, or callers asking for ``collapsible`` output, keep the block
    inside a ``<details>`` wrapper instead of losing it.
    """

    if CODE_BLOCK_RE.search(text) is None:
        return CodeRedaction(content=text, had_code=False)

    if user_type == "developer" or collapsible:
        content = CODE_BLOCK_RE.sub(lambda match: COLLAPSIBLE_TEMPLATE.format(block=match.group(0)), text)
        return CodeRedaction(content=content, had_code=True)

    placeholder = _placeholder_for(status)
    return CodeRedaction(content=CODE_BLOCK_RE.sub(lambda _match: placeholder, text), had_code=True)


def count_code_blocks(text: str) -> int:
    return len(CODE_BLOCK_RE.findall(text))


def _placeholder_for(status: DeploymentStatus | None) -> str:
    if status == "deployed":
        return DEPLOYED_PLACEHOLDER
    if status == "deploying":
        return DEPLOYING_PLACEHOLDER
    return GENERIC_PLACEHOLDER
