"""Helpers for chat chrome that do not need a full parse."""

from __future__ import annotations

import re

DEFAULT_APP_DOMAIN = "launchkit.stratxi.com"


def extract_app_url(text: str, domain: str = DEFAULT_APP_DOMAIN) -> str | None:
    """Return the first ``https://app-<8 hex>.<domain>`` URL in ``text``."""

    pattern = re.compile(rf"https://app-[a-f0-9]{{8}}\.{re.escape(domain)}")
    match = pattern.search(text)
    return match.group(0) if match else None


def contextual_placeholder(message_count: int, has_deployed_app: bool, last_message_had_code: bool) -> str:
    """Input box hint for the current state of the conversation."""

    if message_count == 0:
        return "Describe the app you'd like to build..."
    if last_message_had_code and not has_deployed_app:
        return "Make any changes or ask me to deploy it!"
    if has_deployed_app:
        return "What would you like to update or add?"
    return "Continue describing your app or ask me to build it..."
