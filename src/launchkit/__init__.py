"""launchkit - parse generated-app chat messages for display."""

from .parsing import (
    DEFAULT_OPTIONS,
    ParsedMessage,
    ParsingOptions,
    contextual_placeholder,
    create_technical_summary,
    detect_status,
    extract_app_url,
    is_deployment_success,
    parse_message,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPTIONS",
    "ParsedMessage",
    "ParsingOptions",
    "contextual_placeholder",
    "create_technical_summary",
    "detect_status",
    "extract_app_url",
    "is_deployment_success",
    "parse_message",
]
