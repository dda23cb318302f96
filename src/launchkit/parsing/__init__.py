"""Assistant message parsing."""

from .code_blocks import count_code_blocks, redact_code
from .enhancer import enhance
from .files import extract_files
from .hints import contextual_placeholder, extract_app_url
from .pipeline import create_technical_summary, parse_message
from .status import detect_status, is_deployment_success
from .types import DEFAULT_OPTIONS, DeploymentStatus, ParsedMessage, ParsingOptions, UserType
from .whitespace import normalize

__all__ = [
    "DEFAULT_OPTIONS",
    "DeploymentStatus",
    "ParsedMessage",
    "ParsingOptions",
    "UserType",
    "contextual_placeholder",
    "count_code_blocks",
    "create_technical_summary",
    "detect_status",
    "enhance",
    "extract_app_url",
    "extract_files",
    "is_deployment_success",
    "normalize",
    "parse_message",
    "redact_code",
]
