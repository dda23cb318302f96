"""Deployment status detection from assistant text."""

from __future__ import annotations

from launchkit.parsing.types import DeploymentStatus

FAILED_KEYWORDS = (
    "deployment failed",
    "build failed",
    "deployment issue",
    "deployment error",
)
DEPLOYED_KEYWORDS = (
    "your app is live",
    "app is live at",
    "deployed successfully",
    "deployment complete",
)
DEPLOYING_KEYWORDS = (
    "deploying",
    "building",
    "creating deployment",
    "deployment in progress",
)
SUCCESS_INDICATORS = (
    "your app is live",
    "deployed successfully",
    "deployment complete",
    "🚀 your app is live at",
)

# Failure wins over success, success over progress.
_PRECEDENCE: tuple[tuple[DeploymentStatus, tuple[str, ...]], ...] = (
    ("failed", FAILED_KEYWORDS),
    ("deployed", DEPLOYED_KEYWORDS),
    ("deploying", DEPLOYING_KEYWORDS),
)


def detect_status(text: str) -> DeploymentStatus | None:
    """Classify the deployment lifecycle mentioned in ``text``, or None."""

    lowered = text.lower()
    for status, keywords in _PRECEDENCE:
        if _contains_any(lowered, keywords):
            return status
    return None


def is_deployment_success(text: str) -> bool:
    """Whether ``text`` announces a live app, regardless of other cues."""

    return _contains_any(text.lower(), SUCCESS_INDICATORS)


def _contains_any(lowered: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in lowered for keyword in keywords)
