"""Application-level exception types for launchkit."""

from __future__ import annotations


class LaunchkitError(Exception):
    """Base exception for launchkit."""


class ConfigurationError(LaunchkitError):
    """Base exception for configuration and startup validation errors."""


class InvalidOptionsError(ConfigurationError):
    """Raised when parsing options carry unknown keys or invalid values."""
