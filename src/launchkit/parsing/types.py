"""Shared parsing types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from launchkit.errors import InvalidOptionsError

DeploymentStatus = Literal["deploying", "deployed", "failed"]
UserType = Literal["beginner", "developer", "admin"]


class ParsingOptions(BaseModel):
    """Display options for one parse run.

    Keys may be given in snake_case or in the camelCase used by the chat UI.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    hide_code_blocks: bool = True
    hide_file_markers: bool = True
    show_technical_details: bool = False
    user_type: UserType = "beginner"

    def merged(self, overrides: Mapping[str, Any] | ParsingOptions | None) -> ParsingOptions:
        """Overlay ``overrides`` on these options; unspecified fields are inherited."""
        if overrides is None:
            return self
        if isinstance(overrides, ParsingOptions):
            overrides = overrides.model_dump(exclude_unset=True)
        payload = self.model_dump()
        try:
            # Validate the overrides alone first so camelCase keys are resolved.
            resolved = ParsingOptions.model_validate(dict(overrides)).model_dump(exclude_unset=True)
            payload.update(resolved)
            return ParsingOptions.model_validate(payload)
        except ValidationError as exc:
            raise InvalidOptionsError(str(exc)) from exc


DEFAULT_OPTIONS = ParsingOptions()


@dataclass(frozen=True)
class FileExtraction:
    """Text with embedded files removed, plus the file manifest."""

    content: str
    files: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CodeRedaction:
    """Text with fenced code replaced by a placeholder."""

    content: str
    had_code: bool


@dataclass(frozen=True)
class ParsedMessage:
    """Display-ready form of one assistant message."""

    content: str
    has_code: bool
    files_generated: list[str]
    deployment_status: DeploymentStatus | None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "content": self.content,
            "hasCode": self.has_code,
            "filesGenerated": list(self.files_generated),
        }
        if self.deployment_status is not None:
            payload["deploymentStatus"] = self.deployment_status
        return payload
