# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Interface shared by the version-control collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

DEFAULT_TAG_MESSAGE = "Release version {name}"


@dataclass(frozen=True)
class TagLookup:
    """Result of a latest-tag query: a tag name, or no prior tag at all."""

    name: str | None = None

    @property
    def found(self) -> bool:
        return self.name is not None

    @classmethod
    def no_prior_tag(cls) -> TagLookup:
        return cls(None)


class VersionControl(Protocol):
    """Operations the CLI needs from a version-control backend."""

    def latest_tag(self) -> TagLookup: ...

    def latest_commit_message(self) -> str: ...

    def create_tag(self, tag_name: str, message: str | None = None) -> None: ...


def tag_message(tag_name: str, message: str | None = None) -> str:
    """Return the annotation message for a tag, defaulting to 'Release version {name}'."""
    return message or DEFAULT_TAG_MESSAGE.format(name=tag_name)
