# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Exception hierarchy for version planning and version-control access."""

from __future__ import annotations


class SemverBumpError(Exception):
    """Base class for all errors raised by semver_bump."""


class ParseError(SemverBumpError, ValueError):
    """Raised when an input value cannot be parsed."""


class EmptyVersionError(ParseError):
    """Raised when a version string is empty after cleaning."""

    def __init__(self, raw: str = "") -> None:
        self.raw = raw
        super().__init__(f"empty version string: {raw!r}")


class InvalidVersionError(ParseError):
    """Raised when a string is not a strict MAJOR.MINOR.PATCH triple."""

    def __init__(self, value: str, detail: str) -> None:
        self.value = value
        self.detail = detail
        super().__init__(f"invalid version {value!r}: {detail}")


class InvalidFlagError(ParseError):
    """Raised when a boolean flag is not one of the accepted literals."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"has-breaking-change must be a boolean value (true or false), got {value!r}")


class PolicyError(SemverBumpError):
    """Raised when the bump policy cannot be applied."""


class UnsupportedBranchError(PolicyError):
    """Raised for branches that have no bump policy."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f"unsupported branch: {branch}")


class VersionControlError(SemverBumpError):
    """Raised when a version-control collaborator fails."""


class GitCommandError(VersionControlError):
    """Raised when a git command exits non-zero or cannot be run."""

    def __init__(self, args: list[str], stderr: str = "") -> None:
        self.args_ = list(args)
        self.stderr = stderr
        message = f"git command failed: git {' '.join(args)}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)
