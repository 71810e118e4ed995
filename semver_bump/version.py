# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Semantic version parsing and arithmetic.

This module cleans raw version strings (tags, CLI input) and parses them into
strict MAJOR.MINOR.PATCH triples according to SemVer 2.0.0 conventions.

References:
    - Semantic Versioning 2.0.0: https://semver.org/
    - SemVer 2.0.0 Rule 2 (no leading zeros): https://semver.org/#spec-item-2
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from semver_bump.errors import EmptyVersionError, InvalidVersionError

VERSION_PREFIX = "v"
SUFFIX_SEPARATOR = "-"

# Each component is 0 or a positive integer without leading zeros
VERSION_PATTERN = re.compile(r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)")


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """An immutable MAJOR.MINOR.PATCH version triple."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise InvalidVersionError(str(self), f"{name} must be non-negative")

    def __str__(self) -> str:
        """Return the version as a string (e.g., '1.2.3')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def bump_major(self) -> SemanticVersion:
        """Return the next major version, resetting minor and patch."""
        return SemanticVersion(self.major + 1, 0, 0)

    def bump_minor(self) -> SemanticVersion:
        """Return the next minor version, resetting patch."""
        return SemanticVersion(self.major, self.minor + 1, 0)

    def bump_patch(self) -> SemanticVersion:
        """Return the next patch version."""
        return SemanticVersion(self.major, self.minor, self.patch + 1)


def normalize(raw: str) -> str:
    """Clean a raw version string down to its numeric core.

    Surrounding whitespace is trimmed, a single leading 'v' is stripped and
    everything from the first '-' onwards is discarded. No numeric validation
    is done here; see parse_version().

    Args:
        raw: The raw version string (e.g., ' v1.4.9-rc1 ').

    Returns:
        The cleaned version string (e.g., '1.4.9').

    Raises:
        EmptyVersionError: If the string is empty before or after cleaning.

    Examples:
        >>> normalize("v1.4.9-rc1")
        '1.4.9'
        >>> normalize("  1.2.3  ")
        '1.2.3'
        >>> normalize("1.2")
        '1.2'
    """
    cleaned = raw.strip()
    if not cleaned:
        raise EmptyVersionError(raw)

    if cleaned.startswith(VERSION_PREFIX):
        cleaned = cleaned[len(VERSION_PREFIX) :]

    cleaned = cleaned.split(SUFFIX_SEPARATOR, 1)[0]
    if not cleaned:
        raise EmptyVersionError(raw)

    return cleaned


def parse_version(value: str) -> SemanticVersion:
    """Parse a strict MAJOR.MINOR.PATCH string.

    Args:
        value: The version string, already cleaned by normalize().

    Returns:
        The parsed SemanticVersion.

    Raises:
        InvalidVersionError: If the string is not a valid numeric triple.

    Examples:
        >>> parse_version("1.2.3")
        SemanticVersion(major=1, minor=2, patch=3)
    """
    match = VERSION_PATTERN.fullmatch(value)
    if match:
        return SemanticVersion(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    parts = value.split(".")
    if len(parts) != 3:
        raise InvalidVersionError(value, f"expected MAJOR.MINOR.PATCH, got {len(parts)} component(s)")
    for part in parts:
        if not part.isdigit() or not part.isascii():
            raise InvalidVersionError(value, f"component {part!r} is not a non-negative integer")
    raise InvalidVersionError(value, "components must not contain leading zeros")


def parse(raw: str) -> SemanticVersion:
    """Normalize and parse a raw version string in one step."""
    return parse_version(normalize(raw))
