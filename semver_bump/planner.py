# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Version bump policy.

Decides the next release version from the current version, the branch being
released and whether the latest commit is a breaking change:

    develop          -> patch + 1, with the '-stage' pre-release suffix
    main, breaking   -> major + 1
    main             -> minor + 1
    anything else    -> UnsupportedBranchError

Everything here is pure: failures are raised to the caller, nothing is logged.

References:
    - Semantic Versioning 2.0.0: https://semver.org/
    - Conventional Commits (BREAKING CHANGE footer): https://www.conventionalcommits.org/
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from semver_bump.branch import Branch, BranchKind, parse_branch
from semver_bump.errors import InvalidFlagError, UnsupportedBranchError
from semver_bump.version import SemanticVersion, normalize, parse_version

if TYPE_CHECKING:
    from semver_bump.vcs import TagLookup

STAGE_SUFFIX = "-stage"
BREAKING_PREFIX = "BREAKING CHANGE:"
DEFAULT_INITIAL_VERSION = "1.0.0"

# Literals accepted for boolean flags
TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def bump(current: SemanticVersion, branch: Branch, has_breaking: bool) -> str:
    """Compute the next version string for a branch.

    Args:
        current: The latest released version.
        branch: The classified branch being released.
        has_breaking: Whether the release contains a breaking change. Ignored
            on the develop branch.

    Returns:
        The next version (e.g., '1.2.4-stage', '2.0.0', '1.3.0').

    Raises:
        UnsupportedBranchError: If the branch has no bump policy.

    Examples:
        >>> bump(SemanticVersion(1, 2, 3), parse_branch("develop"), True)
        '1.2.4-stage'
        >>> bump(SemanticVersion(1, 2, 3), parse_branch("main"), True)
        '2.0.0'
        >>> bump(SemanticVersion(1, 2, 3), parse_branch("main"), False)
        '1.3.0'
    """
    if branch.kind is BranchKind.DEVELOP:
        return f"{current.bump_patch()}{STAGE_SUFFIX}"
    if branch.kind is BranchKind.MAIN:
        if has_breaking:
            return str(current.bump_major())
        return str(current.bump_minor())
    raise UnsupportedBranchError(branch.name)


def is_breaking_change(commit_message: str) -> bool:
    """Check whether a commit message starts with the 'BREAKING CHANGE:' marker."""
    return commit_message.strip().startswith(BREAKING_PREFIX)


def parse_bool(raw: str) -> bool:
    """Parse a boolean flag.

    Args:
        raw: One of 1, t, T, TRUE, true, True, 0, f, F, FALSE, false, False.

    Raises:
        InvalidFlagError: If the value is not an accepted literal.
    """
    value = raw.strip()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InvalidFlagError(raw)


def resolve_current_version(
    lookup: TagLookup,
    initial_version: str = DEFAULT_INITIAL_VERSION,
) -> SemanticVersion:
    """Turn a latest-tag lookup into the current version.

    A repository without any tag is bootstrapping its first release and
    resolves to initial_version. A tag that is present but malformed is an
    error, never a silent default.

    Args:
        lookup: Result of a collaborator's latest_tag() call.
        initial_version: Version assumed when there is no prior tag.

    Returns:
        The parsed current version.

    Raises:
        EmptyVersionError: If the tag (or initial_version) cleans to nothing.
        InvalidVersionError: If the tag (or initial_version) is not a version.
    """
    raw = lookup.name if lookup.name is not None else initial_version
    return parse_version(normalize(raw))


def plan_next_version(branch_name: str, raw_version: str, has_breaking: bool) -> str:
    """Parse the inputs and apply the bump policy.

    The version is parsed before the branch policy is consulted, so a bad
    version is reported even on an unsupported branch.

    Examples:
        >>> plan_next_version("main", "v1.4.9-rc1", False)
        '1.5.0'
    """
    current = parse_version(normalize(raw_version))
    return bump(current, parse_branch(branch_name), has_breaking)
