# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Branch classification for the version bump policy.

Only two branch names carry a bump policy: 'develop' produces staging
pre-releases and 'main' produces releases. Every other branch is kept as
unsupported so the planner can report its name.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEVELOP_BRANCH = "develop"
MAIN_BRANCH = "main"


class BranchKind(enum.Enum):
    """Kinds of branches known to the bump policy."""

    DEVELOP = "develop"
    MAIN = "main"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Branch:
    """A branch name together with its classification."""

    kind: BranchKind
    name: str


def parse_branch(branch_name: str) -> Branch:
    """Classify a branch name.

    Matching is exact and case-sensitive.

    Args:
        branch_name: The branch name (e.g., 'develop', 'main', 'release').

    Returns:
        Branch with the matching kind, or BranchKind.UNSUPPORTED.

    Examples:
        >>> parse_branch("develop").kind
        <BranchKind.DEVELOP: 'develop'>
        >>> parse_branch("Main").kind
        <BranchKind.UNSUPPORTED: 'unsupported'>
    """
    if branch_name == DEVELOP_BRANCH:
        return Branch(BranchKind.DEVELOP, branch_name)
    if branch_name == MAIN_BRANCH:
        return Branch(BranchKind.MAIN, branch_name)
    return Branch(BranchKind.UNSUPPORTED, branch_name)
