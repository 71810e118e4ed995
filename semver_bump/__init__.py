# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Semantic version bump calculator - Core modules."""

from semver_bump.branch import Branch, BranchKind, parse_branch
from semver_bump.planner import bump, plan_next_version
from semver_bump.version import SemanticVersion, normalize, parse_version

__all__ = [
    "Branch",
    "BranchKind",
    "SemanticVersion",
    "bump",
    "normalize",
    "parse_branch",
    "parse_version",
    "plan_next_version",
]
