# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Unit tests for branch classification in semver_bump/branch.py."""

from __future__ import annotations

from semver_bump.branch import Branch, BranchKind, parse_branch


class TestParseBranch:
    """Tests for parse_branch() function."""

    def test_develop(self) -> None:
        """Test that 'develop' is classified as DEVELOP."""
        assert parse_branch("develop") == Branch(BranchKind.DEVELOP, "develop")

    def test_main(self) -> None:
        """Test that 'main' is classified as MAIN."""
        assert parse_branch("main") == Branch(BranchKind.MAIN, "main")

    def test_unsupported_keeps_name(self) -> None:
        """Test that other branches keep their name."""
        branch = parse_branch("release")
        assert branch.kind is BranchKind.UNSUPPORTED
        assert branch.name == "release"

    def test_case_sensitive(self) -> None:
        """Test that matching is case-sensitive."""
        assert parse_branch("Main").kind is BranchKind.UNSUPPORTED
        assert parse_branch("DEVELOP").kind is BranchKind.UNSUPPORTED

    def test_no_prefix_matching(self) -> None:
        """Test that path-style branch names are not matched."""
        assert parse_branch("feature/main").kind is BranchKind.UNSUPPORTED
        assert parse_branch("develop-2").kind is BranchKind.UNSUPPORTED
        assert parse_branch("master").kind is BranchKind.UNSUPPORTED

    def test_empty_is_unsupported(self) -> None:
        """Test that an empty name is unsupported."""
        assert parse_branch("").kind is BranchKind.UNSUPPORTED

