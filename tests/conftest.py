"""Shared pytest fixtures for the test suite."""

from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from semver_bump.vcs import TagLookup


def make_tag(name: str, commit_sha: str = "default_sha") -> MagicMock:
    """Create a mock tag object with the given name.

    This is a shared helper for creating mock GitHub tag objects
    used across multiple test modules.

    Args:
        name: The tag name (e.g., 'v1.2.0').
        commit_sha: The SHA of the commit the tag points to.
    """
    tag = MagicMock()
    tag.name = name
    tag.commit = MagicMock()
    tag.commit.sha = commit_sha
    return tag


def make_commit(sha: str, message: str = "") -> MagicMock:
    """Create a mock GitHub commit object with the given SHA and message."""
    commit = MagicMock()
    commit.sha = sha
    commit.commit.message = message
    return commit


@pytest.fixture
def mock_version_control() -> MagicMock:
    """Create a mock version-control backend with one tag and a plain commit."""
    mock_vcs = MagicMock()
    mock_vcs.latest_tag.return_value = TagLookup("v1.2.3")
    mock_vcs.latest_commit_message.return_value = "fix: handle empty input"
    mock_vcs.create_tag.return_value = None
    return mock_vcs


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that feed CLI defaults."""
    for key in (
        "INPUT_BRANCH",
        "GITHUB_REF_NAME",
        "INPUT_LATEST_VERSION",
        "INPUT_HAS_BREAKING_CHANGE",
        "INPUT_SOURCE",
        "INPUT_REPO_PATH",
        "INPUT_TOKEN",
        "GITHUB_TOKEN",
        "GITHUB_REPOSITORY",
        "INPUT_INITIAL_VERSION",
        "INPUT_TAG",
        "INPUT_DRY_RUN",
        "INPUT_DEBUG",
        "GITHUB_OUTPUT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_pygithub() -> Generator[dict[str, Any], None, None]:
    """Patch PyGithub for unit tests."""
    with patch("semver_bump.github_api.Github") as mock_github:
        mock_repo = MagicMock()
        mock_repo.default_branch = "main"
        mock_github.return_value.get_repo.return_value = mock_repo
        yield {"github": mock_github, "repo": mock_repo}


@pytest.fixture
def sample_versions() -> dict[str, list[str]]:
    """Sample version strings for testing."""
    return {
        "valid": [
            "0.0.0",
            "1.2.3",
            "10.20.30",
            "0.1.0",
        ],
        "invalid": [
            "1.2",  # Missing patch
            "1.2.3.4",  # Extra component
            "01.2.3",  # Leading zero
            "1.02.3",  # Leading zero
            "1.2.x",  # Non-numeric
            "1..3",  # Empty component
            "+1.2.3",  # Sign
            "1.2.3+build",  # Build metadata is not cleaned
        ],
    }
