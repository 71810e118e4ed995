# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Local git repository access through the git command line.

References:
    - git-describe: https://git-scm.com/docs/git-describe
    - git-log: https://git-scm.com/docs/git-log
    - git-tag: https://git-scm.com/docs/git-tag
"""

from __future__ import annotations

import logging
import subprocess

from semver_bump.errors import GitCommandError
from semver_bump.vcs import TagLookup, tag_message

logger = logging.getLogger(__name__)

# git describe reports a repository without reachable tags with one of these
NO_TAG_MARKERS = ("No names found", "No tags can describe")


class GitRepository:
    """Runs git commands in a working directory.

    Implements the VersionControl interface used by the CLI.
    """

    def __init__(self, path: str = ".", git: str = "git") -> None:
        """Initialize the repository wrapper.

        Args:
            path: Working directory the git commands run in.
            git: Name or path of the git executable.
        """
        self._path = path
        self._git = git

    def _run(self, *args: str) -> str:
        """Run a git command and return its stripped stdout.

        Raises:
            GitCommandError: If git is missing or exits non-zero.
        """
        logger.debug("Running: git %s (cwd=%s)", " ".join(args), self._path)
        try:
            result = subprocess.run(
                [self._git, *args],
                cwd=self._path,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError(list(args), str(e)) from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(list(args), (e.stderr or "").strip()) from e
        return result.stdout.strip()

    def latest_tag(self) -> TagLookup:
        """Return the most recent tag reachable from HEAD.

        Returns:
            TagLookup with the tag name, or TagLookup.no_prior_tag() when the
            repository has no tags yet.

        Raises:
            GitCommandError: For any other git failure.
        """
        try:
            tag = self._run("describe", "--tags", "--abbrev=0")
        except GitCommandError as e:
            if any(marker in e.stderr for marker in NO_TAG_MARKERS):
                logger.debug("No tags found in %s", self._path)
                return TagLookup.no_prior_tag()
            raise
        logger.debug("Latest tag: %s", tag)
        return TagLookup(tag)

    def latest_commit_message(self) -> str:
        """Return the full message of the HEAD commit."""
        return self._run("log", "--format=%B", "-n", "1", "HEAD")

    def create_tag(self, tag_name: str, message: str | None = None) -> None:
        """Create an annotated tag at HEAD.

        Args:
            tag_name: Name of the tag to create (e.g., '1.3.0').
            message: Tag annotation message. Defaults to 'Release version {tag_name}'.

        Raises:
            GitCommandError: If tag creation fails (e.g., the tag already exists).
        """
        self._run("tag", "-a", tag_name, "-m", tag_message(tag_name, message))
        logger.info("Created tag '%s'", tag_name)
