# Copyright (c) 2026 Mark Ferrell. MIT License.
"""GitHub API backend for tag and commit lookups.

References:
    - GitHub REST API: https://docs.github.com/en/rest
    - PyGithub Documentation: https://pygithub.readthedocs.io/
"""

from __future__ import annotations

import logging
import os

from github import Github

from semver_bump.errors import ParseError
from semver_bump.vcs import TagLookup, tag_message
from semver_bump.version import SemanticVersion, parse

logger = logging.getLogger(__name__)


class GitHubAPI:
    """Wrapper around PyGithub implementing the VersionControl interface.

    Handles authentication via token input, defaulting to GITHUB_TOKEN
    environment variable if not provided.

    References:
        - Authentication: https://docs.github.com/en/rest/authentication
        - GITHUB_TOKEN: https://docs.github.com/en/actions/security-for-github-actions/security-guides/automatic-token-authentication
    """

    def __init__(
        self,
        token: str | None = None,
        repository: str | None = None,
        ref: str | None = None,
    ) -> None:
        """Initialize the GitHub API client.

        Args:
            token: GitHub token for authentication. Defaults to GITHUB_TOKEN env var.
            repository: Repository in 'owner/repo' format. Defaults to GITHUB_REPOSITORY env var.
            ref: Branch or SHA whose head commit is inspected and tagged.
                Defaults to the repository's default branch.

        References:
            - Get a repository: https://docs.github.com/en/rest/repos/repos#get-a-repository
        """
        self._token = token or os.environ.get("GITHUB_TOKEN", "")
        self._repository = repository or os.environ.get("GITHUB_REPOSITORY", "")

        if not self._token:
            raise ValueError("GitHub token is required. Set GITHUB_TOKEN or pass token parameter.")
        if not self._repository:
            raise ValueError("Repository is required. Set GITHUB_REPOSITORY or pass repository parameter.")

        self._github = Github(self._token)
        self._repo = self._github.get_repo(self._repository)
        self._ref = ref or self._repo.default_branch

    def latest_tag(self) -> TagLookup:
        """Return the highest-versioned tag in the repository.

        Tags whose names do not clean up to a MAJOR.MINOR.PATCH version are
        skipped.

        References:
            - List repository tags: https://docs.github.com/en/rest/repos/repos#list-repository-tags
        """
        highest: tuple[SemanticVersion, str] | None = None
        for tag in self._repo.get_tags():
            try:
                version = parse(tag.name)
            except ParseError:
                logger.debug("Skipping non-version tag '%s'", tag.name)
                continue
            if highest is None or version > highest[0]:
                highest = (version, tag.name)

        if highest is None:
            logger.debug("No version tags found in %s", self._repository)
            return TagLookup.no_prior_tag()
        logger.debug("Latest tag: %s", highest[1])
        return TagLookup(highest[1])

    def _head_sha(self) -> str:
        return self._repo.get_commit(self._ref).sha

    def latest_commit_message(self) -> str:
        """Return the message of the head commit of the configured ref.

        References:
            - Get a commit: https://docs.github.com/en/rest/commits/commits#get-a-commit
        """
        return self._repo.get_commit(self._ref).commit.message

    def create_tag(self, tag_name: str, message: str | None = None) -> None:
        """Create an annotated tag pointing to the head commit of the configured ref.

        Args:
            tag_name: Name of the tag to create (e.g., '1.3.0').
            message: Tag annotation message. Defaults to 'Release version {tag_name}'.

        Raises:
            GithubException: If tag creation fails.

        References:
            - Create a tag object: https://docs.github.com/en/rest/git/tags#create-a-tag-object
            - Create a reference: https://docs.github.com/en/rest/git/refs#create-a-reference
        """
        commit_sha = self._head_sha()

        # Create the tag object (annotated tag)
        tag_object = self._repo.create_git_tag(
            tag=tag_name,
            message=tag_message(tag_name, message),
            object=commit_sha,
            type="commit",
        )

        # Create the reference pointing to the tag object
        self._repo.create_git_ref(
            ref=f"refs/tags/{tag_name}",
            sha=tag_object.sha,
        )
        logger.info("Created tag '%s' at commit %s", tag_name, commit_sha[:7])
