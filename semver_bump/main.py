# Copyright (c) 2026 Mark Ferrell. MIT License.
"""Command-line entry point for the version bump calculator.

Prints the next version for a branch on stdout and optionally tags it. Inputs
come from positional arguments, falling back to GitHub Actions style
environment variables and finally to the version-control backend.

References:
    - GitHub Actions Environment Variables:
      https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/store-information-in-variables#default-environment-variables
    - GitHub Actions Outputs:
      https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/passing-information-between-jobs#setting-an-output-parameter
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass

from github.GithubException import GithubException

from semver_bump.branch import parse_branch
from semver_bump.errors import SemverBumpError, VersionControlError
from semver_bump.git import GitRepository
from semver_bump.github_api import GitHubAPI
from semver_bump.planner import (
    DEFAULT_INITIAL_VERSION,
    bump,
    is_breaking_change,
    parse_bool,
    resolve_current_version,
)
from semver_bump.vcs import VersionControl
from semver_bump.version import parse

logger = logging.getLogger(__name__)

SOURCES = ("git", "github")


@dataclass
class Inputs:
    """Parsed command-line and environment inputs."""

    branch: str
    latest_version: str | None = None
    has_breaking_change: str | None = None
    source: str = "git"
    repo_path: str = "."
    token: str = ""
    repository: str = ""
    initial_version: str = DEFAULT_INITIAL_VERSION
    tag: bool = False
    dry_run: bool = False
    debug: bool = False


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").lower() == "true"


def _env_optional(name: str) -> str | None:
    """Return an environment input, or None when it is unset or empty."""
    return os.environ.get(name) or None


def parse_inputs(args: list[str]) -> Inputs:
    """Parse inputs from CLI arguments, falling back to environment variables.

    CLI arguments take precedence over environment variables.

    Args:
        args: List of CLI arguments (typically sys.argv[1:]).

    Returns:
        Inputs with parsed values.
    """
    parser = argparse.ArgumentParser(
        prog="semver-bump",
        description="Compute the next semantic version for a release branch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Branch policy:
  develop    patch + 1 with a '-stage' suffix (1.2.3 -> 1.2.4-stage)
  main       minor + 1 (1.2.3 -> 1.3.0), or major + 1 on a breaking change (2.0.0)

Environment Variables (used as defaults when CLI args not provided):
  INPUT_BRANCH, GITHUB_REF_NAME    Branch name
  INPUT_LATEST_VERSION             Latest release version
  INPUT_HAS_BREAKING_CHANGE        Breaking change flag (true/false)
  INPUT_SOURCE                     Version-control backend (git/github)
  INPUT_TOKEN, GITHUB_TOKEN        GitHub token for the github backend
  GITHUB_REPOSITORY                Repository (owner/repo) for the github backend

Examples:
  semver-bump develop 1.2.3 false       # prints 1.2.4-stage
  semver-bump main v1.4.9-rc1 false     # prints 1.5.0
  semver-bump main                      # reads latest tag and commit from git
  semver-bump main --tag --dry-run
        """,
    )

    parser.add_argument(
        "branch",
        nargs="?",
        default=os.environ.get("INPUT_BRANCH", os.environ.get("GITHUB_REF_NAME", "")),
        help="Branch name: 'develop' or 'main'",
    )
    parser.add_argument(
        "latest_version",
        nargs="?",
        default=None,
        help="Latest release version (default: INPUT_LATEST_VERSION, then the latest tag from the backend)",
    )
    parser.add_argument(
        "has_breaking_change",
        nargs="?",
        default=None,
        help="'true' or 'false' (default: INPUT_HAS_BREAKING_CHANGE, then detected from the latest commit message)",
    )
    parser.add_argument(
        "--source",
        choices=SOURCES,
        default=os.environ.get("INPUT_SOURCE", "git"),
        help="Version-control backend for tag and commit lookups (default: git)",
    )
    parser.add_argument(
        "--repo-path",
        default=os.environ.get("INPUT_REPO_PATH", "."),
        help="Path of the local git repository (default: .)",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("INPUT_TOKEN", os.environ.get("GITHUB_TOKEN", "")),
        help="GitHub token for the github backend (default: from INPUT_TOKEN or GITHUB_TOKEN env)",
    )
    parser.add_argument(
        "--repository",
        default=os.environ.get("GITHUB_REPOSITORY", ""),
        help="Repository in owner/repo format for the github backend",
    )
    parser.add_argument(
        "--initial-version",
        default=os.environ.get("INPUT_INITIAL_VERSION", DEFAULT_INITIAL_VERSION),
        help=f"Version assumed when the repository has no tags (default: {DEFAULT_INITIAL_VERSION})",
    )
    parser.add_argument(
        "--tag",
        action="store_true",
        default=_env_flag("INPUT_TAG"),
        help="Create an annotated tag named after the computed version",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=_env_flag("INPUT_DRY_RUN"),
        help="Dry-run mode - don't actually create tags",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=_env_flag("INPUT_DEBUG"),
        help="Enable debug logging",
    )

    parsed = parser.parse_args(args)

    return Inputs(
        branch=parsed.branch,
        latest_version=(
            parsed.latest_version if parsed.latest_version is not None else _env_optional("INPUT_LATEST_VERSION")
        ),
        has_breaking_change=(
            parsed.has_breaking_change
            if parsed.has_breaking_change is not None
            else _env_optional("INPUT_HAS_BREAKING_CHANGE")
        ),
        source=parsed.source,
        repo_path=parsed.repo_path,
        token=parsed.token,
        repository=parsed.repository,
        initial_version=parsed.initial_version,
        tag=parsed.tag,
        dry_run=parsed.dry_run,
        debug=parsed.debug,
    )


def configure_logging(debug: bool) -> None:
    """Configure logging based on debug flag.

    Log records go to stderr so stdout only carries the computed version.

    Args:
        debug: If True, enable DEBUG level logging.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def needs_version_control(inputs: Inputs) -> bool:
    """Return True if any input has to be looked up or a tag has to be written."""
    return inputs.latest_version is None or inputs.has_breaking_change is None or inputs.tag


def build_version_control(inputs: Inputs) -> VersionControl:
    """Create the backend selected by --source.

    Raises:
        ValueError: If the github backend lacks a token or repository.
    """
    if inputs.source == "github":
        return GitHubAPI(token=inputs.token, repository=inputs.repository, ref=inputs.branch or None)
    return GitRepository(inputs.repo_path)


def compute_version(inputs: Inputs, vcs: VersionControl | None = None) -> str:
    """Compute the next version from inputs, consulting vcs for missing values.

    Args:
        inputs: Parsed inputs.
        vcs: Backend used when the latest version or the breaking flag is not given.

    Returns:
        The next version string.

    Raises:
        SemverBumpError: On any parse, policy or lookup failure.
    """
    if inputs.latest_version is not None:
        current = parse(inputs.latest_version)
    else:
        if vcs is None:
            raise VersionControlError("a version-control backend is required to look up the latest version")
        current = resolve_current_version(vcs.latest_tag(), inputs.initial_version)
        logger.debug("Using latest version %s from %s", current, inputs.source)

    # The version is validated before the flag and the branch policy
    if inputs.has_breaking_change is not None:
        has_breaking = parse_bool(inputs.has_breaking_change)
    else:
        if vcs is None:
            raise VersionControlError("a version-control backend is required to inspect the latest commit")
        has_breaking = is_breaking_change(vcs.latest_commit_message())
        logger.debug("Breaking change detected from latest commit: %s", has_breaking)

    return bump(current, parse_branch(inputs.branch), has_breaking)


def set_outputs(version: str) -> None:
    """Append the computed version to the GITHUB_OUTPUT file when running in Actions.

    References:
        - https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/passing-information-between-jobs#setting-an-output-parameter
    """
    output_file = os.environ.get("GITHUB_OUTPUT", "")
    if not output_file:
        logger.debug("GITHUB_OUTPUT not set, outputs will not be written")
        return

    with open(output_file, "a") as f:
        f.write(f"version={version}\n")

    logger.debug("Set outputs: version=%s", version)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    inputs = parse_inputs(sys.argv[1:] if argv is None else argv)
    configure_logging(inputs.debug)

    if not inputs.branch:
        logger.error("Branch name is required. Pass it as the first argument or set INPUT_BRANCH.")
        sys.exit(1)

    vcs: VersionControl | None = None
    if needs_version_control(inputs):
        try:
            vcs = build_version_control(inputs)
        except (ValueError, GithubException) as e:
            logger.error("Failed to initialize %s backend: %s", inputs.source, e)
            sys.exit(1)

    try:
        version = compute_version(inputs, vcs)
    except (SemverBumpError, GithubException) as e:
        logger.error("error: %s", e)
        sys.exit(1)

    if inputs.tag and vcs is not None:
        if inputs.dry_run:
            logger.info("[DRY-RUN] Would create tag '%s'", version)
        else:
            try:
                vcs.create_tag(version)
            except (SemverBumpError, GithubException) as e:
                logger.error("Failed to create tag: %s", e)
                sys.exit(1)

    print(version)
    set_outputs(version)


if __name__ == "__main__":  # pragma: no cover
    main()
