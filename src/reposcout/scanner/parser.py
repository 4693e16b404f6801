"""Parse free-form user input into a repository identifier."""

from __future__ import annotations

import re

from reposcout.scanner.models import RepoIdentifier

EMPTY_INPUT_MESSAGE = "Please enter a repository URL or owner/repo"
INVALID_FORMAT_MESSAGE = (
    "Invalid format. Use: owner/repo or https://github.com/owner/repo"
)

# Not anchored: anything before owner/repo (scheme, host, path) is skipped
_REPO_PATTERN = re.compile(r"(?:github\.com/)?([^/\s]+)/([^/\s]+)")

_GIT_SUFFIX = ".git"


class FormatError(ValueError):
    """Input does not contain a recognizable ``owner/repo`` pair."""


def parse_repo_identifier(text: str) -> RepoIdentifier:
    """Extract ``owner/repo`` from a slug or a repository URL.

    Accepts ``facebook/react``, ``github.com/facebook/react`` and
    ``https://github.com/vercel/next.js.git`` alike. A trailing ``.git`` is
    removed from the repository name.

    Raises FormatError when the input is blank or holds no two-segment path.
    """
    text = text.strip()
    if not text:
        raise FormatError(EMPTY_INPUT_MESSAGE)

    match = _REPO_PATTERN.search(text)
    if match is None:
        raise FormatError(INVALID_FORMAT_MESSAGE)

    owner, repo = match.groups()
    repo = repo.removesuffix(_GIT_SUFFIX)
    if not repo:
        raise FormatError(INVALID_FORMAT_MESSAGE)

    return RepoIdentifier(owner=owner, repo=repo)
