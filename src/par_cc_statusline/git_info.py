"""Git metadata lookup for the status line.

Reads ``.git`` directly instead of shelling out to git, so the status line
stays fast. Handles both regular repositories and worktrees, where ``.git`` is
a file containing a ``gitdir:`` pointer. Every lookup is best effort and
returns None on failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)

GITDIR_PREFIX = "gitdir: "
HEAD_REF_PREFIX = "ref: refs/heads/"

RepoLabelResolver = Callable[[str], str | None]


def _read_gitdir_pointer(git_path: Path) -> str | None:
    """Read the gitdir pointer out of a worktree ``.git`` file."""
    content = git_path.read_text(encoding="utf-8").strip()
    if not content.startswith(GITDIR_PREFIX):
        return None
    return content[len(GITDIR_PREFIX) :]


def find_gitdir(cwd: str) -> Path | None:
    """Find the git metadata directory for a working directory.

    Args:
        cwd: Working directory to inspect

    Returns:
        The ``.git`` directory, the worktree's gitdir, or None
    """
    if not cwd:
        return None

    git_path = Path(cwd) / ".git"
    try:
        if git_path.is_file():
            gitdir = _read_gitdir_pointer(git_path)
            if gitdir is None:
                return None
            # Relative pointers are relative to the worktree
            return Path(cwd) / gitdir
        if git_path.is_dir():
            return git_path
    except (OSError, ValueError):
        logger.debug("Failed to resolve gitdir for %s", cwd, exc_info=True)
    return None


def find_repo_name(cwd: str) -> str | None:
    """Find the repository name for a working directory.

    For a worktree the gitdir looks like ``<main-repo>/.git/worktrees/<name>``
    and the main repository's directory name is used.

    Args:
        cwd: Working directory to inspect

    Returns:
        Repository name, or None when not in a git checkout
    """
    if not cwd:
        return None

    git_path = Path(cwd) / ".git"
    try:
        if git_path.is_file():
            gitdir = _read_gitdir_pointer(git_path)
            if gitdir is None:
                return None
            parents = PurePath(gitdir).parents
            # worktrees/<name> -> .git -> main repo
            if len(parents) < 3:
                return None
            return parents[2].name or None
        if git_path.is_dir():
            return PurePath(cwd).name or None
    except (OSError, ValueError):
        logger.debug("Failed to resolve repo name for %s", cwd, exc_info=True)
    return None


def find_branch(cwd: str) -> str | None:
    """Read the current branch name from HEAD.

    Args:
        cwd: Working directory to inspect

    Returns:
        Branch name, or None on a detached HEAD or outside a git checkout
    """
    gitdir = find_gitdir(cwd)
    if gitdir is None:
        return None

    try:
        head = (gitdir / "HEAD").read_text(encoding="utf-8").strip()
    except (OSError, ValueError):
        logger.debug("Failed to read HEAD in %s", gitdir, exc_info=True)
        return None

    if not head.startswith(HEAD_REF_PREFIX):
        return None
    return head[len(HEAD_REF_PREFIX) :] or None


def repo_label(cwd: str) -> str | None:
    """Build the ``repo:branch`` label for a working directory.

    Args:
        cwd: Working directory to inspect

    Returns:
        ``repo:branch``, ``repo`` when the branch is unknown, or None
    """
    name = find_repo_name(cwd)
    if name is None:
        return None

    branch = find_branch(cwd)
    if branch is None:
        return name
    return f"{name}:{branch}"
