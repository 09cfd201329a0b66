# git.py
# Small, focused wrapper around the Git CLI.
# This module centralizes all Git interactions so the rest of the codebase
# never needs to call subprocess("git ...") directly.

from __future__ import annotations

import subprocess
from typing import Optional

from envcmd import settings


def _git(args: list[str], cwd: Optional[str] = None) -> str:
    """
    Execute a git command and return its stdout as a clean string.

    This is the single low-level entry point for all Git operations in this file.

    Args:
        args: List of git arguments (e.g. ["rev-parse", "HEAD"])
        cwd: Optional working directory in which to run the git command.

    Returns:
        Stdout from the git command with surrounding whitespace removed.

    Raises:
        subprocess.CalledProcessError: git exited with a non-zero status.
        OSError: the git binary could not be executed.
    """
    # stderr is dropped: callers decide what a failure means, and
    # "fatal: not a git repository" is not useful noise for them.
    out = subprocess.check_output(
        [settings.GIT, *args],
        cwd=cwd,
        stderr=subprocess.DEVNULL,
        text=True,
    )
    return out.strip()


def current_branch(cwd: Optional[str] = None) -> str:
    """
    Return the short name of the checked-out branch.

    A detached HEAD reports the literal "HEAD".
    """
    # `git rev-parse --abbrev-ref HEAD` prints e.g. "main"
    return _git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
