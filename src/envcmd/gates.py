# gates.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Dict, Optional

from .git_facts.git import current_branch
from .model import Job, Kind
from .ui.console import Console, get_console


def _same(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def matches_directory(target: str, console: Optional[Console] = None) -> bool:
    """True if the working directory's base name equals target (any case)."""
    console = console or get_console()
    try:
        name = Path.cwd().name
    except OSError as e:
        console.print_debug(f"cannot read working directory: {e}")
        return False

    if not _same(name, target):
        console.print_debug(f"directory {name!r} does not match {target!r}")
        return False
    return True


def matches_branch(target: str, console: Optional[Console] = None) -> bool:
    """True if the current git branch equals target (any case)."""
    console = console or get_console()
    try:
        branch = current_branch()
    except (subprocess.CalledProcessError, OSError) as e:
        console.print_debug(f"cannot read branch (may not be within a repository): {e}")
        return False

    if not _same(branch, target):
        console.print_debug(f"branch {branch!r} does not match {target!r}")
        return False
    return True


GATES: Dict[Kind, Callable[..., bool]] = {
    Kind.DIRECTORY: matches_directory,
    Kind.BRANCH: matches_branch,
}


def is_match(job: Job, console: Optional[Console] = None) -> bool:
    """Evaluate the job's gate. Fails closed."""
    return GATES[job.kind](job.target, console=console)
