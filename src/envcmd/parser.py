# parser.py
from __future__ import annotations

from typing import List, Mapping, Optional, Tuple

from . import settings
from .model import Job, JobKeyError, Kind
from .ui.console import Console, get_console


def parse_key(key: str) -> Tuple[Kind, str, bool]:
    """
    Decode a prefixed environment key.

    Args:
        key: Full environment key, e.g. "EC_ASYNC_dir_web"

    Returns:
        (kind, target, concurrent)

    Raises:
        JobKeyError: If the kind is unknown or the target is missing
    """
    if not key.startswith(settings.KEY_PREFIX):
        raise JobKeyError(key, f"missing {settings.KEY_PREFIX} prefix")

    rest = key[len(settings.KEY_PREFIX):]
    concurrent = rest.startswith(settings.ASYNC_PREFIX)
    if concurrent:
        rest = rest[len(settings.ASYNC_PREFIX):]

    # Only the first segment after the kind is the target; anything after
    # another separator is dropped.
    parts = rest.split(settings.SEPARATOR)
    kind = Kind.from_code(parts[0])
    if kind is None:
        raise JobKeyError(key, f"invalid kind {parts[0]!r}")
    if len(parts) < 2 or not parts[1]:
        raise JobKeyError(key, "missing target")

    return kind, parts[1], concurrent


def parse_commands(key: str, value: str) -> Tuple[str, ...]:
    """Split a value into commands. Whitespace is preserved."""
    commands = tuple(value.split(settings.DELIMITER))
    if not any(c.strip() for c in commands):
        raise JobKeyError(key, "no commands")
    return commands


def parse_jobs(
    environ: Mapping[str, str],
    console: Optional[Console] = None,
) -> List[Job]:
    """
    Build jobs from an environment mapping.

    Keys without the job prefix are ignored. Malformed keys are reported
    once each and skipped.

    Args:
        environ: Environment mapping (usually os.environ)
        console: Console for error lines (defaults to the global one)

    Returns:
        Jobs in the mapping's iteration order
    """
    console = console or get_console()
    jobs: List[Job] = []

    for key, value in environ.items():
        if not key.startswith(settings.KEY_PREFIX):
            continue

        try:
            kind, target, concurrent = parse_key(key)
            commands = parse_commands(key, value)
        except JobKeyError as e:
            console.print_error(str(e))
            continue

        jobs.append(Job(
            kind=kind,
            target=target,
            commands=commands,
            concurrent=concurrent,
            key=key,
        ))

    return jobs
