# runner.py
from __future__ import annotations

import io
import subprocess
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, Optional

from . import settings
from .gates import is_match
from .model import Job
from .ui.console import Console, get_console


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def run_command(index: int, command: str, console: Optional[Console] = None) -> None:
    """
    Run one shell command, streaming its merged stdout/stderr.

    Every line is tagged with `index`. Failures to spawn, read or wait are
    logged and end this command only; nothing is raised.

    Args:
        index: Position of the command within its job
        command: Raw shell string, passed verbatim to the shell
        console: Console to log through (defaults to the global one)
    """
    console = console or get_console()
    console.print_command(index, f"[+] {command}")

    # stderr=STDOUT merges streams for the whole command line, not only its
    # last simple command. Some tools (docker compose) log on stderr.
    try:
        proc = subprocess.Popen(
            [settings.SHELL, "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        console.print_error(f"[{index}] unable to start: {e}")
        return

    if proc.stdout is None:
        console.print_error(f"[{index}] reading output")
        proc.kill()
        proc.wait()
        return

    # Split on "\n" only; a bare "\r" (progress bars) stays inside its line.
    stream = io.TextIOWrapper(proc.stdout, encoding="utf-8", errors="replace", newline="\n")
    try:
        with stream:
            for line in stream:
                console.print_command(index, line.rstrip("\r\n"))
    except (OSError, ValueError) as e:
        console.print_error(f"[{index}] reading output: {e}")

    try:
        code = proc.wait()
    except OSError as e:
        console.print_error(f"[{index}] awaiting completion: {e}")
        return

    console.print_debug(f"[{index}] exit status {code}")
    console.print_command(index, f"[-] {command}")


# ----------------------------------------------------------------------
# Strategies
# ----------------------------------------------------------------------

def _run_sequential(job: Job, console: Console) -> None:
    for index, command in enumerate(job.commands):
        run_command(index, command, console)


def _run_concurrent(job: Job, console: Console) -> None:
    # One thread per command; all are started before any is awaited.
    in_flight: Dict[Future, int] = {}
    with ThreadPoolExecutor(max_workers=max(1, len(job.commands))) as pool:
        for index, command in enumerate(job.commands):
            fut = pool.submit(run_command, index, command, console)
            in_flight[fut] = index

        for fut in as_completed(list(in_flight.keys())):
            index = in_flight[fut]
            try:
                fut.result()
            except Exception as e:
                console.print_error(f"[{index}] aborted: {e}")


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_job(job: Job, console: Optional[Console] = None) -> bool:
    """
    Run a job if its gate matches.

    Returns:
        True if the gate matched and the commands ran, False otherwise.
    """
    console = console or get_console()
    if not is_match(job, console=console):
        return False

    console.print_info(f"[+] {job.target}")
    if job.concurrent:
        _run_concurrent(job, console)
    else:
        _run_sequential(job, console)
    console.print_info(f"[-] {job.target}")
    return True


def run_jobs(jobs: Iterable[Job], console: Optional[Console] = None) -> int:
    """Run jobs one after another. Returns how many matched their gate."""
    console = console or get_console()
    matched = 0
    for job in jobs:
        if run_job(job, console):
            matched += 1
    return matched
