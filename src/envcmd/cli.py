# cli.py
from __future__ import annotations

import os
import sys

import click

from envcmd.parser import parse_jobs
from envcmd.runner import run_jobs
from envcmd.ui.console import Console, set_console


@click.command(context_settings={"auto_envvar_prefix": "ENVCMD"})
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show gate decisions, exit statuses and stack traces)",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Colour-code output (on by default, also when piped)",
)
@click.version_option(package_name="envcmd")
def cli(debug, color):
    """Run commands from EC_* environment variables when the directory or branch matches.

    \b
    EC_[ASYNC_]<dir|bra>_<TARGET>=<CMD>[,<CMD>...]

    Command failures are only logged; the exit status is always 0.
    """
    console = Console(debug=debug, color=color)
    set_console(console)

    try:
        jobs = parse_jobs(os.environ, console)
        matched = run_jobs(jobs, console)
        console.print_debug(f"{matched} of {len(jobs)} job(s) matched")
    except KeyboardInterrupt:
        console.print_info("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


if __name__ == "__main__":
    cli()
