from .model import Job, JobKeyError, Kind
from .parser import parse_jobs, parse_key, parse_commands
from .gates import is_match, matches_branch, matches_directory
from .runner import run_command, run_job, run_jobs

__all__ = [
    "Job", "JobKeyError", "Kind",
    "parse_jobs", "parse_key", "parse_commands",
    "is_match", "matches_branch", "matches_directory",
    "run_command", "run_job", "run_jobs",
]
