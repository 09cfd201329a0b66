# model.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Kind(Enum):
    """What a job's target is compared against."""
    DIRECTORY = "dir"
    BRANCH = "bra"

    @classmethod
    def from_code(cls, code: str) -> Optional[Kind]:
        """Case-insensitive lookup by code; None when unknown."""
        code = code.lower()
        for kind in cls:
            if kind.value == code:
                return kind
        return None


@dataclass(frozen=True)
class Job:
    """
    One gated job, built from a single environment entry.

    `commands` are raw shell strings, run in declared order (or all at once
    when `concurrent` is set).
    """
    kind: Kind
    target: str
    commands: Tuple[str, ...]
    concurrent: bool = False

    # Originating environment key, for messages only
    key: str = ""


@dataclass
class JobKeyError(Exception):
    """An environment entry carries the job prefix but cannot be parsed."""
    key: str
    reason: str

    def __str__(self) -> str:
        return f"unrecognised format: {self.key} ({self.reason})"
