"""Test-only helpers for unit tests."""

from __future__ import annotations


def out_lines(text: str) -> list[str]:
    """Non-empty output lines, in order."""
    return [line for line in text.splitlines() if line]
