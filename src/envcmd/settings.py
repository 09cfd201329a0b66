from __future__ import annotations
import os

# Environment key grammar: EC_[ASYNC_]<KIND>_<TARGET>=<CMD>[,<CMD>...]
KEY_PREFIX = "EC_"
ASYNC_PREFIX = "ASYNC_"
SEPARATOR = "_"
DELIMITER = ","

SHELL = os.environ.get("ENVCMD_SHELL", "sh")
GIT = os.environ.get("ENVCMD_GIT", "git")
