"""Scaffold a boilerplate from a remote collection into the current folder."""

from .cleanup import RetryPolicy, is_busy_error, remove_tree
from .errors import (
    CleanupError,
    CopyError,
    FetchError,
    ScaffoldAbortedError,
    ScaffoldError,
    TemplateNotFoundError,
)
from .scaffold import ScaffoldRequest, ScaffoldResult, Scaffolder, run_scaffold

__all__ = [
    "CleanupError",
    "CopyError",
    "FetchError",
    "RetryPolicy",
    "ScaffoldAbortedError",
    "ScaffoldError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "Scaffolder",
    "TemplateNotFoundError",
    "is_busy_error",
    "remove_tree",
    "run_scaffold",
]
