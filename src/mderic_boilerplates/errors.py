"""Exception types raised while scaffolding a boilerplate."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class FetchError(ScaffoldError):
    """The boilerplate collection could not be cloned."""

    def __init__(self, message: str, *, command: list[str], returncode: int | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class CopyError(ScaffoldError):
    """Copying a boilerplate into the target directory failed."""

    def __init__(self, message: str, *, source: Path, destination: Path) -> None:
        super().__init__(message)
        self.source = source
        self.destination = destination


class TemplateNotFoundError(ScaffoldError):
    """The requested boilerplate is not part of the fetched collection."""

    def __init__(self, template: str, available: list[str]) -> None:
        super().__init__(f'Boilerplate "{template}" not found.')
        self.template = template
        self.available = available


class CleanupError(ScaffoldError):
    """A directory stayed busy through every removal attempt."""

    def __init__(self, path: Path, attempts: int) -> None:
        super().__init__(f"Failed to remove directory after {attempts} attempts: {path}")
        self.path = path
        self.attempts = attempts


class ScaffoldAbortedError(ScaffoldError):
    """A run failed and removing the staging directory afterwards failed too."""

    def __init__(self, cause: BaseException, cleanup_error: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause
        self.cleanup_error = cleanup_error
