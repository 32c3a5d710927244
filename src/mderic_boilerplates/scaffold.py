"""Boilerplate scaffolding workflow: fetch, locate, copy, clean up."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .cleanup import RetryCallback, RetryPolicy, remove_tree
from .config import ScaffoldSettings
from .config import settings as default_settings
from .errors import ScaffoldAbortedError, TemplateNotFoundError
from .tools import Fetcher, GitFetcher, ShutilTreeCopier, TreeCopier


class ScaffoldStep(str, Enum):
    """Workflow stages reported to progress listeners."""

    FETCHING = "fetching"
    LOCATING = "locating"
    PREPARING_TARGET = "preparing_target"
    COPYING = "copying"
    CLEANUP = "cleanup"


StepCallback = Callable[[ScaffoldStep, "ScaffoldRequest"], None]


@dataclass(frozen=True, slots=True)
class ScaffoldRequest:
    """Everything a single run needs, with no reliance on process state."""

    template: str
    workdir: Path
    repo_url: str
    staging_dir_name: str
    target_dir_name: str

    @classmethod
    def from_settings(
        cls,
        template: str,
        workdir: Path,
        settings: ScaffoldSettings,
    ) -> ScaffoldRequest:
        return cls(
            template=template,
            workdir=workdir,
            repo_url=settings.repo_url,
            staging_dir_name=settings.staging_dir_name,
            target_dir_name=settings.target_dir_name,
        )

    @property
    def staging_dir(self) -> Path:
        return self.workdir / self.staging_dir_name

    @property
    def target_dir(self) -> Path:
        return self.workdir / self.target_dir_name


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Outcome of a successful run."""

    template: str
    template_path: Path
    target_dir: Path
    copied_entries: list[str]


def list_templates(staging_dir: Path) -> list[str]:
    """Names of every immediate child of the fetched collection."""
    if not staging_dir.is_dir():
        return []
    return sorted(entry.name for entry in staging_dir.iterdir())


def locate_template(staging_dir: Path, name: str) -> Path:
    """Resolve ``name`` to a subdirectory of the fetched collection."""
    available = list_templates(staging_dir)
    template_path = staging_dir / name
    # Membership check keeps names like "../x" or "a/b" from escaping the clone.
    if name not in available or not template_path.is_dir():
        raise TemplateNotFoundError(name, available)
    return template_path


def prepare_target(target_dir: Path) -> Path:
    target_dir.mkdir(parents=True, exist_ok=True)
    return target_dir


def run_scaffold(
    request: ScaffoldRequest,
    *,
    fetcher: Fetcher,
    copier: TreeCopier,
    cleanup: Callable[[Path], object],
    on_step: StepCallback | None = None,
) -> ScaffoldResult:
    """Copy one boilerplate from the remote collection into the target directory.

    The staging clone is removed on every exit path. If removing it fails after
    another error, both are raised together as ``ScaffoldAbortedError``; if it
    fails after an otherwise successful run, the cleanup error propagates.
    """

    def notify(step: ScaffoldStep) -> None:
        if on_step is not None:
            on_step(step, request)

    staging_dir = request.staging_dir
    try:
        notify(ScaffoldStep.FETCHING)
        fetcher.fetch_into(request.repo_url, staging_dir)

        notify(ScaffoldStep.LOCATING)
        template_path = locate_template(staging_dir, request.template)
        copied_entries = sorted(entry.name for entry in template_path.iterdir())

        notify(ScaffoldStep.PREPARING_TARGET)
        target_dir = prepare_target(request.target_dir)

        notify(ScaffoldStep.COPYING)
        copier.copy_tree(template_path, target_dir, overwrite=True)
    except Exception as exc:
        notify(ScaffoldStep.CLEANUP)
        try:
            cleanup(staging_dir)
        except Exception as cleanup_exc:
            raise ScaffoldAbortedError(exc, cleanup_exc) from exc
        raise

    notify(ScaffoldStep.CLEANUP)
    cleanup(staging_dir)
    return ScaffoldResult(
        template=request.template,
        template_path=template_path,
        target_dir=target_dir,
        copied_entries=copied_entries,
    )


class Scaffolder:
    """Settings-driven wiring of the git fetcher, tree copier and retrying cleanup."""

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        *,
        fetcher: Fetcher | None = None,
        copier: TreeCopier | None = None,
        on_step: StepCallback | None = None,
        on_retry: RetryCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings or default_settings
        self.fetcher = fetcher or GitFetcher(
            depth=self.settings.clone_depth,
            branch=self.settings.branch,
        )
        self.copier = copier or ShutilTreeCopier()
        self.policy = RetryPolicy(
            max_attempts=self.settings.cleanup.max_attempts,
            base_delay=self.settings.cleanup.base_delay,
        )
        self.on_step = on_step
        self.on_retry = on_retry
        self.sleep = sleep

    def cleanup(self, path: Path) -> int:
        return remove_tree(path, policy=self.policy, sleep=self.sleep, on_retry=self.on_retry)

    def request(self, template: str, workdir: Path) -> ScaffoldRequest:
        return ScaffoldRequest.from_settings(template, workdir, self.settings)

    def run(self, template: str, workdir: Path) -> ScaffoldResult:
        return run_scaffold(
            self.request(template, workdir),
            fetcher=self.fetcher,
            copier=self.copier,
            cleanup=self.cleanup,
            on_step=self.on_step,
        )
