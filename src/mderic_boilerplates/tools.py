"""External tools the scaffolder drives: a git client and a tree copier."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from .errors import CopyError, FetchError


class Fetcher(Protocol):
    """Populate a local directory from a remote collection."""

    def fetch_into(self, url: str, dest: Path) -> None: ...


class TreeCopier(Protocol):
    """Merge a directory tree into another directory."""

    def copy_tree(self, src: Path, dest: Path, *, overwrite: bool = True) -> None: ...


class GitFetcher:
    """Shallow, single-branch ``git clone``.

    git's own progress output is passed through to the terminal. git refuses to
    clone into a non-empty directory, which surfaces here as a ``FetchError``.
    """

    def __init__(
        self,
        *,
        executable: str = "git",
        depth: int = 1,
        branch: str | None = None,
    ) -> None:
        self.executable = executable
        self.depth = depth
        self.branch = branch

    def clone_command(self, url: str, dest: Path) -> list[str]:
        cmd = [self.executable, "clone", f"--depth={self.depth}", "--single-branch"]
        if self.branch:
            cmd.extend(["--branch", self.branch])
        cmd.extend([url, str(dest)])
        return cmd

    def fetch_into(self, url: str, dest: Path) -> None:
        cmd = self.clone_command(url, dest)
        rendered = " ".join(cmd)
        try:
            result = subprocess.run(cmd, check=False)
        except FileNotFoundError as exc:
            raise FetchError(f"Missing required command: {self.executable}", command=cmd) from exc
        if result.returncode != 0:
            raise FetchError(
                f"Command failed ({result.returncode}): {rendered}",
                command=cmd,
                returncode=result.returncode,
            )


def _raise(exc: OSError) -> None:
    raise exc


def _clear(path: Path) -> None:
    """Remove a destination entry so nothing is written through it."""
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


class ShutilTreeCopier:
    """Recursive merge copy driven by ``os.walk``.

    Existing destination directories are merged into. Files and links are
    replaced by unlinking the old entry first, so a symlink already sitting in
    the destination is never followed. Template symlinks are recreated as
    links. Nothing is excluded, ``.git`` included.
    """

    def copy_tree(self, src: Path, dest: Path, *, overwrite: bool = True) -> None:
        try:
            self._merge(src, dest, overwrite=overwrite)
        except OSError as exc:
            raise CopyError(
                f"Failed to copy {src} to {dest}: {exc}",
                source=src,
                destination=dest,
            ) from exc

    def _merge(self, src: Path, dest: Path, *, overwrite: bool) -> None:
        dest.mkdir(parents=True, exist_ok=True)
        for root, dirs, files in os.walk(src, onerror=_raise):
            source_dir = Path(root)
            out_dir = dest / source_dir.relative_to(src)

            for name in list(dirs):
                source = source_dir / name
                target = out_dir / name
                if source.is_symlink():
                    # os.walk does not descend into linked directories
                    self._copy_link(source, target, overwrite=overwrite)
                    continue
                if target.is_dir() and not target.is_symlink():
                    continue
                if os.path.lexists(target):
                    if not overwrite:
                        dirs.remove(name)
                        continue
                    _clear(target)
                target.mkdir()

            for name in files:
                source = source_dir / name
                target = out_dir / name
                if source.is_symlink():
                    self._copy_link(source, target, overwrite=overwrite)
                    continue
                if os.path.lexists(target):
                    if not overwrite:
                        continue
                    _clear(target)
                shutil.copy2(source, target, follow_symlinks=False)

    def _copy_link(self, source: Path, target: Path, *, overwrite: bool) -> None:
        if os.path.lexists(target):
            if not overwrite:
                return
            _clear(target)
        os.symlink(os.readlink(source), target)
