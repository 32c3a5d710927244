"""Shared test fixtures for the boilerplate scaffolder."""

import shutil
from pathlib import Path

import pytest


class FakeFetcher:
    """Stands in for git by copying a local collection into the staging path."""

    def __init__(self, collection: Path, *, error: Exception | None = None) -> None:
        self.collection = collection
        self.error = error
        self.calls: list[tuple[str, Path]] = []

    def fetch_into(self, url: str, dest: Path) -> None:
        self.calls.append((url, dest))
        if self.error is not None:
            dest.mkdir(parents=True, exist_ok=True)
            raise self.error
        shutil.copytree(self.collection, dest, symlinks=True)


@pytest.fixture
def collection(tmp_path: Path) -> Path:
    """Create a boilerplate collection with two Node templates."""
    root = tmp_path / "remote"
    express = root / "express-api"
    (express / "src").mkdir(parents=True)
    (express / "server.js").write_text("require('express')();\n")
    (express / "package.json").write_text('{"name": "express-api"}\n')
    (express / "src" / "routes.js").write_text("module.exports = [];\n")

    fastify = root / "fastify-api"
    fastify.mkdir()
    (fastify / "index.js").write_text("require('fastify')();\n")

    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Create an empty directory to scaffold into."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def fake_fetcher(collection: Path) -> FakeFetcher:
    return FakeFetcher(collection)
