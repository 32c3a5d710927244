"""CLI entrypoint for the boilerplate scaffolder."""

from __future__ import annotations

from pathlib import Path

import click

from .cleanup import RetryCallback
from .config import ScaffoldSettings, settings
from .errors import (
    ScaffoldAbortedError,
    ScaffoldError,
    TemplateNotFoundError,
)
from .scaffold import ScaffoldRequest, Scaffolder, ScaffoldResult, ScaffoldStep

PACKAGE_NAME = "create-mderic-boilerplates"


def _render_error(exc: BaseException) -> str:
    if isinstance(exc, TemplateNotFoundError):
        lines = [f"{exc} Available boilerplates:"]
        lines.extend(f"- {name}" for name in exc.available)
        return "\n".join(lines)
    return str(exc) or exc.__class__.__name__


def _echo_step(step: ScaffoldStep, request: ScaffoldRequest) -> None:
    if step is ScaffoldStep.FETCHING:
        click.echo("Cloning boilerplates...")
    elif step is ScaffoldStep.COPYING:
        click.echo(
            f'Copying boilerplate "{request.template}" to {request.target_dir_name} folder...'
        )


def _retry_notifier(max_attempts: int) -> RetryCallback:
    def notify(attempt: int, delay: float, exc: OSError) -> None:
        click.echo(
            f"Directory busy ({exc.strerror or exc}); retrying removal in {delay:.1f}s "
            f"(attempt {attempt}/{max_attempts})",
            err=True,
        )

    return notify


def _resolve_settings(
    repo: str | None,
    branch: str | None,
    target: str | None,
) -> ScaffoldSettings:
    overrides: dict[str, str] = {}
    if repo:
        overrides["repo_url"] = repo
    if branch:
        overrides["branch"] = branch
    if target:
        overrides["target_dir_name"] = target
    return settings.model_copy(update=overrides) if overrides else settings


def _echo_next_steps(result: ScaffoldResult) -> None:
    click.echo(f"Copied: {', '.join(result.copied_entries)}")
    click.echo(f'Boilerplate "{result.template}" is ready!')
    click.echo("Next steps:")
    click.echo(f"   cd {result.target_dir.name}")
    click.echo("   npm install")


@click.command(name=PACKAGE_NAME)
@click.version_option(package_name=PACKAGE_NAME)
@click.argument("boilerplate_name", metavar="<boilerplate-name>")
@click.option("--repo", default=None, help="Boilerplate collection to clone.")
@click.option("--branch", default=None, help="Branch of the collection to clone.")
@click.option(
    "--target",
    default=None,
    help="Directory to copy the boilerplate into (default: backend).",
)
def main(boilerplate_name: str, repo: str | None, branch: str | None, target: str | None) -> None:
    """Scaffold a mderic boilerplate into your current folder."""
    resolved = _resolve_settings(repo, branch, target)
    scaffolder = Scaffolder(
        resolved,
        on_step=_echo_step,
        on_retry=_retry_notifier(resolved.cleanup.max_attempts),
    )

    try:
        result = scaffolder.run(boilerplate_name, Path.cwd())
    except ScaffoldAbortedError as exc:
        click.echo(
            f"Failed to clean up temporary directory: {_render_error(exc.cleanup_error)}",
            err=True,
        )
        raise click.ClickException(_render_error(exc.cause)) from exc
    except (ScaffoldError, OSError) as exc:
        raise click.ClickException(_render_error(exc)) from exc

    _echo_next_steps(result)
