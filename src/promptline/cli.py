"""CLI entry point for promptline.

Meant to be called from the shell's prompt hook, e.g. for zsh::

    precmd() { PROMPTLINE_OUT="$(promptline -e $?)" }
    PROMPT='$PROMPTLINE_OUT'

Follows Function Core / Imperative Shell:
- Pure functions: build_config
- Imperative shell: configure_logging, main
"""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from promptline.aggregator import collect_prompt_context
from promptline.models import PromptConfig
from promptline.render import render_prompt
from promptline.workdir import WorkingDirectoryError, display_path, home_dir, resolve_cwd

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_FAILURE = 1

DEFAULT_DIFF_TIMEOUT_MS = 500
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------------------------------------------------------
# Pure functions
# ---------------------------------------------------------------------------


def build_config(
    git_executable: str,
    kubectl_executable: str,
    diff_timeout_ms: int,
    no_kube: bool,
) -> PromptConfig:
    """Build a PromptConfig from CLI option values."""
    return PromptConfig(
        git_executable=git_executable,
        kubectl_executable=kubectl_executable,
        diff_timeout_seconds=diff_timeout_ms / 1000,
        kube_enabled=not no_kube,
    )


# ---------------------------------------------------------------------------
# Imperative shell
# ---------------------------------------------------------------------------


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never end up inside the prompt."""
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(package_name="promptline")
@click.option(
    "-e",
    "--exit-code",
    type=int,
    default=0,
    show_default=True,
    help="Exit status of the previous command.",
)
@click.option("-m", "--message", default=None, help="Free-text label shown after the directory.")
@click.option(
    "--git",
    "git_executable",
    envvar="PROMPTLINE_GIT",
    default="git",
    show_default=True,
    help="git executable.",
)
@click.option(
    "--kubectl",
    "kubectl_executable",
    envvar="PROMPTLINE_KUBECTL",
    default="kubectl",
    show_default=True,
    help="kubectl executable.",
)
@click.option(
    "--diff-timeout",
    "diff_timeout_ms",
    envvar="PROMPTLINE_DIFF_TIMEOUT_MS",
    type=click.IntRange(min=1),
    default=DEFAULT_DIFF_TIMEOUT_MS,
    show_default=True,
    help="Milliseconds to wait for 'git diff' before treating the tree as changed.",
)
@click.option(
    "--no-kube",
    is_flag=True,
    envvar="PROMPTLINE_NO_KUBE",
    help="Skip the kubectl context and namespace queries.",
)
@click.option(
    "--log-level",
    envvar="PROMPTLINE_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostics level, written to stderr.",
)
def main(
    exit_code: int,
    message: str | None,
    git_executable: str,
    kubectl_executable: str,
    diff_timeout_ms: int,
    no_kube: bool,
    log_level: str,
) -> None:
    """Print a two-line shell prompt with git, kubectl and AWS status."""
    configure_logging(log_level)

    try:
        cwd = resolve_cwd()
    except WorkingDirectoryError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FAILURE)

    config = build_config(git_executable, kubectl_executable, diff_timeout_ms, no_kube)
    logger.debug("Rendering prompt for %s with %s", cwd, config)

    ctx = asyncio.run(
        collect_prompt_context(
            display_path(cwd, home_dir()),
            exit_code=exit_code,
            message=message,
            config=config,
            cwd=cwd,
        )
    )
    click.echo(render_prompt(ctx), color=True)
