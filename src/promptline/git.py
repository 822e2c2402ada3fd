"""Git repository state for the prompt.

Answers three questions about the working directory: is it inside a work
tree, what is the current revision called, and how does it differ from the
index and from its upstream. Every query tolerates failure; a broken or
missing git degrades to an absent value, never an exception.

Design follows Function Core / Imperative Shell:
- Pure function: build_identity
- Query wrapper: _run_git, _query_git (thin, never raise)
- Imperative shell: is_inside_work_tree, resolve_identity, classify_unstaged,
  classify_unpushed
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from promptline.models import RepositoryIdentity, UnpushedState, UnstagedState
from promptline.query import parse_output, run_command

if TYPE_CHECKING:
    from pathlib import Path

    from promptline.models import PromptConfig
    from promptline.subprocess_result import SubprocessResult

UPSTREAM = "@{u}"


# ---------------------------------------------------------------------------
# Pure functions
# ---------------------------------------------------------------------------


def build_identity(
    branch: str | None,
    commit: str | None,
    tag: str | None,
) -> RepositoryIdentity | None:
    """Combine branch, short commit and tag into one identity.

    The label is the branch if there is one, else the short commit. Returns
    ``None`` when nothing resolved at all, so callers can tell "no identity"
    apart from an identity whose label happens to be empty (a tag on an
    otherwise unnamed HEAD).
    """
    if branch is None and commit is None and tag is None:
        return None
    return RepositoryIdentity(branch_or_commit=branch or commit or "", tag=tag)


# ---------------------------------------------------------------------------
# Query wrappers
# ---------------------------------------------------------------------------


async def _run_git(
    config: PromptConfig,
    *args: str,
    cwd: Path | str | None,
    timeout: float | None = None,
) -> SubprocessResult:
    return await run_command(config.git_executable, *args, cwd=cwd, timeout=timeout)


async def _query_git(config: PromptConfig, *args: str, cwd: Path | str | None) -> str | None:
    return parse_output(await _run_git(config, *args, cwd=cwd))


# ---------------------------------------------------------------------------
# Repository probe
# ---------------------------------------------------------------------------


async def is_inside_work_tree(config: PromptConfig, cwd: Path | str | None = None) -> bool:
    """Return True if *cwd* is inside a git working tree."""
    return await _query_git(config, "rev-parse", "--is-inside-work-tree", cwd=cwd) == "true"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


async def resolve_identity(
    config: PromptConfig,
    cwd: Path | str | None = None,
) -> RepositoryIdentity | None:
    """Query branch, short commit and tag concurrently and combine them."""
    branch, commit, tag = await asyncio.gather(
        _query_git(config, "branch", "--show-current", cwd=cwd),
        _query_git(config, "rev-parse", "--short", "HEAD", cwd=cwd),
        _query_git(config, "tag", "--points-at", "HEAD", cwd=cwd),
    )
    return build_identity(branch, commit, tag)


# ---------------------------------------------------------------------------
# Change classifiers
# ---------------------------------------------------------------------------


async def classify_unstaged(config: PromptConfig, cwd: Path | str | None = None) -> UnstagedState:
    """Classify uncommitted work in the repository.

    Both quiet diffs run concurrently. Only the working-tree diff carries a
    deadline; when it expires the tree is reported as changed. The untracked
    file listing runs only once both diffs come back clean.
    """
    worktree_diff, cached_diff = await asyncio.gather(
        _run_git(config, "diff", "--quiet", cwd=cwd, timeout=config.diff_timeout_seconds),
        _run_git(config, "diff", "--cached", "--quiet", cwd=cwd),
    )
    if not (worktree_diff.ok and cached_diff.ok):
        return UnstagedState.FILES_CHANGED

    untracked = await _run_git(
        config, "ls-files", "--other", "--directory", "--exclude-standard", cwd=cwd
    )
    if untracked.launched and not untracked.stdout:
        return UnstagedState.CLEAN
    return UnstagedState.FILES_UNTRACKED


async def classify_unpushed(config: PromptConfig, cwd: Path | str | None = None) -> UnpushedState:
    """Classify the local branch against its upstream.

    A failing ``git log @{u}..`` (for instance when no upstream is configured)
    is read the same as "nothing ahead"; the missing upstream is detected
    afterwards when ``@{u}`` fails to resolve.
    """
    ahead = await _query_git(config, "log", f"{UPSTREAM}..", cwd=cwd)
    if ahead is not None:
        return UnpushedState.AHEAD

    head, upstream = await asyncio.gather(
        _query_git(config, "rev-parse", "HEAD", cwd=cwd),
        _query_git(config, "rev-parse", UPSTREAM, cwd=cwd),
    )
    if upstream is None:
        return UnpushedState.NO_UPSTREAM
    if head == upstream:
        return UnpushedState.SYNCED
    return UnpushedState.BEHIND
