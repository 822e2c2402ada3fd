"""Shared test fixtures for promptline."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from promptline.subprocess_result import SubprocessResult


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True)


def _configure_identity(repo: Path) -> None:
    _git("config", "user.email", "test@promptline.test", cwd=repo)
    _git("config", "user.name", "Promptline Test", cwd=repo)


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


def ok(stdout: str = "") -> SubprocessResult:
    """A zero-exit result with the given stdout."""
    return SubprocessResult(returncode=0, stdout=stdout.encode())


def failed(returncode: int = 1, stdout: str = "") -> SubprocessResult:
    """A non-zero-exit result."""
    return SubprocessResult(returncode=returncode, stdout=stdout.encode())


class FakeCommands:
    """Stand-in for ``run_command`` that answers from a lookup table.

    Keys are the full argv tuple, e.g. ``("git", "diff", "--quiet")``.
    Unknown commands exit 1 with no output. Every call is recorded along with
    the timeout it was given.
    """

    def __init__(self, responses: dict[tuple[str, ...], SubprocessResult] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []
        self.timeouts: dict[tuple[str, ...], float | None] = {}

    async def __call__(
        self,
        program: str,
        *args: str,
        cwd: object = None,
        timeout: float | None = None,
    ) -> SubprocessResult:
        argv = (program, *args)
        self.calls.append(argv)
        self.timeouts[argv] = timeout
        return self.responses.get(argv, failed())

    def called(self, *argv: str) -> bool:
        return argv in self.calls

    def calls_to(self, program: str) -> list[tuple[str, ...]]:
        return [c for c in self.calls if c[0] == program]


# ---------------------------------------------------------------------------
# Real repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one initial commit.

    The repo has a committed ``README.md`` on the ``main`` branch and no
    upstream. Returns the path to the repository root.
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    _git("init", "-b", "main", cwd=repo)
    _configure_identity(repo)

    (repo / "README.md").write_text("# Test repo\n")
    _git("add", "README.md", cwd=repo)
    _git("commit", "-m", "Initial commit", cwd=repo)

    return repo


@pytest.fixture
def cloned_repo(git_repo: Path, tmp_path: Path) -> Path:
    """Clone *git_repo* through a bare remote so ``main`` tracks ``origin/main``.

    Returns the path to the clone, which starts in sync with its upstream.
    """
    remote = tmp_path / "remote.git"
    clone = tmp_path / "clone"
    _git("clone", "--bare", str(git_repo), str(remote), cwd=tmp_path)
    _git("clone", str(remote), str(clone), cwd=tmp_path)
    _configure_identity(clone)
    return clone


@pytest.fixture
def commit_file():
    """Return a helper that writes, stages and commits one file."""

    def _commit(repo: Path, name: str, content: str = "content\n") -> None:
        (repo / name).write_text(content)
        _git("add", name, cwd=repo)
        _git("commit", "-m", f"Add {name}", cwd=repo)

    return _commit


@pytest.fixture
def run_git():
    """Return a helper that runs git in a repo and fails the test on error."""
    return _git
