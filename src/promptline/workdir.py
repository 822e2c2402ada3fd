"""Working directory lookup and display.

Design follows Function Core / Imperative Shell:
- Pure function: display_path
- Imperative shell: resolve_cwd, home_dir
"""

from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PromptlineError(Exception):
    """Base exception for promptline."""


class WorkingDirectoryError(PromptlineError):
    """The current working directory cannot be determined."""


# ---------------------------------------------------------------------------
# Pure functions
# ---------------------------------------------------------------------------


def display_path(cwd: Path, home: Path | None) -> str:
    """Abbreviate *cwd* with ``~`` when it lies under *home*.

    ``/home/me/src/app`` with home ``/home/me`` becomes ``~/src/app``; home
    itself becomes ``~``. Paths outside home are returned unchanged.
    """
    if home is None:
        return str(cwd)
    try:
        relative = cwd.relative_to(home)
    except ValueError:
        return str(cwd)
    if relative == Path():
        return "~"
    return str(Path("~") / relative)


# ---------------------------------------------------------------------------
# Imperative shell
# ---------------------------------------------------------------------------


def resolve_cwd() -> Path:
    """Return the process working directory.

    Raises:
        WorkingDirectoryError: If the directory was removed or is unreadable.
    """
    try:
        return Path.cwd()
    except OSError as e:
        msg = f"Cannot determine the current working directory: {e}"
        raise WorkingDirectoryError(msg) from e


def home_dir() -> Path | None:
    """Return the user's home directory, or ``None`` if it cannot be resolved."""
    try:
        return Path.home()
    except RuntimeError:
        return None
