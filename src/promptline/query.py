"""External query unit.

Runs one external command as a child process and normalizes the outcome to
either a compacted string or ``None``.

Design follows Function Core / Imperative Shell:
- Pure function: parse_output
- Subprocess wrapper: run_command (thin, never raises; uses SubprocessResult)
- Convenience: query (run_command + parse_output)
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import signal
from typing import TYPE_CHECKING

from promptline.subprocess_result import LAUNCH_FAILED, TIMED_OUT, SubprocessResult

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

REAP_TIMEOUT_SECONDS = 0.1


# ---------------------------------------------------------------------------
# Pure function
# ---------------------------------------------------------------------------


def parse_output(result: SubprocessResult) -> str | None:
    """Classify a subprocess result as text or absence.

    Returns ``None`` unless the process exited zero and its stdout is valid
    UTF-8. All whitespace is removed, not just the ends, since the queries
    only ever produce short tokens (branch names, hashes, context names).
    Output that is empty after compaction is also ``None``.
    """
    if not result.ok:
        return None

    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None

    compacted = "".join(text.split())
    return compacted or None


# ---------------------------------------------------------------------------
# Subprocess wrapper
# ---------------------------------------------------------------------------


async def _terminate(process: asyncio.subprocess.Process) -> None:
    """Kill the child's whole process group and reap the child. Best-effort.

    The child leads its own session, so the group also holds any helpers it
    forked; those would otherwise keep stdout open after the child is gone.
    """
    with contextlib.suppress(ProcessLookupError):
        os.killpg(process.pid, signal.SIGKILL)
    with contextlib.suppress(TimeoutError):
        await asyncio.wait_for(process.wait(), timeout=REAP_TIMEOUT_SECONDS)


async def run_command(
    program: str,
    *args: str,
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> SubprocessResult:
    """Execute ``program <args>`` and return the result.

    Does **not** raise: a process that cannot be started yields
    ``LAUNCH_FAILED`` and one that exceeds *timeout* seconds is killed and
    yields ``TIMED_OUT``. The deadline covers spawning as well as running.
    Stderr is discarded.
    """
    process: asyncio.subprocess.Process | None = None

    async def spawn_and_collect() -> bytes:
        nonlocal process
        process = await asyncio.create_subprocess_exec(
            program,
            *args,
            cwd=cwd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
            start_new_session=timeout is not None,
        )
        stdout, _ = await process.communicate()
        return stdout

    try:
        stdout = await asyncio.wait_for(spawn_and_collect(), timeout=timeout)
    except OSError as e:
        logger.debug("Failed to launch %s %s: %s", program, " ".join(args), e)
        return SubprocessResult(returncode=LAUNCH_FAILED)
    except TimeoutError:
        logger.debug("Timed out after %ss: %s %s", timeout, program, " ".join(args))
        if process is not None:
            await _terminate(process)
        return SubprocessResult(returncode=TIMED_OUT)

    assert process is not None
    returncode = process.returncode if process.returncode is not None else LAUNCH_FAILED
    if returncode != 0:
        logger.debug("Exit %d: %s %s", returncode, program, " ".join(args))
    return SubprocessResult(returncode=returncode, stdout=stdout)


async def query(
    program: str,
    *args: str,
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> str | None:
    """Run a command and return its compacted stdout, or ``None`` on any failure."""
    return parse_output(await run_command(program, *args, cwd=cwd, timeout=timeout))
