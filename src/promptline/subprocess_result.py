"""Shared subprocess result dataclass.

Used by every external query (git, kubectl). Launch failures and timeouts are
folded into the return code so callers only ever look at one shape.
"""

from __future__ import annotations

import dataclasses

# Reserved return codes. Real processes report 0-255, or a negative signal
# number when killed, so these never collide with a genuine exit status.
LAUNCH_FAILED = -1000
TIMED_OUT = -1001


@dataclasses.dataclass(frozen=True)
class SubprocessResult:
    """Result of a subprocess invocation. Internal transport only."""

    returncode: int
    stdout: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def launched(self) -> bool:
        """True if the process started and ran to completion."""
        return self.returncode not in (LAUNCH_FAILED, TIMED_OUT)
