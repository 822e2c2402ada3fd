"""Kubernetes context collectors.

Thin wrappers over ``kubectl config``; both return ``None`` when kubectl is
missing, has no config, or reports nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from promptline.query import query

if TYPE_CHECKING:
    from pathlib import Path

    from promptline.models import PromptConfig


async def current_context(config: PromptConfig, cwd: Path | str | None = None) -> str | None:
    """Return the active cluster context name."""
    return await query(config.kubectl_executable, "config", "current-context", cwd=cwd)


async def current_namespace(config: PromptConfig, cwd: Path | str | None = None) -> str | None:
    """Return the namespace of the active context."""
    return await query(
        config.kubectl_executable,
        "config",
        "view",
        "--minify",
        "--output",
        "jsonpath={..namespace}",
        cwd=cwd,
    )
