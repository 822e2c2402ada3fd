"""Collect every piece of prompt state into one PromptContext.

The repository probe runs first and gates all further git queries. After
that a single ``asyncio.gather`` fans out to every remaining collector and
waits for all of them; nothing is merged until every task has resolved.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from promptline import cloud, git, kube
from promptline.models import PromptConfig, PromptContext

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


async def _absent() -> None:
    return None


async def collect_prompt_context(
    cwd_display: str,
    *,
    exit_code: int = 0,
    message: str | None = None,
    config: PromptConfig | None = None,
    cwd: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> PromptContext:
    """Query git, kubectl and the environment, and assemble the result.

    Args:
        cwd_display: Working directory as it should appear in the prompt.
        exit_code: Exit status of the previous shell command.
        message: Optional free-text label shown after the directory.
        config: Executables and deadlines. Defaults to ``PromptConfig()``.
        cwd: Directory to run queries in. Defaults to the process cwd.
        env: Environment to read AWS settings from. Defaults to ``os.environ``.

    Returns:
        A fully resolved PromptContext. Git fields are ``None`` outside a
        repository.
    """
    config = config or PromptConfig()

    in_repository = await git.is_inside_work_tree(config, cwd)
    logger.debug("Inside work tree: %s", in_repository)

    if config.kube_enabled:
        kube_context = kube.current_context(config, cwd)
        kube_namespace = kube.current_namespace(config, cwd)
    else:
        kube_context = _absent()
        kube_namespace = _absent()

    identity = None
    unstaged = None
    unpushed = None
    if in_repository:
        (
            context_name,
            namespace,
            identity,
            unstaged,
            unpushed,
        ) = await asyncio.gather(
            kube_context,
            kube_namespace,
            git.resolve_identity(config, cwd),
            git.classify_unstaged(config, cwd),
            git.classify_unpushed(config, cwd),
        )
    else:
        context_name, namespace = await asyncio.gather(kube_context, kube_namespace)

    return PromptContext(
        cwd=cwd_display,
        message=message,
        identity=identity,
        unstaged=unstaged,
        unpushed=unpushed,
        kube_context=context_name,
        kube_namespace=namespace,
        aws_profile=cloud.aws_profile(env),
        aws_region=cloud.aws_region(env),
        exit_code=exit_code,
    )
