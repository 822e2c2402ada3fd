"""Core data models for promptline."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

DEFAULT_DIFF_TIMEOUT_SECONDS = 0.5


class UnstagedState(StrEnum):
    """Working tree state relative to the index and HEAD."""

    CLEAN = "clean"
    FILES_CHANGED = "files_changed"
    FILES_UNTRACKED = "files_untracked"


class UnpushedState(StrEnum):
    """Local HEAD relative to its configured upstream."""

    SYNCED = "synced"
    AHEAD = "ahead"
    BEHIND = "behind"
    NO_UPSTREAM = "no_upstream"


class PromptConfig(BaseModel, frozen=True):
    """Settings for one prompt render."""

    git_executable: str = Field(default="git", description="Name or path of the git binary.")
    kubectl_executable: str = Field(
        default="kubectl", description="Name or path of the kubectl binary."
    )
    diff_timeout_seconds: float = Field(
        default=DEFAULT_DIFF_TIMEOUT_SECONDS,
        gt=0,
        description="Deadline for the working-tree diff probe.",
    )
    kube_enabled: bool = Field(default=True, description="Query kubectl for context/namespace.")


class RepositoryIdentity(BaseModel, frozen=True):
    """Best-available label for the current revision."""

    branch_or_commit: str = Field(description="Branch name, else short commit hash, else empty.")
    tag: str | None = None

    @property
    def display(self) -> str:
        if self.tag is None:
            return self.branch_or_commit
        return f"{self.branch_or_commit} [{self.tag}]"


class PromptContext(BaseModel, frozen=True):
    """Everything the renderer needs. Built once per invocation."""

    cwd: str = Field(description="Working directory, already abbreviated for display.")
    message: str | None = None
    identity: RepositoryIdentity | None = None
    unstaged: UnstagedState | None = Field(
        default=None, description="None when not inside a repository."
    )
    unpushed: UnpushedState | None = Field(
        default=None, description="None when not inside a repository."
    )
    kube_context: str | None = None
    kube_namespace: str | None = None
    aws_profile: str | None = None
    aws_region: str | None = None
    exit_code: int = 0

    @property
    def in_repository(self) -> bool:
        return self.unstaged is not None and self.unpushed is not None
