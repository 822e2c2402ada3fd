"""Tests for promptline.models: defaults, validation and immutability."""

from __future__ import annotations

import pydantic
import pytest

from promptline.models import (
    PromptConfig,
    PromptContext,
    RepositoryIdentity,
    UnpushedState,
    UnstagedState,
)


class TestPromptConfig:
    def test_defaults(self) -> None:
        config = PromptConfig()
        assert config.git_executable == "git"
        assert config.kubectl_executable == "kubectl"
        assert config.diff_timeout_seconds == 0.5
        assert config.kube_enabled is True

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            PromptConfig(diff_timeout_seconds=0)

    def test_frozen(self) -> None:
        config = PromptConfig()
        with pytest.raises(pydantic.ValidationError):
            config.git_executable = "other"  # type: ignore[misc]


class TestRepositoryIdentity:
    def test_display_without_tag(self) -> None:
        assert RepositoryIdentity(branch_or_commit="main").display == "main"

    def test_display_with_tag(self) -> None:
        identity = RepositoryIdentity(branch_or_commit="feature-x", tag="v1.0")
        assert identity.display == "feature-x [v1.0]"


class TestPromptContext:
    def test_defaults_are_absent(self) -> None:
        ctx = PromptContext(cwd="/tmp")
        assert ctx.message is None
        assert ctx.identity is None
        assert ctx.unstaged is None
        assert ctx.unpushed is None
        assert ctx.exit_code == 0
        assert not ctx.in_repository

    def test_in_repository(self) -> None:
        ctx = PromptContext(
            cwd="/repo",
            unstaged=UnstagedState.CLEAN,
            unpushed=UnpushedState.NO_UPSTREAM,
        )
        assert ctx.in_repository

    def test_frozen(self) -> None:
        ctx = PromptContext(cwd="/tmp")
        with pytest.raises(pydantic.ValidationError):
            ctx.cwd = "/elsewhere"  # type: ignore[misc]

    def test_round_trip(self) -> None:
        ctx = PromptContext(
            cwd="~",
            identity=RepositoryIdentity(branch_or_commit="abc123", tag="v2"),
            unstaged=UnstagedState.FILES_UNTRACKED,
            unpushed=UnpushedState.BEHIND,
            aws_region="us-east-1",
            exit_code=127,
        )
        assert PromptContext.model_validate_json(ctx.model_dump_json()) == ctx
