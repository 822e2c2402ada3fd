"""Turn a PromptContext into the two prompt lines.

Pure functions only; the CLI does the printing. Colour is applied with
``click.style`` and is always emitted, because the shell captures the prompt
through a pipe and auto-detection would switch it off.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from promptline.models import UnpushedState, UnstagedState

if TYPE_CHECKING:
    from promptline.models import PromptContext

CHEVRON = "❯"

# Colour names are click.style foreground names; None means bold only.
CWD_COLOR = "cyan"
MESSAGE_COLOR = "green"
IDENTITY_COLOR = "magenta"
KUBE_COLOR = "bright_blue"
AWS_COLOR = "red"

UNSTAGED_COLORS: dict[UnstagedState, str] = {
    UnstagedState.CLEAN: "green",
    UnstagedState.FILES_CHANGED: "yellow",
    UnstagedState.FILES_UNTRACKED: "blue",
}

UNPUSHED_COLORS: dict[UnpushedState, str] = {
    UnpushedState.SYNCED: "green",
    UnpushedState.AHEAD: "yellow",
    UnpushedState.BEHIND: "blue",
    UnpushedState.NO_UPSTREAM: "white",
}


def _styled_fields(ctx: PromptContext) -> list[tuple[str, str]]:
    """Ordered (text, colour) pairs for every field that has a value."""
    candidates = [
        (ctx.cwd, CWD_COLOR),
        (ctx.message, MESSAGE_COLOR),
        (ctx.identity.display if ctx.identity is not None else None, IDENTITY_COLOR),
        (ctx.kube_context, KUBE_COLOR),
        (ctx.kube_namespace, KUBE_COLOR),
        (ctx.aws_profile, AWS_COLOR),
        (ctx.aws_region, AWS_COLOR),
    ]
    return [(text, color) for text, color in candidates if text is not None]


def display_fields(ctx: PromptContext) -> list[str]:
    """Return the top-line fields in display order, absent fields skipped."""
    return [text for text, _ in _styled_fields(ctx)]


def exit_code_color(exit_code: int) -> str:
    return "green" if exit_code == 0 else "red"


def indicator_colors(ctx: PromptContext) -> tuple[str, str | None, str | None]:
    """Colours of the exit-code, unstaged and unpushed chevrons.

    The last two are ``None`` outside a repository.
    """
    exit_color = exit_code_color(ctx.exit_code)
    if not ctx.in_repository:
        return exit_color, None, None
    return exit_color, UNSTAGED_COLORS[ctx.unstaged], UNPUSHED_COLORS[ctx.unpushed]


def render_prompt(ctx: PromptContext) -> str:
    """Render the full prompt block: blank line, status line, chevrons."""
    top_line = " ".join(
        click.style(text, fg=color, bold=True) for text, color in _styled_fields(ctx)
    )
    chevrons = "".join(
        click.style(CHEVRON, fg=color, bold=True) for color in indicator_colors(ctx)
    )
    return f"\n{top_line}\n{chevrons} "
