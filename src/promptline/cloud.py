"""AWS credential context, read from the environment."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

AWS_PROFILE_ENV = "AWS_PROFILE"

# Checked in order; the first one set wins.
AWS_REGION_ENVS = ("AWS_REGION", "AWS_DEFAULT_REGION", "AWS_PROFILE_REGION")


def aws_profile(env: Mapping[str, str] | None = None) -> str | None:
    """Return the active AWS profile, or ``None`` if unset."""
    environ = os.environ if env is None else env
    return environ.get(AWS_PROFILE_ENV)


def aws_region(env: Mapping[str, str] | None = None) -> str | None:
    """Return the active AWS region, or ``None`` if no region variable is set."""
    environ = os.environ if env is None else env
    for name in AWS_REGION_ENVS:
        value = environ.get(name)
        if value is not None:
            return value
    return None
