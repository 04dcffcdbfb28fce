"""Runner protocol constants and file-channel configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

ENV_PREFIX = "GITHUB"
INPUT_PREFIX = "INPUT_"
STATE_PREFIX = "STATE_"
DEBUG_VARIABLE = "RUNNER_DEBUG"
SUMMARY_VARIABLE = "GITHUB_STEP_SUMMARY"

CHANNELS = ("ENV", "PATH", "OUTPUT", "STATE")

DELIMITER_PREFIX = "ghadelimiter_"
MISSING_COMMAND = "missing.command"

# Canonical annotation keys, in rendering order.
ANNOTATION_KEYS = ("title", "file", "line", "endLine", "col", "endColumn")
ANNOTATION_ALIASES = {
    "startLine": "line",
    "startColumn": "col",
}

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_SERVER_URL = "https://github.com"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


def is_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when ``RUNNER_DEBUG`` is the integer 1."""
    env = os.environ if environ is None else environ
    try:
        return int(env.get(DEBUG_VARIABLE, "0")) == 1
    except ValueError:
        return False


def channel_variable(channel: str) -> str:
    return f"{ENV_PREFIX}_{channel.upper()}"


@dataclass(frozen=True)
class RunnerFiles:
    """File paths the runner hands to a step, resolved once.

    ``channels`` maps a logical channel (``ENV``, ``PATH``, ``OUTPUT``,
    ``STATE``) to the file named by ``GITHUB_<CHANNEL>``; ``step_summary``
    is the job summary file. Unset or empty variables resolve to ``None``.
    """

    channels: Mapping[str, Optional[str]] = field(default_factory=dict)
    step_summary: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RunnerFiles":
        env = os.environ if environ is None else environ
        channels = {name: env.get(channel_variable(name)) or None for name in CHANNELS}
        return cls(channels=channels, step_summary=env.get(SUMMARY_VARIABLE) or None)

    def path_for(self, channel: str) -> Optional[str]:
        return self.channels.get(channel.upper())
