"""Side-channel file commands (GITHUB_ENV, GITHUB_PATH, GITHUB_OUTPUT, GITHUB_STATE)."""

from __future__ import annotations

import os
import uuid
from typing import Any, Optional

from gha_core.command import to_command_value
from gha_core.config import DELIMITER_PREFIX, RunnerFiles, channel_variable
from gha_core.errors import MissingChannelFile, MissingChannelVariable
from gha_core.log import get_logger

logger = get_logger(__name__)


def _new_delimiter() -> str:
    return f"{DELIMITER_PREFIX}{uuid.uuid4()}"


def prepare_key_value_message(key: str, value: Any) -> str:
    """Build a heredoc block ``KEY<<DELIM\\nVALUE\\nDELIM`` with a fresh delimiter.

    The value line is ``to_command_value(value)``: free text is JSON-quoted,
    so ``set_output("x", "my value")`` gives later steps ``"my value"`` with
    the quotes. ``true``, ``false`` and unsigned integers stay bare.

    The writer adds the trailing newline. A delimiter that happens to occur
    in the key or value is thrown away and regenerated.
    """
    converted = to_command_value(value)
    delimiter = _new_delimiter()
    while delimiter in key or delimiter in converted:
        delimiter = _new_delimiter()
    return f"{key}<<{delimiter}\n{converted}\n{delimiter}"


def issue_file_command(channel: str, message: Any, files: Optional[RunnerFiles] = None) -> None:
    """Append ``message`` and a newline to the file behind ``GITHUB_<CHANNEL>``.

    String messages are written as given; anything else goes through
    ``to_command_value``. The target file must already exist.
    """
    files = files or RunnerFiles.from_env()
    variable = channel_variable(channel)
    path = files.path_for(channel)
    if not path:
        logger.debug('Unable to find environment variable "%s"', variable)
        raise MissingChannelVariable(variable)
    if not os.path.isfile(path):
        logger.debug("Missing file at path: %s", path)
        raise MissingChannelFile(path)

    text = message if isinstance(message, str) else to_command_value(message)
    logger.debug("Appending %d bytes to %s", len(text) + 1, variable)
    with open(path, "a", encoding="utf-8", errors="surrogateescape") as f:
        f.write(text + "\n")
