"""Python toolkit for GitHub Actions workflow commands and job summaries."""

from gha_core.command import (
    Annotation,
    AnnotationProperties,
    Command,
    escape_data,
    escape_property,
    issue_command,
    to_command_value,
)
from gha_core.config import RunnerFiles, is_debug
from gha_core.context import Context
from gha_core.core import (
    add_path,
    debug,
    end_group,
    error,
    export_variable,
    get_boolean_input,
    get_input,
    get_multiline_input,
    get_state,
    group,
    info,
    notice,
    save_state,
    set_command_echo,
    set_failed,
    set_output,
    set_secret,
    start_group,
    warning,
)
from gha_core.file_command import issue_file_command, prepare_key_value_message
from gha_core.summary import Summary, SummaryTableCell

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "AnnotationProperties",
    "Command",
    "Context",
    "RunnerFiles",
    "Summary",
    "SummaryTableCell",
    "add_path",
    "debug",
    "end_group",
    "error",
    "escape_data",
    "escape_property",
    "export_variable",
    "get_boolean_input",
    "get_input",
    "get_multiline_input",
    "get_state",
    "group",
    "info",
    "is_debug",
    "issue_command",
    "issue_file_command",
    "notice",
    "prepare_key_value_message",
    "save_state",
    "set_command_echo",
    "set_failed",
    "set_output",
    "set_secret",
    "start_group",
    "to_command_value",
    "warning",
]
