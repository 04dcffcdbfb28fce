"""GitHub Actions workflow commands, file commands, inputs and state."""

from __future__ import annotations

import contextlib
import os
import sys
from typing import Any, Iterator, List, NoReturn, Optional

from gha_core.command import (
    Annotation,
    Properties,
    issue_command,
    normalize_properties,
    to_command_value,
)
from gha_core.config import INPUT_PREFIX, STATE_PREFIX, RunnerFiles, is_debug
from gha_core.errors import InputNotBoolean, RequiredInputMissing
from gha_core.file_command import issue_file_command, prepare_key_value_message

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def issue(command: str, message: Any = "") -> None:
    print(issue_command(command, message), flush=True)


# Variables

def export_variable(name: str, value: Any, files: Optional[RunnerFiles] = None) -> None:
    os.environ[name] = value if isinstance(value, str) else to_command_value(value)
    issue_file_command("ENV", prepare_key_value_message(name, value), files)


def set_secret(secret: str) -> None:
    issue("add-mask", secret)


def add_path(input_path: str, files: Optional[RunnerFiles] = None) -> None:
    current = os.environ.get("PATH", "")
    os.environ["PATH"] = f"{input_path}{os.pathsep}{current}" if current else input_path
    issue_file_command("PATH", input_path, files)


# Inputs

def _input_variable(name: str) -> str:
    return f"{INPUT_PREFIX}{name.replace(' ', '_').upper()}"


def get_input(name: str, required: bool = False, trim_whitespace: bool = True) -> str:
    """Read an action input from ``INPUT_<NAME>``.

    An unset input reads as an empty string. ``RequiredInputMissing`` is
    raised when ``required`` is set and the value is empty.
    """
    value = os.environ.get(_input_variable(name), "")
    if required and not value:
        raise RequiredInputMissing(name)
    return value.strip() if trim_whitespace else value


def get_multiline_input(name: str, required: bool = False, trim_whitespace: bool = True) -> List[str]:
    value = get_input(name, required=required, trim_whitespace=False)
    lines = [line for line in value.split("\n") if line]
    if trim_whitespace:
        lines = [line.strip() for line in lines]
    return lines


def get_boolean_input(name: str, required: bool = False, trim_whitespace: bool = True) -> bool:
    value = get_input(name, required=required, trim_whitespace=trim_whitespace)
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise InputNotBoolean(name)


# Outputs

def set_output(name: str, value: Any, files: Optional[RunnerFiles] = None) -> None:
    issue_file_command("OUTPUT", prepare_key_value_message(name, value), files)


def set_command_echo(enabled: bool) -> None:
    issue("echo", "on" if enabled else "off")


# Results

def set_failed(title: str, message: Optional[str] = None, *args: Any) -> NoReturn:
    """Report a failure annotation and exit the step with status 1.

    ``message`` defaults to ``title`` and is %-formatted with ``args``.
    """
    text = title if message is None else message
    if args:
        text = text % args
    error(text, title=title)
    sys.exit(1)


# Logging commands

def debug(message: str) -> None:
    issue(Annotation.DEBUG.value, message)


def _annotate(kind: Annotation, message: Any, properties: Properties, extra: dict) -> None:
    caller = kind.value
    pairs = normalize_properties(properties, caller) + normalize_properties(extra, caller)
    text = str(message) if isinstance(message, BaseException) else message
    print(issue_command(kind.value, text, dict(pairs)), flush=True)


def error(message: Any, properties: Properties = None, **kwargs: Any) -> None:
    _annotate(Annotation.ERROR, message, properties, kwargs)


def warning(message: Any, properties: Properties = None, **kwargs: Any) -> None:
    _annotate(Annotation.WARNING, message, properties, kwargs)


def notice(message: Any, properties: Properties = None, **kwargs: Any) -> None:
    _annotate(Annotation.NOTICE, message, properties, kwargs)


def info(message: str) -> None:
    print(message, flush=True)


def start_group(name: str) -> None:
    issue("group", name)


def end_group() -> None:
    issue("endgroup")


@contextlib.contextmanager
def group(name: str) -> Iterator[None]:
    start_group(name)
    try:
        yield
    finally:
        end_group()


# Wrapper action state

def save_state(name: str, value: Any, files: Optional[RunnerFiles] = None) -> None:
    issue_file_command("STATE", prepare_key_value_message(name, value), files)


def get_state(name: str) -> str:
    return os.environ.get(f"{STATE_PREFIX}{name}", "")
