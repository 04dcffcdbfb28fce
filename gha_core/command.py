"""Workflow command encoding: value codec, escaping and the ``::name k=v::msg`` line format."""

from __future__ import annotations

import enum
import json
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from gha_core.config import ANNOTATION_ALIASES, ANNOTATION_KEYS, MISSING_COMMAND
from gha_core.errors import InvalidPropertyKey

_VERBATIM = re.compile(r"true|false|[0-9]+")

# Lowercased, underscore-free spelling -> canonical key.
_KEY_LOOKUP = {key.lower(): key for key in ANNOTATION_KEYS}
_KEY_LOOKUP.update({alias.lower(): key for alias, key in ANNOTATION_ALIASES.items()})


def to_command_value(value: Any) -> str:
    """Render ``value`` as the canonical wire string.

    Empty values become ``""``; ``true``, ``false`` and unsigned integer
    literals pass through unchanged; every other string is JSON-quoted so
    readers get an unambiguous token. Non-string values are JSON-encoded.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        if not value:
            return ""
        if _VERBATIM.fullmatch(value):
            return value
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, int) and value >= 0:
        return str(value)
    return json.dumps(value, ensure_ascii=False)


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class Annotation(enum.Enum):
    DEBUG = "debug"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


@dataclass(frozen=True)
class AnnotationProperties:
    """Location and title attached to an error, warning or notice."""

    title: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None
    end_line: Optional[int] = None
    col: Optional[int] = None
    end_column: Optional[int] = None

    def items(self) -> List[Tuple[str, Any]]:
        values = (self.title, self.file, self.line, self.end_line, self.col, self.end_column)
        return [(key, value) for key, value in zip(ANNOTATION_KEYS, values) if value is not None]


Properties = Union[None, AnnotationProperties, Mapping[str, Any], Iterable[Tuple[str, Any]]]


def canonical_key(key: str) -> Optional[str]:
    """Return the canonical annotation key for ``key``, or None if unknown."""
    return _KEY_LOOKUP.get(key.replace("_", "").lower())


def _pairs(properties: Properties) -> List[Tuple[str, Any]]:
    if properties is None:
        return []
    if isinstance(properties, AnnotationProperties):
        return properties.items()
    if isinstance(properties, Mapping):
        return list(properties.items())
    return [(key, value) for key, value in properties]


def normalize_properties(properties: Properties, caller: str) -> List[Tuple[str, Any]]:
    """Validate annotation properties against the allow-list.

    Keys are matched case-insensitively (``startLine``/``start_line`` both
    become ``line``). A repeated key keeps its first position and its last
    value. Raises ``InvalidPropertyKey`` for anything outside the set.
    """
    normalized = {}
    for key, value in _pairs(properties):
        canonical = canonical_key(key)
        if canonical is None:
            raise InvalidPropertyKey(key, caller)
        normalized[canonical] = value
    return list(normalized.items())


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return to_command_value(value)


def issue_command(command: Optional[str], message: Any = None, properties: Properties = None) -> str:
    """Build a workflow command line; printing it is up to the caller."""
    line = f"::{command or MISSING_COMMAND}"
    parts = []
    for key, value in _pairs(properties):
        if value is None:
            continue
        parts.append(f"{canonical_key(key) or key}={escape_property(_as_text(value))}")
    if parts:
        line += " " + ",".join(parts)
    line += "::"
    text = _as_text(message)
    if text:
        line += escape_data(text)
    return line


@dataclass(frozen=True)
class Command:
    name: Optional[str]
    message: Any = None
    properties: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return issue_command(self.name, self.message, self.properties)
