"""Job summary builder backed by GITHUB_STEP_SUMMARY."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from gha_core.config import SUMMARY_VARIABLE, RunnerFiles
from gha_core.errors import InvalidSummaryArgument, MissingSummaryTarget, SummaryFileUnwritable
from gha_core.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SummaryTableCell:
    data: str
    header: bool = False
    colspan: Optional[str] = None
    rowspan: Optional[str] = None


TableCell = Union[str, SummaryTableCell]


def _wrap(tag: str, content: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None) -> str:
    rendered = "".join(f' {key}="{value}"' for key, value in (attrs or {}).items() if value)
    if content is None:
        return f"<{tag}{rendered}>"
    return f"<{tag}{rendered}>{content}</{tag}>"


class Summary:
    """Accumulates HTML fragments for the job summary.

    Fragments are concatenated in call order; nothing is escaped and nothing
    checks that opened elements get closed. Every ``add_*`` method returns
    the instance so calls can be chained.
    """

    def __init__(self, files: Optional[RunnerFiles] = None) -> None:
        self._files = files
        self._buffer = ""

    def _file_path(self) -> str:
        files = self._files or RunnerFiles.from_env()
        path = files.step_summary
        if not path:
            raise MissingSummaryTarget(SUMMARY_VARIABLE)
        if not os.path.isfile(path) or not os.access(path, os.W_OK):
            raise SummaryFileUnwritable(path)
        return path

    def write(self, overwrite: bool = False) -> "Summary":
        """Flush the buffer to the summary file and empty it.

        The buffer is left untouched when the target cannot be resolved or
        written.
        """
        path = self._file_path()
        mode = "w" if overwrite else "a"
        with open(path, mode, encoding="utf-8", errors="surrogateescape") as f:
            f.write(self._buffer)
        logger.debug("Wrote %d characters to %s", len(self._buffer), SUMMARY_VARIABLE)
        return self.empty_buffer()

    def clear(self) -> "Summary":
        return self.empty_buffer().write(overwrite=True)

    def stringify(self) -> str:
        return self._buffer

    def __str__(self) -> str:
        return self._buffer

    def is_empty_buffer(self) -> bool:
        return len(self._buffer) == 0

    def empty_buffer(self) -> "Summary":
        self._buffer = ""
        return self

    def add_raw(self, text: str, add_eol: bool = False) -> "Summary":
        self._buffer += text
        return self.add_eol() if add_eol else self

    def add_eol(self) -> "Summary":
        self._buffer += "\n"
        return self

    def add_code_block(self, code: str, lang: Optional[str] = None) -> "Summary":
        element = _wrap("pre", _wrap("code", code, {"lang": lang}))
        return self.add_raw(element, add_eol=True)

    def add_list(self, items: Iterable[str], ordered: bool = False) -> "Summary":
        tag = "ol" if ordered else "ul"
        list_items = "".join(_wrap("li", item) for item in items)
        return self.add_raw(_wrap(tag, list_items), add_eol=True)

    def start_table(self, headers: Optional[Sequence[str]] = None) -> "Summary":
        self.add_raw("<table>", add_eol=True)
        if headers:
            cells = "".join(_wrap("th", header) for header in headers)
            self.add_raw(_wrap("thead", _wrap("tr", cells)), add_eol=True)
        return self.add_raw("<tbody>", add_eol=True)

    def add_table_row(self, cells: Iterable[str]) -> "Summary":
        row = "".join(_wrap("td", cell) for cell in cells)
        return self.add_raw(_wrap("tr", row), add_eol=True)

    def end_table(self) -> "Summary":
        return self.add_raw("</tbody></table>", add_eol=True)

    def add_table(self, rows: Iterable[Iterable[TableCell]]) -> "Summary":
        """Render a whole table in one go; cells may be plain strings or ``SummaryTableCell``."""
        body = ""
        for row in rows:
            cells = ""
            for cell in row:
                if isinstance(cell, str):
                    cells += _wrap("td", cell)
                    continue
                tag = "th" if cell.header else "td"
                cells += _wrap(tag, cell.data, {"colspan": cell.colspan, "rowspan": cell.rowspan})
            body += _wrap("tr", cells)
        return self.add_raw(_wrap("table", body), add_eol=True)

    def add_details(self, label: str, content: str) -> "Summary":
        element = _wrap("details", _wrap("summary", label) + content)
        return self.add_raw(element, add_eol=True)

    def add_image(
        self,
        src: str,
        alt: Optional[str] = None,
        width: Optional[Any] = None,
        height: Optional[Any] = None,
    ) -> "Summary":
        if not src:
            raise InvalidSummaryArgument("add_image: missing 'src'")
        attrs = {"src": src, "alt": alt, "width": width, "height": height}
        return self.add_raw(_wrap("img", None, attrs), add_eol=True)

    def add_heading(self, text: str, level: Any = 1) -> "Summary":
        try:
            level = int(level)
        except (TypeError, ValueError):
            level = 1
        tag = f"h{min(max(level, 1), 6)}"
        return self.add_raw(_wrap(tag, text), add_eol=True)

    def add_separator(self) -> "Summary":
        return self.add_raw(_wrap("hr"), add_eol=True)

    def add_break(self) -> "Summary":
        return self.add_raw(_wrap("br"), add_eol=True)

    def add_quote(self, text: str, cite: Optional[str] = None) -> "Summary":
        return self.add_raw(_wrap("blockquote", text, {"cite": cite}), add_eol=True)

    def add_link(self, text: str, href: str) -> "Summary":
        return self.add_raw(_wrap("a", text, {"href": href}), add_eol=True)
