"""Command line front end so ``run:`` shell steps can use the toolkit."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, NoReturn, Optional

import yaml

from gha_core import core
from gha_core.command import AnnotationProperties
from gha_core.context import Context
from gha_core.errors import GhaCoreError
from gha_core.log import setup_logger
from gha_core.summary import Summary


def fail(title: str, message: str) -> NoReturn:
    core.error(message, title=title)
    sys.exit(1)


def _add_annotation_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("message")
    parser.add_argument("--title")
    parser.add_argument("--file")
    parser.add_argument("--line", type=int)
    parser.add_argument("--end-line", type=int)
    parser.add_argument("--col", type=int)
    parser.add_argument("--end-column", type=int)


def _add_name_value(sub, name: str, help_text: str) -> None:
    p = sub.add_parser(name, help=help_text)
    p.add_argument("name")
    p.add_argument("value")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gha-core", description="GitHub Actions workflow command toolkit")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # variables, outputs, state
    _add_name_value(sub, "export-variable", "Export an environment variable to later steps")
    _add_name_value(sub, "set-output", "Set a step output")
    _add_name_value(sub, "save-state", "Save state for the post step")
    p = sub.add_parser("get-state", help="Print saved state")
    p.add_argument("name")
    p = sub.add_parser("set-secret", help="Mask a value in the log")
    p.add_argument("secret")
    p = sub.add_parser("add-path", help="Prepend a directory to PATH for later steps")
    p.add_argument("path")

    # inputs
    p = sub.add_parser("get-input", help="Print an action input")
    p.add_argument("name")
    p.add_argument("--required", action="store_true")
    p.add_argument("--no-trim", action="store_true")
    kind = p.add_mutually_exclusive_group()
    kind.add_argument("--multiline", action="store_true", help="Print one non-empty line per input line")
    kind.add_argument("--boolean", action="store_true", help="Print true/false, exit 1 when false")

    p = sub.add_parser("set-command-echo", help="Toggle echoing of workflow commands")
    p.add_argument("state", choices=["on", "off"])

    # logging
    for name in ("debug", "info"):
        p = sub.add_parser(name, help=f"Log a {name} message")
        p.add_argument("message")
    for name in ("notice", "warning", "error"):
        _add_annotation_args(sub.add_parser(name, help=f"Create a {name} annotation"))
    p = sub.add_parser("start-group", help="Start a collapsible log group")
    p.add_argument("name")
    sub.add_parser("end-group", help="End the current log group")
    p = sub.add_parser("set-failed", help="Report an error annotation and exit 1")
    p.add_argument("title")
    p.add_argument("message", nargs="?")
    p.add_argument("args", nargs="*", help="printf-style arguments for MESSAGE")

    # summary
    p_sum = sub.add_parser("summary", help="Append one element to the job summary")
    p_sum.add_argument("--overwrite", action="store_true", help="Replace the summary file instead of appending")
    s = p_sum.add_subparsers(dest="element", required=True)
    p = s.add_parser("raw")
    p.add_argument("text")
    p.add_argument("--eol", action="store_true")
    p = s.add_parser("heading")
    p.add_argument("text")
    p.add_argument("--level", type=int, default=1)
    p = s.add_parser("code")
    p.add_argument("code")
    p.add_argument("--lang")
    p = s.add_parser("list")
    p.add_argument("items", nargs="+")
    p.add_argument("--ordered", action="store_true")
    p = s.add_parser("table", help="Each ROW is a whitespace separated list of cells")
    p.add_argument("rows", nargs="*")
    p.add_argument("--headers", nargs="+")
    p = s.add_parser("details")
    p.add_argument("label")
    p.add_argument("content")
    p = s.add_parser("image")
    p.add_argument("src")
    p.add_argument("alt", nargs="?")
    p.add_argument("--width")
    p.add_argument("--height")
    p = s.add_parser("quote")
    p.add_argument("text")
    p.add_argument("--cite")
    p = s.add_parser("link")
    p.add_argument("text")
    p.add_argument("href")
    s.add_parser("separator")
    s.add_parser("break")
    s.add_parser("clear", help="Empty the summary file")

    # context
    p = sub.add_parser("context", help="Print the workflow run context")
    p.add_argument("--format", choices=["yaml", "json"], default="yaml")
    p.add_argument("--payload", action="store_true", help="Print the event payload instead")

    return parser


def _annotation_properties(args: argparse.Namespace) -> AnnotationProperties:
    return AnnotationProperties(
        title=args.title,
        file=args.file,
        line=args.line,
        end_line=args.end_line,
        col=args.col,
        end_column=args.end_column,
    )


def _summary(args: argparse.Namespace) -> int:
    summary = Summary()
    element = args.element
    if element == "clear":
        summary.clear()
        return 0

    if element == "raw":
        summary.add_raw(args.text, add_eol=args.eol)
    elif element == "heading":
        summary.add_heading(args.text, args.level)
    elif element == "code":
        summary.add_code_block(args.code, args.lang)
    elif element == "list":
        summary.add_list(args.items, ordered=args.ordered)
    elif element == "table":
        summary.start_table(args.headers)
        for row in args.rows:
            summary.add_table_row(row.split())
        summary.end_table()
    elif element == "details":
        summary.add_details(args.label, args.content)
    elif element == "image":
        summary.add_image(args.src, args.alt, args.width, args.height)
    elif element == "quote":
        summary.add_quote(args.text, args.cite)
    elif element == "link":
        summary.add_link(args.text, args.href)
    elif element == "separator":
        summary.add_separator()
    elif element == "break":
        summary.add_break()
    summary.write(overwrite=args.overwrite)
    return 0


def _context(args: argparse.Namespace) -> int:
    context = Context()
    data = context.payload if args.payload else context.as_dict()
    if args.format == "json":
        print(json.dumps(data, indent=2), flush=True)
    else:
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="", flush=True)
    return 0


def _get_input(args: argparse.Namespace) -> int:
    trim = not args.no_trim
    if args.multiline:
        for line in core.get_multiline_input(args.name, required=args.required, trim_whitespace=trim):
            print(line)
        return 0
    if args.boolean:
        value = core.get_boolean_input(args.name, required=args.required, trim_whitespace=trim)
        print("true" if value else "false")
        return 0 if value else 1
    print(core.get_input(args.name, required=args.required, trim_whitespace=trim), end="")
    return 0


def run(args: argparse.Namespace) -> int:
    cmd = args.cmd
    if cmd == "export-variable":
        core.export_variable(args.name, args.value)
    elif cmd == "set-output":
        core.set_output(args.name, args.value)
    elif cmd == "save-state":
        core.save_state(args.name, args.value)
    elif cmd == "get-state":
        print(core.get_state(args.name), end="")
    elif cmd == "set-secret":
        core.set_secret(args.secret)
    elif cmd == "add-path":
        core.add_path(args.path)
    elif cmd == "get-input":
        return _get_input(args)
    elif cmd == "set-command-echo":
        core.set_command_echo(args.state == "on")
    elif cmd == "debug":
        core.debug(args.message)
    elif cmd == "info":
        core.info(args.message)
    elif cmd in ("notice", "warning", "error"):
        getattr(core, cmd)(args.message, _annotation_properties(args))
    elif cmd == "start-group":
        core.start_group(args.name)
    elif cmd == "end-group":
        core.end_group()
    elif cmd == "set-failed":
        core.set_failed(args.title, args.message, *args.args)
    elif cmd == "summary":
        return _summary(args)
    elif cmd == "context":
        return _context(args)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()
    try:
        return run(args)
    except GhaCoreError as e:
        fail(type(e).__name__, str(e))


if __name__ == "__main__":
    sys.exit(main())
