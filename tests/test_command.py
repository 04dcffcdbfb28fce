import json

import pytest

from gha_core.command import (
    AnnotationProperties,
    Command,
    canonical_key,
    escape_data,
    escape_property,
    issue_command,
    normalize_properties,
    to_command_value,
)
from gha_core.errors import InvalidPropertyKey


class TestToCommandValue:
    @pytest.mark.parametrize("value", ["true", "false", "42", "0", "007"])
    def test_verbatim_literals(self, value):
        assert to_command_value(value) == value

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert to_command_value(value) == ""

    @pytest.mark.parametrize(
        "value",
        ["my value", "True", "-1", "4.2", "42\n", 'say "hi"', "back\\slash", "tab\tand\r\nnewline", "ünïcödé"],
    )
    def test_free_text_is_json_quoted_and_round_trips(self, value):
        encoded = to_command_value(value)
        assert encoded.startswith('"') and encoded.endswith('"')
        assert json.loads(encoded) == value

    def test_non_string_values(self):
        assert to_command_value(True) == "true"
        assert to_command_value(False) == "false"
        assert to_command_value(7) == "7"
        assert to_command_value({"a": [1, 2]}) == '{"a": [1, 2]}'


class TestEscaping:
    def test_escape_data(self):
        assert escape_data("100%\r\ndone") == "100%25%0D%0Adone"

    def test_escape_data_leaves_separators(self):
        assert escape_data("a:b,c") == "a:b,c"

    def test_escape_property(self):
        assert escape_property("a:b,c%\n") == "a%3Ab%2Cc%25%0A"

    def test_percent_escaped_first(self):
        assert escape_data("\n") == "%0A"
        assert escape_data("%0A") == "%250A"

    def test_reapplying_double_escapes(self):
        once = escape_property("a,b")
        assert escape_property(once) == "a%252Cb"

    def test_clean_input_is_stable(self):
        assert escape_data(escape_data("plain text")) == "plain text"


class TestIssueCommand:
    def test_error_with_line(self):
        assert issue_command("error", "boom", [("line", "5")]) == "::error line=5::boom"

    def test_group_without_properties(self):
        assert issue_command("group", "My Group", []) == "::group::My Group"

    def test_no_message(self):
        assert issue_command("endgroup") == "::endgroup::"

    def test_missing_command_name(self):
        assert issue_command(None, "oops") == "::missing.command::oops"
        assert issue_command("", "") == "::missing.command::"

    def test_properties_keep_insertion_order(self):
        line = issue_command("warning", "msg", [("title", "T"), ("file", "b.py"), ("line", 3), ("col", 1)])
        assert line == "::warning title=T,file=b.py,line=3,col=1::msg"
        line = issue_command("warning", "msg", [("col", 1), ("file", "b.py")])
        assert line == "::warning col=1,file=b.py::msg"

    def test_values_and_message_are_escaped(self):
        line = issue_command("error", "first\nsecond 50%", {"title": "a: b, c"})
        assert line == "::error title=a%3A b%2C c::first%0Asecond 50%25"

    def test_aliases_are_normalized(self):
        line = issue_command("notice", "x", [("startLine", 4), ("StartColumn", 2), ("end_line", 9)])
        assert line == "::notice line=4,col=2,endLine=9::x"

    def test_none_properties_are_skipped(self):
        assert issue_command("error", "x", {"title": None, "line": 2}) == "::error line=2::x"

    def test_annotation_properties(self):
        props = AnnotationProperties(title="Lint", file="app.py", line=10, end_line=12, col=1, end_column=5)
        line = issue_command("error", "bad", props)
        assert line == "::error title=Lint,file=app.py,line=10,endLine=12,col=1,endColumn=5::bad"

    def test_command_object(self):
        assert str(Command("debug", "hello")) == "::debug::hello"
        assert str(Command(None)) == "::missing.command::"


class TestNormalizeProperties:
    def test_canonical_key(self):
        assert canonical_key("ENDCOLUMN") == "endColumn"
        assert canonical_key("start_line") == "line"
        assert canonical_key("nope") is None

    def test_rejects_unknown_key(self):
        with pytest.raises(InvalidPropertyKey) as excinfo:
            normalize_properties({"file": "a", "severity": "high"}, "warning")
        assert excinfo.value.key == "severity"
        assert excinfo.value.caller == "warning"
        assert "severity" in str(excinfo.value)
        assert "warning" in str(excinfo.value)

    def test_repeated_key_keeps_position(self):
        pairs = normalize_properties([("line", 1), ("file", "a"), ("startLine", 7)], "error")
        assert pairs == [("line", 7), ("file", "a")]
